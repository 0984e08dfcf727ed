import config

config.configure_logging()
