"""
Configuration du harnais de tests, lue depuis l'environnement.
"""

import logging
import os
from collections import namedtuple

# Nombre de rôles nommés (owner, addr1, addr2)
NAMED_ROLES = 3

Settings = namedtuple("Settings", ["contract_name", "signer_count", "log_level"])


def _signer_count(raw, default=5):
    try:
        count = int(raw)
    except (TypeError, ValueError):
        return default
    # Au moins un signataire par rôle nommé
    return max(count, NAMED_ROLES)


def load():
    """Relire l'environnement. Une valeur non numérique garde le défaut."""
    return Settings(
        contract_name=os.getenv("HARNESS_CONTRACT_NAME", "NFTMarketplace"),
        signer_count=_signer_count(os.getenv("HARNESS_SIGNER_COUNT")),
        log_level=os.getenv("HARNESS_LOG_LEVEL", "INFO").upper(),
    )


_settings = load()

CONTRACT_NAME = _settings.contract_name
SIGNER_COUNT = _settings.signer_count
LOG_LEVEL = _settings.log_level


def configure_logging(level=None):
    level = level or LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
