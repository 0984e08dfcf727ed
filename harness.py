"""
Harnais de tests de contrats SmartPy
====================================
Environnement de chaîne de test au-dessus d'un scénario SmartPy:

- get_signers(): identités de test déterministes et ordonnées
- get_contract_factory(name): résolution d'un contrat par son nom
- ContractFactory.deploy(): origination liée au signataire

deploy_fixture() reconstruit tout (scénario, signataires, instance) à
chaque appel: aucun état n'est partagé entre deux cas de test.
"""

import logging
from collections import namedtuple
from typing import List, Optional, Sequence, Tuple

import smartpy as sp

import config

logger = logging.getLogger(__name__)


class HarnessError(Exception):
    """Erreur de mise en place d'un cas de test."""


class ContractNotFoundError(HarnessError, LookupError):
    def __init__(self, name):
        super().__init__(f"Contract not found: {name}")
        self.name = name


class SignerError(HarnessError, ValueError):
    pass


class Signer:
    """Identité de test nommée."""

    def __init__(self, name, account=None):
        self.name = name
        self.account = account if account is not None else sp.test_account(name)

    @property
    def address(self):
        return self.account.address

    def __repr__(self):
        return f"Signer({self.name!r})"


def split_signers(signers: Sequence, roles: int = config.NAMED_ROLES) -> Tuple[list, list]:
    """Séparer les `roles` premiers signataires du reste."""
    if len(signers) < roles:
        raise SignerError(f"Need at least {roles} signers, got {len(signers)}")
    return list(signers[:roles]), list(signers[roles:])


class ContractFactory:
    """Contrat déployable, lié au signataire qui l'origine."""

    def __init__(self, scenario, contract_class, signer: Signer, name: str):
        self.scenario = scenario
        self.contract_class = contract_class
        self.signer = signer
        self.name = name

    def deploy(self, *args):
        # SmartPy ne donne pas l'initiateur au constructeur: on le passe
        contract = self.contract_class(self.signer.address, *args)
        scenario = self.scenario
        scenario += contract
        logger.info("Deployed %s (signer=%s)", self.name, self.signer.name)
        return contract


class ChainEnvironment:
    """Environnement de chaîne de test pour un scénario."""

    def __init__(self, scenario, module):
        self.scenario = scenario
        self.module = module

    def get_signers(self, count: Optional[int] = None) -> List[Signer]:
        if count is None:
            count = config.SIGNER_COUNT
        if count < config.NAMED_ROLES:
            raise SignerError(f"Need at least {config.NAMED_ROLES} signers, got {count}")

        logger.debug("Provisioning %d signers", count)
        return [Signer(f"signer{i}") for i in range(count)]

    def get_contract_factory(self, name: str, signer: Optional[Signer] = None) -> ContractFactory:
        contract_class = getattr(self.module, name, None)
        if contract_class is None:
            raise ContractNotFoundError(name)

        if signer is None:
            signer = self.get_signers()[0]
        logger.debug("Resolved contract %s", name)
        return ContractFactory(self.scenario, contract_class, signer, name)


Deployment = namedtuple(
    "Deployment", ["scenario", "contract", "owner", "addr1", "addr2", "addrs"]
)


def deploy_fixture(title, contract_name=None, module=None):
    """Scénario neuf, signataires neufs, instance neuve."""
    if module is None:
        from marketplace import main as module
    contract_name = contract_name or config.CONTRACT_NAME

    scenario = sp.test_scenario(title, module)
    env = ChainEnvironment(scenario, module)

    (owner, addr1, addr2), addrs = split_signers(env.get_signers())
    factory = env.get_contract_factory(contract_name, signer=owner)
    contract = factory.deploy()

    return Deployment(scenario, contract, owner, addr1, addr2, addrs)
