"""
NFTMarketplace - propriétaire et prix plancher
==============================================
Contrat déployé par la suite de tests de déploiement.

Le contrat ne porte que l'état observé par les tests:
- le propriétaire enregistré à l'origination
- le prix minimum de mise en vente (1 mutez)

Vues:
- owner()
- get_list_price()
"""

import smartpy as sp

@sp.module
def main():

    class NFTMarketplace(sp.Contract):
        """
        Enregistre l'initiateur comme propriétaire et fixe le prix
        plancher des mises en vente à 1 mutez.
        """

        def __init__(self, owner):
            self.data.owner = owner
            self.data.list_price = sp.mutez(1)

        # ============== PROPRIÉTÉ ==============

        @sp.entrypoint
        def transfer_ownership(self, new_owner):
            """Seul le propriétaire courant désigne son successeur."""
            sp.cast(new_owner, sp.address)
            assert sp.sender == self.data.owner, "Not owner"
            assert new_owner != sp.sender, "Same owner"
            self.data.owner = new_owner

        # ============== VUES ==============

        @sp.onchain_view
        def owner(self):
            return self.data.owner

        @sp.onchain_view
        def get_list_price(self):
            """Prix minimum de mise en vente."""
            return self.data.list_price
