"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(fichier JSON, en mémoire pour les tests, etc.).
"""

from abc import ABC, abstractmethod

from src.core.entities.watch_item import WatchItem


class IWatchlistRepository(ABC):
    """
    Interface de stockage de la liste de suivi.

    La liste est toujours chargée et sauvegardée en entier : pas d'écriture
    incrémentale. Le repository ne garde aucune référence vers la liste
    entre deux appels.
    """

    @abstractmethod
    def load(self) -> list[WatchItem]:
        """Charge la liste complète. Retourne une liste vide si rien n'est lisible."""
        ...

    @abstractmethod
    def save(self, items: list[WatchItem]) -> None:
        """Remplace le contenu stocké par la liste complète."""
        ...
