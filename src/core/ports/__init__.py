"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IWatchlistRepository : Stockage de la liste de suivi
"""

from src.core.ports.repositories import IWatchlistRepository

__all__ = [
    "IWatchlistRepository",
]
