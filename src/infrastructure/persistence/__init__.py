"""
Module de persistance de la liste de suivi.

- json_storage.py : Repository fichier JSON (chargement tolerant, reecriture complete)

Usage:
    from src.infrastructure.persistence import JsonWatchlistStorage

    storage = JsonWatchlistStorage(Path("watchlist.json"))
    items = storage.load()
    storage.save(items)
"""

from src.infrastructure.persistence.json_storage import (
    CorruptWatchlistError,
    JsonWatchlistStorage,
)

__all__ = [
    "CorruptWatchlistError",
    "JsonWatchlistStorage",
]
