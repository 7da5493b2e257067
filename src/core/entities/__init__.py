"""
Entités métier représentant les concepts du domaine.

Exports:
- WatchItem: Un film ou une série suivi avec sa progression
- WatchItemType: Film ou série
- WatchStatus: Statut de visionnage
"""

from src.core.entities.watch_item import (
    MAX_EPISODE,
    MIN_EPISODE,
    WatchItem,
    WatchItemType,
    WatchStatus,
    symbolic_names,
)

__all__ = [
    "MAX_EPISODE",
    "MIN_EPISODE",
    "WatchItem",
    "WatchItemType",
    "WatchStatus",
    "symbolic_names",
]
