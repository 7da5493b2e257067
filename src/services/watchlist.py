"""
Service de la liste de suivi.

Le WatchlistService possede la liste en memoire pour toute la duree du
processus et applique les regles metier (creation, progression, suppression).
Chaque modification reussie declenche exactement une sauvegarde complete.

Les positions manipulees ici sont 1-based, comme dans l'affichage CLI.
"""

from typing import Optional, Sequence

from loguru import logger

from src.core.entities.watch_item import WatchItem, WatchItemType
from src.core.ports.repositories import IWatchlistRepository


class WatchlistService:
    """
    Service applicatif pour la liste de suivi.

    Example:
        service = WatchlistService.open(storage)
        item = service.add("The Matrix", WatchItemType.MOVIE)
        service.record_episode(1, 3)
        service.remove(1)
    """

    def __init__(
        self,
        storage: IWatchlistRepository,
        items: Optional[list[WatchItem]] = None,
    ) -> None:
        """
        Initialise le service.

        Args:
            storage: Repository utilise pour chaque sauvegarde
            items: Liste initiale (vide si None)
        """
        self._storage = storage
        self._items: list[WatchItem] = items if items is not None else []

    @classmethod
    def open(cls, storage: IWatchlistRepository) -> "WatchlistService":
        """Charge la liste depuis le repository et retourne le service."""
        items = storage.load()
        logger.info("Liste de suivi ouverte", count=len(items))
        return cls(storage=storage, items=items)

    @property
    def items(self) -> Sequence[WatchItem]:
        """Vue en lecture seule de la liste, dans l'ordre d'insertion."""
        return tuple(self._items)

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def get(self, position: int) -> WatchItem:
        """
        Retourne l'element a la position donnee (1-based).

        Raises:
            IndexError: Si la position est hors de [1, count].
        """
        if not 1 <= position <= len(self._items):
            raise IndexError(f"Position {position} hors de la liste (1-{len(self._items)})")
        return self._items[position - 1]

    def find_duplicate(self, title: str, item_type: WatchItemType) -> Optional[WatchItem]:
        """Retourne un element de meme titre et meme type, s'il existe."""
        return next((item for item in self._items if item.matches(title, item_type)), None)

    def add(self, title: str, item_type: WatchItemType) -> WatchItem:
        """
        Cree un element non commence, l'ajoute en fin de liste et sauvegarde.

        Les doublons titre/type sont autorises : la confirmation est
        du ressort de l'appelant (voir find_duplicate).
        """
        item = WatchItem.create(title, item_type)
        self._items.append(item)
        self.save()
        logger.info("Element ajoute", item_id=item.id, title=item.title, type=item.type.value)
        return item

    def record_episode(self, position: int, episode: int) -> WatchItem:
        """Enregistre le dernier episode regarde et sauvegarde."""
        item = self.get(position)
        item.record_episode(episode)
        self.save()
        logger.info(
            "Progression mise a jour",
            item_id=item.id,
            title=item.title,
            episode=episode,
            status=item.status.value,
        )
        return item

    def mark_completed(self, position: int) -> WatchItem:
        """Marque l'element comme termine et sauvegarde."""
        item = self.get(position)
        item.mark_completed()
        self.save()
        logger.info("Element termine", item_id=item.id, title=item.title)
        return item

    def remove(self, position: int) -> WatchItem:
        """Retire l'element a la position donnee et sauvegarde."""
        item = self.get(position)
        del self._items[position - 1]
        self.save()
        logger.info("Element supprime", item_id=item.id, title=item.title)
        return item

    def save(self) -> None:
        """Sauvegarde la liste complete."""
        self._storage.save(self._items)
