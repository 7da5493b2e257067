"""
Entités de la liste de suivi.

Un WatchItem représente un film ou une série suivi par l'utilisateur,
avec son statut de visionnage et le dernier épisode regardé.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

# Bornes du numéro d'épisode saisi par l'utilisateur
MIN_EPISODE = 1
MAX_EPISODE = 1_000_000


class WatchItemType(Enum):
    """Type de média suivi.

    Les valeurs sont les noms symboliques écrits dans le fichier JSON.
    """

    MOVIE = "Movie"
    TV_SHOW = "TVShow"

    @classmethod
    def from_name(cls, name: str) -> "WatchItemType":
        """Retrouve un type depuis son nom symbolique (insensible à la casse)."""
        return _lookup(cls, name)


class WatchStatus(Enum):
    """Statut de visionnage d'un élément."""

    NOT_STARTED = "NotStarted"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"

    @classmethod
    def from_name(cls, name: str) -> "WatchStatus":
        """Retrouve un statut depuis son nom symbolique (insensible à la casse)."""
        return _lookup(cls, name)


def _lookup(enum_cls, name: str):
    wanted = name.strip().lower()
    for member in enum_cls:
        if member.value.lower() == wanted:
            return member
    raise ValueError(f"{name!r} n'est pas un {enum_cls.__name__} valide")


def symbolic_names(enum_cls) -> list[str]:
    """Liste les noms symboliques d'une enum, dans l'ordre de déclaration."""
    return [member.value for member in enum_cls]


@dataclass
class WatchItem:
    """
    Un élément de la liste de suivi.

    Attributs :
        title : Titre affiché, sans espaces superflus
        type : Film ou série, fixé à la création
        status : Statut de visionnage (NotStarted à la création)
        last_watched_episode : Dernier épisode regardé, None tant qu'aucune
            progression n'a été enregistrée
        id : Identifiant unique (UUID), jamais réutilisé ni modifié
    """

    title: str
    type: WatchItemType
    status: WatchStatus = WatchStatus.NOT_STARTED
    last_watched_episode: Optional[int] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def create(cls, title: str, item_type: WatchItemType) -> "WatchItem":
        """
        Crée un nouvel élément non commencé.

        Raises:
            ValueError: Si le titre est vide ou ne contient que des espaces.
        """
        clean_title = title.strip()
        if not clean_title:
            raise ValueError("Le titre ne peut pas être vide")
        return cls(title=clean_title, type=item_type)

    def record_episode(self, episode: int) -> None:
        """
        Enregistre le dernier épisode regardé.

        Le statut passe à InProgress, sauf si l'élément est déjà terminé :
        un élément Completed le reste.

        Raises:
            ValueError: Si l'épisode est hors de [1, 1 000 000].
        """
        if not MIN_EPISODE <= episode <= MAX_EPISODE:
            raise ValueError(
                f"Episode {episode} hors limites ({MIN_EPISODE}-{MAX_EPISODE})"
            )
        self.last_watched_episode = episode
        if self.status != WatchStatus.COMPLETED:
            self.status = WatchStatus.IN_PROGRESS

    def mark_completed(self) -> None:
        """Marque l'élément comme terminé."""
        self.status = WatchStatus.COMPLETED

    def matches(self, title: str, item_type: WatchItemType) -> bool:
        """Vrai si même titre (insensible à la casse) et même type."""
        return (
            self.type == item_type
            and self.title.strip().casefold() == title.strip().casefold()
        )

    @property
    def is_movie(self) -> bool:
        return self.type == WatchItemType.MOVIE

    @property
    def progress_label(self) -> str:
        """Progression courte pour l'affichage en liste."""
        if self.last_watched_episode is None:
            return "No progress"
        return f"Ep {self.last_watched_episode}"
