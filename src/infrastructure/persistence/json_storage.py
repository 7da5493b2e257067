"""
Implementation JSON du repository de la liste de suivi.

Implemente l'interface IWatchlistRepository en stockant la liste complete
dans un fichier JSON indente, lisible et editable a la main.

Format du fichier (tableau ordonne) :
    [
      {
        "id": "3f1c...",
        "title": "The Matrix",
        "type": "Movie",
        "status": "NotStarted",
        "lastWatchedEpisode": null
      }
    ]
"""

import json
import uuid
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from src.core.entities.watch_item import (
    MIN_EPISODE,
    WatchItem,
    WatchItemType,
    WatchStatus,
)
from src.core.ports.repositories import IWatchlistRepository

# Cles du fichier, avec leur variante PascalCase (fichiers ecrits par
# l'ancienne version de l'application)
_KEYS = {
    "id": ("id", "Id"),
    "title": ("title", "Title"),
    "type": ("type", "Type"),
    "status": ("status", "Status"),
    "last_watched_episode": ("lastWatchedEpisode", "LastWatchedEpisode"),
}


class CorruptWatchlistError(ValueError):
    """Le contenu du fichier ne decrit pas une liste de suivi valide."""


def _field(record: dict[str, Any], name: str, required: bool = True) -> Any:
    """Lit un champ en acceptant camelCase ou PascalCase."""
    for key in _KEYS[name]:
        if key in record:
            return record[key]
    if required:
        raise CorruptWatchlistError(f"Champ manquant : {_KEYS[name][0]}")
    return None


class JsonWatchlistStorage(IWatchlistRepository):
    """
    Repository fichier JSON pour la liste de suivi.

    Le chargement ne leve jamais d'exception : un fichier absent, illisible
    ou corrompu donne une liste vide (trace INFO dans les logs).
    La sauvegarde reecrit le fichier en entier et laisse remonter les
    erreurs d'ecriture.
    """

    def __init__(self, file_path: Path) -> None:
        """
        Initialise le repository.

        Args :
            file_path : Chemin du fichier JSON (cree a la premiere sauvegarde)
        """
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def _to_entity(self, record: Any) -> WatchItem:
        """
        Convertit un enregistrement JSON en entite domaine.

        Raises:
            CorruptWatchlistError: Si l'enregistrement est incomplet ou invalide.
        """
        if not isinstance(record, dict):
            raise CorruptWatchlistError(f"Element inattendu : {record!r}")

        raw_id = _field(record, "id")
        title = _field(record, "title")
        if not isinstance(raw_id, str) or not isinstance(title, str) or not title.strip():
            raise CorruptWatchlistError("Identifiant ou titre invalide")

        episode = _field(record, "last_watched_episode", required=False)
        if episode is not None:
            if isinstance(episode, bool) or not isinstance(episode, int):
                raise CorruptWatchlistError(f"Episode invalide : {episode!r}")
            # La borne haute ne concerne que la saisie
            if episode < MIN_EPISODE:
                raise CorruptWatchlistError(f"Episode invalide : {episode}")

        try:
            return WatchItem(
                id=str(uuid.UUID(raw_id)),
                title=title.strip(),
                type=WatchItemType.from_name(str(_field(record, "type"))),
                status=WatchStatus.from_name(str(_field(record, "status"))),
                last_watched_episode=episode,
            )
        except ValueError as e:
            raise CorruptWatchlistError(str(e)) from e

    def _to_record(self, item: WatchItem) -> dict[str, Any]:
        """Convertit une entite domaine en enregistrement JSON."""
        return {
            "id": item.id,
            "title": item.title,
            "type": item.type.value,
            "status": item.status.value,
            "lastWatchedEpisode": item.last_watched_episode,
        }

    def _parse(self, text: str) -> list[WatchItem]:
        data: Optional[Any] = json.loads(text)
        if data is None:
            return []
        if not isinstance(data, list):
            raise CorruptWatchlistError("Le fichier ne contient pas une liste")

        items = [self._to_entity(record) for record in data]
        ids = [item.id for item in items]
        if len(set(ids)) != len(ids):
            raise CorruptWatchlistError("Identifiants en double")
        return items

    def load(self) -> list[WatchItem]:
        """
        Charge la liste depuis le fichier.

        Retourne :
            La liste dans l'ordre du fichier, ou une liste vide si le fichier
            est absent, illisible ou corrompu.
        """
        try:
            if not self._file_path.exists():
                logger.debug("Aucune liste de suivi existante", path=str(self._file_path))
                return []
            items = self._parse(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            # json.JSONDecodeError, UnicodeDecodeError et CorruptWatchlistError
            # sont des ValueError
            logger.info(
                "Liste de suivi illisible, demarrage avec une liste vide",
                path=str(self._file_path),
                error=str(e),
            )
            return []

        logger.debug("Liste de suivi chargee", path=str(self._file_path), count=len(items))
        return items

    def save(self, items: list[WatchItem]) -> None:
        """
        Reecrit le fichier avec la liste complete.

        Raises:
            OSError: Si le fichier ne peut pas etre ecrit.
        """
        payload = [self._to_record(item) for item in items]
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8"
        )
        logger.debug("Liste de suivi sauvegardee", path=str(self._file_path), count=len(items))
