"""
Fixtures pytest partagees pour les tests Watchlist.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock du port IWatchlistRepository
- Elements de liste types (film, serie, termine)
- Console Rich capturant la sortie
- Settings de test avec chemins temporaires
"""

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from src.config import Settings
from src.core.entities.watch_item import WatchItem, WatchItemType, WatchStatus
from src.core.ports.repositories import IWatchlistRepository


@pytest.fixture
def mock_storage() -> MagicMock:
    """
    Mock de IWatchlistRepository pour les tests.

    load() retourne une liste vide par defaut ; save() ne fait rien et
    permet de compter les sauvegardes.
    """
    mock = MagicMock(spec=IWatchlistRepository)
    mock.load.return_value = []
    return mock


@pytest.fixture
def capture_console() -> Console:
    """Console Rich sans couleur ecrivant dans un buffer (console.file.getvalue())."""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def matrix() -> WatchItem:
    """Film non commence."""
    return WatchItem(title="Matrix", type=WatchItemType.MOVIE)


@pytest.fixture
def breaking_bad() -> WatchItem:
    """Serie en cours a l'episode 5."""
    return WatchItem(
        title="Breaking Bad",
        type=WatchItemType.TV_SHOW,
        status=WatchStatus.IN_PROGRESS,
        last_watched_episode=5,
    )


@pytest.fixture
def finished_show() -> WatchItem:
    """Serie terminee sans progression enregistree."""
    return WatchItem(
        title="The Wire",
        type=WatchItemType.TV_SHOW,
        status=WatchStatus.COMPLETED,
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le fichier de liste et les logs.
    """
    return Settings(
        data_file=tmp_path / "watchlist.json",
        log_file=tmp_path / "logs" / "test.log",
        clear_screen=False,
        pause_after_action=False,
    )
