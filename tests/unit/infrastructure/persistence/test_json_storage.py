"""Tests pour le repository JSON de la liste de suivi."""

import json
import uuid

import pytest

from src.core.entities.watch_item import WatchItem, WatchItemType, WatchStatus
from src.infrastructure.persistence import JsonWatchlistStorage


@pytest.fixture
def storage(tmp_path) -> JsonWatchlistStorage:
    return JsonWatchlistStorage(tmp_path / "watchlist.json")


class TestSaveAndLoad:
    """Tests de sauvegarde et rechargement."""

    def test_round_trip_preserves_order_and_fields(
        self, storage, matrix, breaking_bad, finished_show
    ):
        """Sauvegarde puis rechargement : meme liste, meme ordre, memes champs."""
        items = [breaking_bad, matrix, finished_show]

        storage.save(items)
        loaded = storage.load()

        assert loaded == items
        assert [item.title for item in loaded] == ["Breaking Bad", "Matrix", "The Wire"]

    def test_file_uses_symbolic_names(self, storage, breaking_bad):
        """Les enums sont ecrites par nom, pas par numero."""
        storage.save([breaking_bad])
        data = json.loads(storage.file_path.read_text(encoding="utf-8"))

        assert data == [
            {
                "id": breaking_bad.id,
                "title": "Breaking Bad",
                "type": "TVShow",
                "status": "InProgress",
                "lastWatchedEpisode": 5,
            }
        ]

    def test_missing_episode_written_as_null(self, storage, matrix):
        storage.save([matrix])
        data = json.loads(storage.file_path.read_text(encoding="utf-8"))

        assert data[0]["lastWatchedEpisode"] is None
        assert data[0]["status"] == "NotStarted"

    def test_file_is_indented(self, storage, matrix):
        storage.save([matrix])
        assert "\n  " in storage.file_path.read_text(encoding="utf-8")

    def test_save_overwrites_previous_content(self, storage, matrix, breaking_bad):
        """Chaque sauvegarde remplace le fichier en entier."""
        storage.save([matrix, breaking_bad])
        storage.save([breaking_bad])

        assert storage.load() == [breaking_bad]

    def test_save_empty_list(self, storage, matrix):
        storage.save([matrix])
        storage.save([])

        assert storage.load() == []
        assert json.loads(storage.file_path.read_text(encoding="utf-8")) == []

    def test_save_creates_parent_directory(self, tmp_path, matrix):
        storage = JsonWatchlistStorage(tmp_path / "data" / "nested" / "watchlist.json")
        storage.save([matrix])

        assert storage.load() == [matrix]

    def test_unicode_title(self, storage):
        item = WatchItem.create("Amélie", WatchItemType.MOVIE)
        storage.save([item])

        assert "Amélie" in storage.file_path.read_text(encoding="utf-8")
        assert storage.load()[0].title == "Amélie"

    def test_save_failure_propagates(self, tmp_path, matrix):
        """Une erreur d'ecriture remonte a l'appelant."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        storage = JsonWatchlistStorage(blocker / "watchlist.json")

        with pytest.raises(OSError):
            storage.save([matrix])


class TestLoadFailSoft:
    """Un fichier absent ou illisible donne une liste vide, jamais une exception."""

    def test_missing_file(self, storage):
        assert storage.load() == []

    @pytest.mark.parametrize(
        "content",
        [
            "",
            "not json",
            "{\"title\": \"Matrix\"}",
            "[1, 2, 3]",
            "[{\"title\": \"Matrix\"}]",
            "[{\"id\": \"abc\", \"title\": \"Matrix\", \"type\": \"Movie\", \"status\": \"NotStarted\"}]",
        ],
    )
    def test_malformed_content(self, storage, content):
        storage.file_path.write_text(content, encoding="utf-8")
        assert storage.load() == []

    def test_unknown_enum_name(self, storage):
        record = {
            "id": str(uuid.uuid4()),
            "title": "Matrix",
            "type": "Documentary",
            "status": "NotStarted",
            "lastWatchedEpisode": None,
        }
        storage.file_path.write_text(json.dumps([record]), encoding="utf-8")

        assert storage.load() == []

    @pytest.mark.parametrize("episode", [0, -3, "5", 2.5, True])
    def test_invalid_episode(self, storage, episode):
        record = {
            "id": str(uuid.uuid4()),
            "title": "Dark",
            "type": "TVShow",
            "status": "InProgress",
            "lastWatchedEpisode": episode,
        }
        storage.file_path.write_text(json.dumps([record]), encoding="utf-8")

        assert storage.load() == []

    def test_duplicate_ids(self, storage, matrix):
        record = {
            "id": matrix.id,
            "title": "Matrix",
            "type": "Movie",
            "status": "NotStarted",
            "lastWatchedEpisode": None,
        }
        storage.file_path.write_text(json.dumps([record, record]), encoding="utf-8")

        assert storage.load() == []

    def test_binary_garbage(self, storage):
        storage.file_path.write_bytes(b"\xff\xfe\x00garbage")
        assert storage.load() == []

    def test_path_is_directory(self, tmp_path):
        """Un chemin illisible (repertoire) est traite comme une liste vide."""
        directory = tmp_path / "watchlist.json"
        directory.mkdir()

        assert JsonWatchlistStorage(directory).load() == []

    def test_null_document(self, storage):
        storage.file_path.write_text("null", encoding="utf-8")
        assert storage.load() == []


class TestLoadCompatibility:
    """Lecture des variantes acceptees du format."""

    def test_pascal_case_keys(self, storage):
        """Les fichiers avec cles PascalCase sont acceptes."""
        item_id = str(uuid.uuid4())
        record = {
            "Id": item_id,
            "Title": "Severance",
            "Type": "TVShow",
            "Status": "Completed",
            "LastWatchedEpisode": 9,
        }
        storage.file_path.write_text(json.dumps([record]), encoding="utf-8")

        loaded = storage.load()

        assert loaded == [
            WatchItem(
                id=item_id,
                title="Severance",
                type=WatchItemType.TV_SHOW,
                status=WatchStatus.COMPLETED,
                last_watched_episode=9,
            )
        ]

    def test_episode_above_input_limit_is_kept(self, storage, matrix):
        """Un episode stocke au-dela de la borne de saisie ne vide pas la liste."""
        storage.save([matrix])
        records = json.loads(storage.file_path.read_text(encoding="utf-8"))
        records.append(
            {
                "id": str(uuid.uuid4()),
                "title": "One Piece",
                "type": "TVShow",
                "status": "InProgress",
                "lastWatchedEpisode": 2_000_000,
            }
        )
        storage.file_path.write_text(json.dumps(records), encoding="utf-8")

        loaded = storage.load()

        assert len(loaded) == 2
        assert loaded[0] == matrix
        assert loaded[1].last_watched_episode == 2_000_000

    def test_missing_episode_key(self, storage):
        record = {
            "id": str(uuid.uuid4()),
            "title": "Matrix",
            "type": "movie",
            "status": "notstarted",
        }
        storage.file_path.write_text(json.dumps([record]), encoding="utf-8")

        loaded = storage.load()

        assert len(loaded) == 1
        assert loaded[0].type == WatchItemType.MOVIE
        assert loaded[0].status == WatchStatus.NOT_STARTED
        assert loaded[0].last_watched_episode is None
