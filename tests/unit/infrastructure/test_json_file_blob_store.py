"""Unit tests for JsonFileBlobStore."""

from pathlib import Path

import pytest

from sgi.application.dtos.persistence import encode_requests
from sgi.application.services.entity_store import REQUESTS_KEY, EntityStore, StoreDefaults
from sgi.config.seed_data import seed_requests
from sgi.domain.errors import StorageReadFailure, StorageWriteFailure
from sgi.infrastructure.adapters.json_file_blob_store import JsonFileBlobStore


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def store(data_dir: Path) -> JsonFileBlobStore:
    return JsonFileBlobStore(data_dir)


class TestJsonFileBlobStore:
    """Tests for file-backed blobs."""

    def test_missing_key_returns_default(self, store: JsonFileBlobStore) -> None:
        assert store.load("users", []) == []

    def test_save_then_load(self, store: JsonFileBlobStore, data_dir: Path) -> None:
        store.save("currentView", "admin")
        assert store.load("currentView", "login") == "admin"
        assert (data_dir / "currentView.json").exists()

    def test_save_creates_directory(self, store: JsonFileBlobStore, data_dir: Path) -> None:
        assert not data_dir.exists()
        store.save("users", [])
        assert data_dir.is_dir()

    def test_overwrite_leaves_no_temp_file(
        self, store: JsonFileBlobStore, data_dir: Path
    ) -> None:
        store.save("users", [1])
        store.save("users", [1, 2])
        assert store.load("users", None) == [1, 2]
        assert sorted(p.name for p in data_dir.iterdir()) == ["users.json"]

    def test_non_ascii_preserved(self, store: JsonFileBlobStore, data_dir: Path) -> None:
        store.save("requests", encode_requests(seed_requests()[:1]))
        text = (data_dir / "requests.json").read_text(encoding="utf-8")
        assert "Nova Marabá" in text

    def test_corrupt_file_raises_read_failure(
        self, store: JsonFileBlobStore, data_dir: Path
    ) -> None:
        data_dir.mkdir(parents=True)
        (data_dir / "users.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageReadFailure) as exc_info:
            store.load("users", [])
        assert exc_info.value.key == "users"

    def test_unserializable_value_raises_write_failure(
        self, store: JsonFileBlobStore
    ) -> None:
        with pytest.raises(StorageWriteFailure):
            store.save("users", {"bad": object()})

    @pytest.mark.parametrize("key", ["", "../escape", ".hidden", "a/b"])
    def test_invalid_keys(self, store: JsonFileBlobStore, key: str) -> None:
        with pytest.raises(ValueError):
            store.path_for(key)

    def test_entity_store_survives_restart(self, tmp_path: Path) -> None:
        blobs = JsonFileBlobStore(tmp_path)
        first = EntityStore(blobs, StoreDefaults.empty())
        first.add_request(seed_requests()[0])

        second = EntityStore(JsonFileBlobStore(tmp_path), StoreDefaults.empty())
        assert second.requests() == [seed_requests()[0]]

    def test_entity_store_recovers_from_corrupt_file(self, tmp_path: Path) -> None:
        (tmp_path / f"{REQUESTS_KEY}.json").write_text("[{]", encoding="utf-8")
        store = EntityStore(JsonFileBlobStore(tmp_path))
        assert store.requests() == seed_requests()
