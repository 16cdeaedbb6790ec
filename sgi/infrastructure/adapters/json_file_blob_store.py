"""JSON file blob store.

One `<key>.json` file per key inside a data directory. Writes go to a
temporary sibling first and are moved into place, so a crash mid-write
leaves the previous blob intact.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import structlog

from sgi.domain.errors.storage import StorageReadFailure, StorageWriteFailure

logger = structlog.get_logger(__name__)


class JsonFileBlobStore:
    """BlobStoreProtocol backed by JSON files on disk.

    Attributes:
        _directory: Directory holding the blob files.
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    def path_for(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid blob key: {key!r}")
        return self._directory / f"{key}.json"

    def load(self, key: str, default: Any) -> Any:
        path = self.path_for(key)
        if not path.exists():
            return default
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageReadFailure(key, f"{type(e).__name__}: {e}") from e

    def save(self, key: str, value: Any) -> None:
        path = self.path_for(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(value, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, path)
        except (OSError, TypeError, ValueError) as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageWriteFailure(key, f"{type(e).__name__}: {e}") from e
        logger.debug("blob_file_written", key=key, path=str(path))
