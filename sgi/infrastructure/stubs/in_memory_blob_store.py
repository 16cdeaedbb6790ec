"""In-memory blob store stub.

Blobs are deep-copied on the way in and out so callers cannot mutate
stored state by reference. Read and write failures can be injected per
key to exercise the entity store's recovery paths.
"""

from __future__ import annotations

import copy
from typing import Any

from sgi.domain.errors.storage import StorageReadFailure, StorageWriteFailure


class InMemoryBlobStore:
    """In-memory BlobStoreProtocol implementation.

    This stub is NOT suitable for production use.

    Attributes:
        _blobs: Stored values by key.
        _failing_reads: Keys whose load raises StorageReadFailure.
        _failing_writes: Keys whose save raises StorageWriteFailure.
        save_count: Number of successful saves per key.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._blobs: dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self._failing_reads: set[str] = set()
        self._failing_writes: set[str] = set()
        self.save_count: dict[str, int] = {}

    def load(self, key: str, default: Any) -> Any:
        if key in self._failing_reads:
            raise StorageReadFailure(key, "simulated read failure")
        if key not in self._blobs:
            return default
        return copy.deepcopy(self._blobs[key])

    def save(self, key: str, value: Any) -> None:
        if key in self._failing_writes:
            raise StorageWriteFailure(key, "simulated write failure")
        self._blobs[key] = copy.deepcopy(value)
        self.save_count[key] = self.save_count.get(key, 0) + 1

    # Test helpers

    def raw(self, key: str) -> Any:
        """Stored value for a key without copying (None if absent)."""
        return self._blobs.get(key)

    def put_raw(self, key: str, value: Any) -> None:
        """Store a value directly, bypassing failure injection."""
        self._blobs[key] = value

    def fail_reads(self, *keys: str) -> None:
        self._failing_reads.update(keys)

    def fail_writes(self, *keys: str) -> None:
        self._failing_writes.update(keys)

    def clear_failures(self) -> None:
        self._failing_reads.clear()
        self._failing_writes.clear()

    def clear(self) -> None:
        self._blobs.clear()
        self.save_count.clear()
        self.clear_failures()
