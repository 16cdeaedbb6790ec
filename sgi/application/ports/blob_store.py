"""Blob store port.

This module defines the abstract interface for the persistence substrate:
a generic key/value store holding one JSON-compatible blob per key.

Rules:
1. ONE BLOB PER KEY - keys are independent, there is no transaction
   spanning several keys
2. FAIL LOUD - adapters raise StorageReadFailure / StorageWriteFailure;
   recovery (fallback to defaults, logging) is the entity store's job
"""

from __future__ import annotations

from typing import Any, Protocol


class BlobStoreProtocol(Protocol):
    """Protocol for key/value blob persistence.

    Methods:
        load: Read the blob for a key, or the default if absent
        save: Replace the blob for a key
    """

    def load(self, key: str, default: Any) -> Any:
        """Load the blob stored under key.

        Args:
            key: Blob key (e.g. "requests").
            default: Value returned when the key has never been saved.

        Returns:
            The decoded JSON-compatible value, or default.

        Raises:
            StorageReadFailure: If the blob exists but cannot be read/decoded.
        """
        ...

    def save(self, key: str, value: Any) -> None:
        """Replace the blob stored under key.

        Args:
            key: Blob key.
            value: JSON-compatible value.

        Raises:
            StorageWriteFailure: If the blob cannot be written.
        """
        ...
