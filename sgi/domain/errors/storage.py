"""Persistence errors for the key/value blob store.

These errors never escape the entity store: a failed read falls back to
the documented default for the key and a failed write is logged. They
exist so adapters can signal failures with a precise type.
"""

from __future__ import annotations

from sgi.domain.exceptions import SgiError


class StorageError(SgiError):
    """Base error for blob store operations.

    Attributes:
        key: The blob key involved in the failure.
    """

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(message)


class StorageReadFailure(StorageError):
    """Raised when a blob is unavailable or its content is corrupt."""

    def __init__(self, key: str, reason: str) -> None:
        self.reason = reason
        super().__init__(key, f"Failed to read blob '{key}': {reason}")


class StorageWriteFailure(StorageError):
    """Raised when a blob cannot be written."""

    def __init__(self, key: str, reason: str) -> None:
        self.reason = reason
        super().__init__(key, f"Failed to write blob '{key}': {reason}")
