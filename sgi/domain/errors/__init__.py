"""Domain errors for SGI Cidade.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from SgiError.
"""

from sgi.domain.errors.coordinates import InvalidCoordinatesError
from sgi.domain.errors.lifecycle import (
    ActorNotAuthorizedError,
    IllegalTransitionError,
    LifecycleError,
    OutOfOrderEventError,
    RequestNotFoundError,
)
from sgi.domain.errors.notification import NotificationNotFoundError
from sgi.domain.errors.registration import DuplicateEmailError
from sgi.domain.errors.storage import (
    StorageError,
    StorageReadFailure,
    StorageWriteFailure,
)

__all__: list[str] = [
    "ActorNotAuthorizedError",
    "DuplicateEmailError",
    "IllegalTransitionError",
    "InvalidCoordinatesError",
    "LifecycleError",
    "NotificationNotFoundError",
    "OutOfOrderEventError",
    "RequestNotFoundError",
    "StorageError",
    "StorageReadFailure",
    "StorageWriteFailure",
]
