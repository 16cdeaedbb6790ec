"""Entity Store - the single injectable holder of session data.

Holds the Request, User and Notification collections plus the session
keys (current user, current view). Each collection is backed by one blob
key; the key is loaded once at construction with a default and saved
after every mutation of that key.

Rules:
1. NO GLOBALS - every component receives the store it works on
2. NEVER FATAL - a corrupt or unavailable blob falls back to its default,
   a failed write is logged; neither reaches the caller
3. INVARIANTS HERE - unique ids/protocols/emails, immutable protocol and
   append-only timelines are checked on every write
4. READS RETURN COPIES - callers cannot mutate the collections in place
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from sgi.application.dtos.persistence import (
    decode_notifications,
    decode_requests,
    decode_user,
    decode_users,
    decode_view,
    encode_notifications,
    encode_requests,
    encode_user,
    encode_users,
    encode_view,
)
from sgi.application.ports.blob_store import BlobStoreProtocol
from sgi.application.services.base import LoggingMixin
from sgi.config.seed_data import seed_notifications, seed_requests, seed_users
from sgi.domain.errors.lifecycle import RequestNotFoundError
from sgi.domain.errors.notification import NotificationNotFoundError
from sgi.domain.errors.registration import DuplicateEmailError
from sgi.domain.errors.storage import StorageReadFailure, StorageWriteFailure
from sgi.domain.models.lighting_request import LightingRequest
from sgi.domain.models.notification import Notification
from sgi.domain.models.user import ANONYMOUS_USER, SessionView, User

T = TypeVar("T")

USERS_KEY = "users"
REQUESTS_KEY = "requests"
NOTIFICATIONS_KEY = "notifications"
CURRENT_USER_KEY = "currentUser"
CURRENT_VIEW_KEY = "currentView"


@dataclass(frozen=True)
class StoreDefaults:
    """Default contents for each key, used when a blob is absent or corrupt.

    Attributes:
        users: Factory for the users default. Default: two seed accounts.
        requests: Factory for the requests default. Default: five seed requests.
        notifications: Factory for the notifications default.
            Default: three seed notifications.
        current_user: Logged-in user default. Default: anonymous placeholder.
        current_view: Session view default. Default: login.
    """

    users: Callable[[], list[User]] = seed_users
    requests: Callable[[], list[LightingRequest]] = seed_requests
    notifications: Callable[[], list[Notification]] = seed_notifications
    current_user: User = ANONYMOUS_USER
    current_view: SessionView = SessionView.LOGIN

    @classmethod
    def empty(cls) -> StoreDefaults:
        """Defaults with no seed data at all."""
        return cls(users=list, requests=list, notifications=list)


@dataclass
class _Collections:
    users: list[User] = field(default_factory=list)
    requests: list[LightingRequest] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)
    current_user: User = ANONYMOUS_USER
    current_view: SessionView = SessionView.LOGIN


class EntityStore(LoggingMixin):
    """Injectable store for requests, users, notifications and session keys.

    Only the lifecycle engine adds or replaces requests, only the
    notification emitter touches notifications and only the authentication
    service touches users and session keys.

    Attributes:
        _blobs: Persistence substrate.
        _data: In-memory collections (authoritative for the session).
    """

    def __init__(
        self,
        blob_store: BlobStoreProtocol,
        defaults: StoreDefaults | None = None,
    ) -> None:
        """Load every key from the blob store.

        Args:
            blob_store: Key/value persistence substrate.
            defaults: Defaults per key (seed data when omitted).
        """
        self._blobs = blob_store
        self._init_logger(component="store")
        defaults = defaults or StoreDefaults()

        self._data = _Collections(
            users=self._load(USERS_KEY, decode_users, defaults.users),
            requests=self._load(REQUESTS_KEY, decode_requests, defaults.requests),
            notifications=self._load(
                NOTIFICATIONS_KEY, decode_notifications, defaults.notifications
            ),
            current_user=self._load(
                CURRENT_USER_KEY, decode_user, lambda: defaults.current_user
            ),
            current_view=self._load(
                CURRENT_VIEW_KEY, decode_view, lambda: defaults.current_view
            ),
        )

    # -------- Requests --------

    def requests(self) -> list[LightingRequest]:
        """All requests in insertion order."""
        return list(self._data.requests)

    def get_request(self, request_id: int) -> LightingRequest | None:
        for request in self._data.requests:
            if request.id == request_id:
                return request
        return None

    def has_protocol(self, protocol: str) -> bool:
        return any(r.protocol == protocol for r in self._data.requests)

    def next_request_id(self) -> int:
        return max((r.id for r in self._data.requests), default=0) + 1

    def add_request(self, request: LightingRequest) -> None:
        """Append a newly created request.

        Raises:
            ValueError: If the id or protocol is already taken.
        """
        if self.get_request(request.id) is not None:
            raise ValueError(f"Request id already exists: {request.id}")
        if self.has_protocol(request.protocol):
            raise ValueError(f"Protocol already exists: {request.protocol}")
        self._data.requests.append(request)
        self._persist(REQUESTS_KEY, encode_requests, self._data.requests)

    def replace_request(self, updated: LightingRequest) -> None:
        """Replace a request with an updated copy of itself.

        Raises:
            RequestNotFoundError: If no request has updated.id.
            ValueError: If the protocol changed or the timeline was not
                extended append-only.
        """
        for index, current in enumerate(self._data.requests):
            if current.id != updated.id:
                continue
            if current.protocol != updated.protocol:
                raise ValueError(
                    f"Protocol is immutable: {current.protocol} -> {updated.protocol}"
                )
            prefix = updated.timeline[: len(current.timeline)]
            if prefix != current.timeline:
                raise ValueError(
                    f"Timeline of {current.protocol} is append-only; "
                    "existing events cannot be changed or removed"
                )
            self._data.requests[index] = updated
            self._persist(REQUESTS_KEY, encode_requests, self._data.requests)
            return
        raise RequestNotFoundError(updated.id)

    # -------- Users --------

    def users(self) -> list[User]:
        return list(self._data.users)

    def find_user_by_email(self, email: str) -> User | None:
        for user in self._data.users:
            if user.email == email:
                return user
        return None

    def next_user_id(self) -> int:
        return max((u.id for u in self._data.users), default=0) + 1

    def add_user(self, user: User) -> None:
        """Append a registered user.

        Raises:
            DuplicateEmailError: If the email is already registered.
        """
        if self.find_user_by_email(user.email) is not None:
            raise DuplicateEmailError(user.email)
        self._data.users.append(user)
        self._persist(USERS_KEY, encode_users, self._data.users)

    # -------- Notifications --------

    def notifications(self) -> list[Notification]:
        """All notifications, most recent first."""
        return list(self._data.notifications)

    def next_notification_id(self) -> int:
        return max((n.id for n in self._data.notifications), default=0) + 1

    def prepend_notification(self, notification: Notification) -> None:
        if any(n.id == notification.id for n in self._data.notifications):
            raise ValueError(f"Notification id already exists: {notification.id}")
        self._data.notifications.insert(0, notification)
        self._persist(NOTIFICATIONS_KEY, encode_notifications, self._data.notifications)

    def update_notification(self, notification: Notification) -> None:
        """Replace one notification by id.

        Raises:
            NotificationNotFoundError: If the id is unknown.
        """
        for index, current in enumerate(self._data.notifications):
            if current.id == notification.id:
                self._data.notifications[index] = notification
                self._persist(
                    NOTIFICATIONS_KEY, encode_notifications, self._data.notifications
                )
                return
        raise NotificationNotFoundError(notification.id)

    def replace_notifications(self, notifications: list[Notification]) -> None:
        """Replace the notification list wholesale (same ids, same order)."""
        if [n.id for n in notifications] != [n.id for n in self._data.notifications]:
            raise ValueError("replace_notifications must keep ids and order unchanged")
        self._data.notifications = list(notifications)
        self._persist(NOTIFICATIONS_KEY, encode_notifications, self._data.notifications)

    # -------- Session --------

    @property
    def current_user(self) -> User:
        return self._data.current_user

    @property
    def current_view(self) -> SessionView:
        return self._data.current_view

    def set_session(self, user: User, view: SessionView) -> None:
        """Set the logged-in user and the view (two independent keys)."""
        self._data.current_user = user
        self._persist(CURRENT_USER_KEY, encode_user, user)
        self._data.current_view = view
        self._persist(CURRENT_VIEW_KEY, encode_view, view)

    # -------- Persistence --------

    def _load(self, key: str, decode: Callable[[Any], T], default: Callable[[], T]) -> T:
        """Load one key, falling back to its default on any failure."""
        log = self._log_operation("load", key=key)
        try:
            raw = self._blobs.load(key, None)
            if raw is None:
                log.debug("blob_missing_using_default")
                return default()
            value = decode(raw)
        except StorageReadFailure as e:
            log.warning("blob_read_failed_using_default", reason=e.reason)
            return default()
        except Exception as e:
            failure = StorageReadFailure(key, f"{type(e).__name__}: {e}")
            log.warning("blob_read_failed_using_default", reason=failure.reason)
            return default()
        log.debug("blob_loaded")
        return value

    def _persist(self, key: str, encode: Callable[[Any], Any], value: Any) -> None:
        """Save one key; failures are logged and never raised."""
        log = self._log_operation("save", key=key)
        try:
            self._blobs.save(key, encode(value))
        except StorageWriteFailure as e:
            log.warning("blob_write_failed", reason=e.reason)
        except Exception as e:
            failure = StorageWriteFailure(key, f"{type(e).__name__}: {e}")
            log.warning("blob_write_failed", reason=failure.reason)
