"""Persisted blob shapes.

Pydantic records describe the JSON stored under each blob key. Loading
validates the raw blob against these records before converting to domain
objects, so a corrupt or hand-edited blob is detected up front.

Keys and shapes:
    users          list[UserRecord]
    requests       list[RequestRecord]
    notifications  list[NotificationRecord]
    currentUser    UserRecord
    currentView    "login" | "citizen" | "admin"

Decoders raise pydantic.ValidationError for shape problems and
ValueError / SgiError for domain invariant violations; the entity store
turns either into a StorageReadFailure.
"""

from __future__ import annotations

from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, TypeAdapter

from sgi.domain.models.coordinates import Coordinates
from sgi.domain.models.lighting_request import (
    LightingRequest,
    Priority,
    Reporter,
    RequestStatus,
    TimelineEvent,
    TimelineEventKind,
)
from sgi.domain.models.notification import Notification
from sgi.domain.models.user import SessionView, User, UserRole


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore")


class CoordinatesRecord(_Record):
    lat: float
    lng: float


class ReporterRecord(_Record):
    name: str
    email: str
    phone: str = ""


class TimelineEventRecord(_Record):
    """Timeline event as stored.

    date and time are written for readability of the blob; occurred_at is
    the source of truth when reading back.
    """

    occurred_at: AwareDatetime
    date: str = ""
    time: str = ""
    title: str
    description: str = ""
    kind: TimelineEventKind

    @classmethod
    def from_domain(cls, event: TimelineEvent) -> TimelineEventRecord:
        return cls(
            occurred_at=event.occurred_at,
            date=event.date,
            time=event.time,
            title=event.title,
            description=event.description,
            kind=event.kind,
        )

    def to_domain(self) -> TimelineEvent:
        return TimelineEvent(
            occurred_at=self.occurred_at,
            title=self.title,
            description=self.description,
            kind=self.kind,
        )


class RequestRecord(_Record):
    id: int = Field(ge=1)
    protocol: str = Field(min_length=1)
    type: str
    address: str
    status: RequestStatus
    priority: Priority
    coordinates: CoordinatesRecord
    created_at: AwareDatetime
    reporter: ReporterRecord
    description: str = ""
    timeline: list[TimelineEventRecord] = Field(min_length=1)
    assigned_team: str | None = None
    estimated_time: str | None = None

    @classmethod
    def from_domain(cls, request: LightingRequest) -> RequestRecord:
        return cls(
            id=request.id,
            protocol=request.protocol,
            type=request.type,
            address=request.address,
            status=request.status,
            priority=request.priority,
            coordinates=CoordinatesRecord(
                lat=request.coordinates.lat, lng=request.coordinates.lng
            ),
            created_at=request.created_at,
            reporter=ReporterRecord(
                name=request.reporter.name,
                email=request.reporter.email,
                phone=request.reporter.phone,
            ),
            description=request.description,
            timeline=[TimelineEventRecord.from_domain(e) for e in request.timeline],
            assigned_team=request.assigned_team,
            estimated_time=request.estimated_time,
        )

    def to_domain(self) -> LightingRequest:
        return LightingRequest(
            id=self.id,
            protocol=self.protocol,
            type=self.type,
            address=self.address,
            status=self.status,
            priority=self.priority,
            coordinates=Coordinates(lat=self.coordinates.lat, lng=self.coordinates.lng),
            created_at=self.created_at,
            reporter=Reporter(
                name=self.reporter.name,
                email=self.reporter.email,
                phone=self.reporter.phone,
            ),
            description=self.description,
            timeline=tuple(e.to_domain() for e in self.timeline),
            assigned_team=self.assigned_team,
            estimated_time=self.estimated_time,
        )


class UserRecord(_Record):
    id: int = Field(ge=0)
    name: str
    email: str
    phone: str = ""
    credential_secret: str
    role: UserRole

    @classmethod
    def from_domain(cls, user: User) -> UserRecord:
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            credential_secret=user.credential_secret,
            role=user.role,
        )

    def to_domain(self) -> User:
        return User(
            id=self.id,
            name=self.name,
            email=self.email,
            phone=self.phone,
            credential_secret=self.credential_secret,
            role=self.role,
        )


class NotificationRecord(_Record):
    id: int = Field(ge=1)
    message: str
    timestamp: AwareDatetime
    read: bool = False

    @classmethod
    def from_domain(cls, notification: Notification) -> NotificationRecord:
        return cls(
            id=notification.id,
            message=notification.message,
            timestamp=notification.timestamp,
            read=notification.read,
        )

    def to_domain(self) -> Notification:
        return Notification(
            id=self.id,
            message=self.message,
            timestamp=self.timestamp,
            read=self.read,
        )


_REQUESTS = TypeAdapter(list[RequestRecord])
_USERS = TypeAdapter(list[UserRecord])
_NOTIFICATIONS = TypeAdapter(list[NotificationRecord])
_VIEW = TypeAdapter(SessionView)


def _require_unique(values: list[Any], what: str) -> None:
    seen: set[Any] = set()
    for value in values:
        if value in seen:
            raise ValueError(f"duplicate {what}: {value!r}")
        seen.add(value)


def encode_requests(requests: list[LightingRequest]) -> list[dict[str, Any]]:
    return [RequestRecord.from_domain(r).model_dump(mode="json") for r in requests]


def decode_requests(raw: Any) -> list[LightingRequest]:
    requests = [record.to_domain() for record in _REQUESTS.validate_python(raw)]
    _require_unique([r.id for r in requests], "request id")
    _require_unique([r.protocol for r in requests], "protocol")
    return requests


def encode_users(users: list[User]) -> list[dict[str, Any]]:
    return [encode_user(u) for u in users]


def decode_users(raw: Any) -> list[User]:
    users = [record.to_domain() for record in _USERS.validate_python(raw)]
    _require_unique([u.email for u in users], "email")
    return users


def encode_user(user: User) -> dict[str, Any]:
    return UserRecord.from_domain(user).model_dump(mode="json")


def decode_user(raw: Any) -> User:
    return UserRecord.model_validate(raw).to_domain()


def encode_notifications(notifications: list[Notification]) -> list[dict[str, Any]]:
    return [
        NotificationRecord.from_domain(n).model_dump(mode="json") for n in notifications
    ]


def decode_notifications(raw: Any) -> list[Notification]:
    notifications = [
        record.to_domain() for record in _NOTIFICATIONS.validate_python(raw)
    ]
    _require_unique([n.id for n in notifications], "notification id")
    return notifications


def encode_view(view: SessionView) -> str:
    return view.value


def decode_view(raw: Any) -> SessionView:
    return _VIEW.validate_python(raw)
