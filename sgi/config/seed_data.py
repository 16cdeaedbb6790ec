"""Default blob contents used when a persisted key is missing or corrupt.

Seed requests span every status and priority; seed accounts cover both
roles. The gazetteer lists known neighbourhoods of Marabá, PA.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from sgi.config.lighting_config import (
    BURNT_OUT_LAMP,
    DAMAGED_POLE,
    FLICKERING_LIGHT,
    LAMP_ON_DURING_DAY,
)
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
from sgi.domain.models.suggestion import GazetteerEntry
from sgi.domain.models.user import User, UserRole

_LOCAL_TZ = timezone(timedelta(hours=-3))


def _at(day: int, hour: int, minute: int) -> datetime:
    return datetime(2025, 12, day, hour, minute, tzinfo=_LOCAL_TZ)


def _received(when: datetime, description: str = "Protocol generated automatically") -> TimelineEvent:
    return TimelineEvent(
        occurred_at=when,
        title="Request Received",
        description=description,
        kind=TimelineEventKind.RECEIVED,
    )


def _reviewed(when: datetime) -> TimelineEvent:
    return TimelineEvent(
        occurred_at=when,
        title="Under Review",
        description="Request assessed by the technical team",
        kind=TimelineEventKind.UNDER_REVIEW,
    )


def _dispatched(when: datetime, team: str) -> TimelineEvent:
    return TimelineEvent(
        occurred_at=when,
        title="Team Dispatched",
        description=f"{team} on the way to the site",
        kind=TimelineEventKind.DISPATCHED,
    )


def _completed(when: datetime, description: str) -> TimelineEvent:
    return TimelineEvent(
        occurred_at=when,
        title="Service Completed",
        description=description,
        kind=TimelineEventKind.COMPLETED,
    )


def seed_users() -> list[User]:
    """Two accounts: one citizen, one admin."""
    return [
        User(
            id=1,
            name="Maria Silva",
            email="maria.silva@email.com",
            phone="(94) 98765-4321",
            credential_secret="123456",
            role=UserRole.CITIZEN,
        ),
        User(
            id=2,
            name="Administrador",
            email="admin@maraba.pa.gov.br",
            phone="(94) 3324-0000",
            credential_secret="admin123",
            role=UserRole.ADMIN,
        ),
    ]


def seed_requests() -> list[LightingRequest]:
    """Five requests spanning every status and priority except cancelled."""
    return [
        LightingRequest(
            id=1,
            protocol="2025-0001-LP",
            type=BURNT_OUT_LAMP,
            address="Av. VP8, Folha 32 - Nova Marabá",
            status=RequestStatus.PENDING,
            priority=Priority.MEDIUM,
            coordinates=Coordinates(lat=-5.3686, lng=-49.1178),
            created_at=_at(14, 14, 30),
            reporter=Reporter("João Santos", "joao@email.com", "(94) 99999-8888"),
            description="LED lamp burnt out for 3 days, street is dark at night.",
            timeline=(_received(_at(14, 14, 30)),),
        ),
        LightingRequest(
            id=2,
            protocol="2025-0002-LP",
            type=FLICKERING_LIGHT,
            address="Rua Nagib Mutran - Cidade Nova",
            status=RequestStatus.PROGRESS,
            priority=Priority.HIGH,
            coordinates=Coordinates(lat=-5.3588, lng=-49.1289),
            created_at=_at(12, 9, 15),
            reporter=Reporter("Maria Silva", "maria.silva@email.com", "(94) 98765-4321"),
            description="Pole light flickering intermittently, possible electrical fault.",
            timeline=(
                _received(_at(12, 9, 15)),
                _reviewed(_at(12, 10, 0)),
                _dispatched(_at(14, 8, 0), "Equipe Alpha"),
            ),
            assigned_team="Equipe Alpha",
            estimated_time="2 horas",
        ),
        LightingRequest(
            id=3,
            protocol="2025-0003-LP",
            type=LAMP_ON_DURING_DAY,
            address="Folha 17, Quadra Especial - Nova Marabá",
            status=RequestStatus.DONE,
            priority=Priority.LOW,
            coordinates=Coordinates(lat=-5.3725, lng=-49.1134),
            created_at=_at(10, 11, 20),
            reporter=Reporter("Carlos Mendes", "carlos@email.com", "(94) 97777-6666"),
            description="Lamp stays on during the day, wasting energy.",
            timeline=(
                _received(_at(10, 11, 20)),
                _reviewed(_at(10, 14, 0)),
                _dispatched(_at(11, 9, 30), "Equipe Beta"),
                _completed(_at(11, 11, 45), "Photocell replaced successfully"),
            ),
            assigned_team="Equipe Beta",
        ),
        LightingRequest(
            id=4,
            protocol="2025-0004-LP",
            type=DAMAGED_POLE,
            address="Av. Transamazônica - Amapá",
            status=RequestStatus.PENDING,
            priority=Priority.CRITICAL,
            coordinates=Coordinates(lat=-5.3480, lng=-49.1045),
            created_at=_at(14, 16, 45),
            reporter=Reporter("Ana Paula", "ana@email.com", "(94) 96666-5555"),
            description="Pole leaning after an accident, risk of falling.",
            timeline=(_received(_at(14, 16, 45), "EMERGENCY protocol generated"),),
        ),
        LightingRequest(
            id=5,
            protocol="2025-0005-LP",
            type=BURNT_OUT_LAMP,
            address="Folha 26, Quadra 07 - Nova Marabá",
            status=RequestStatus.DONE,
            priority=Priority.MEDIUM,
            coordinates=Coordinates(lat=-5.3650, lng=-49.1200),
            created_at=_at(8, 13, 10),
            reporter=Reporter("Pedro Costa", "pedro@email.com", "(94) 95555-4444"),
            description="Lamp out in front of a shop.",
            timeline=(
                _received(_at(8, 13, 10)),
                _reviewed(_at(8, 15, 30)),
                _dispatched(_at(9, 10, 0), "Equipe Gamma"),
                _completed(_at(9, 12, 20), "LED lamp replaced"),
            ),
            assigned_team="Equipe Gamma",
        ),
    ]


def seed_notifications() -> list[Notification]:
    """Three notifications, most recent first."""
    return [
        Notification(
            id=1,
            message="Your request #2025-0002-LP was updated: team on the way",
            timestamp=_at(14, 8, 0),
            read=False,
        ),
        Notification(
            id=2,
            message="Maintenance completed near your location",
            timestamp=_at(11, 11, 45),
            read=False,
        ),
        Notification(
            id=3,
            message="Reminder: rate our service",
            timestamp=_at(9, 15, 30),
            read=True,
        ),
    ]


GAZETTEER: tuple[GazetteerEntry, ...] = (
    GazetteerEntry("Nova Marabá", Coordinates(lat=-5.3686, lng=-49.1178)),
    GazetteerEntry("Cidade Nova", Coordinates(lat=-5.3588, lng=-49.1289)),
    GazetteerEntry("Velha Marabá", Coordinates(lat=-5.3450, lng=-49.1150)),
    GazetteerEntry("Amapá", Coordinates(lat=-5.3480, lng=-49.1045)),
    GazetteerEntry("São Félix", Coordinates(lat=-5.3750, lng=-49.0950)),
    GazetteerEntry("Morada Nova", Coordinates(lat=-5.3820, lng=-49.1300)),
    GazetteerEntry("Folha 32", Coordinates(lat=-5.3700, lng=-49.1200)),
    GazetteerEntry("Folha 17", Coordinates(lat=-5.3725, lng=-49.1134)),
)
