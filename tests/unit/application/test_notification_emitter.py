"""Unit tests for NotificationEmitter."""

import pytest

from sgi.application.services.entity_store import EntityStore
from sgi.application.services.notification_emitter import (
    MESSAGE_TEMPLATES,
    NotificationEmitter,
)
from sgi.application.services.request_lifecycle_service import (
    LifecycleEventType,
    RequestLifecycleEngine,
)
from sgi.domain.errors import NotificationNotFoundError
from sgi.domain.models.lighting_request import Reporter
from tests.helpers import FakeTimeAuthority

REPORTER = Reporter("João Santos", "joao@email.com")


class TestEmit:
    """Tests for notification generation."""

    def test_emit_prepends_unread(
        self,
        emitter: NotificationEmitter,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        notification = emitter.emit("Hello")

        assert notification.id == 4
        assert notification.read is False
        assert notification.timestamp == fake_time_authority.now()
        assert emitter.notifications()[0] == notification
        assert len(emitter.notifications()) == 4

    def test_templates_cover_every_event_type(self) -> None:
        assert set(MESSAGE_TEMPLATES) == set(LifecycleEventType)

    def test_lifecycle_events_generate_messages(
        self,
        engine: RequestLifecycleEngine,
        emitter: NotificationEmitter,
    ) -> None:
        engine.subscribe(emitter.handle_lifecycle_event)

        request = engine.create_request("Burnt-out Lamp", REPORTER)
        engine.dispatch(request.id)
        engine.complete(request.id)

        messages = [n.message for n in emitter.notifications()[:3]]
        assert messages == [
            "Request 2026-0006-LP completed",
            "Request 2026-0006-LP updated: team on the way",
            "New request created: 2026-0006-LP",
        ]

    def test_ids_are_monotonic(self, emitter: NotificationEmitter) -> None:
        first = emitter.emit("a")
        second = emitter.emit("b")
        assert second.id == first.id + 1


class TestReadTracking:
    """Tests for read/unread state."""

    def test_seed_unread_count(self, emitter: NotificationEmitter) -> None:
        assert emitter.unread_count() == 2

    def test_mark_read_flips_exactly_one(self, emitter: NotificationEmitter) -> None:
        updated = emitter.mark_read(1)

        assert updated.read is True
        states = {n.id: n.read for n in emitter.notifications()}
        assert states == {1: True, 2: False, 3: True}
        assert emitter.unread_count() == 1

    def test_mark_read_is_idempotent(self, emitter: NotificationEmitter) -> None:
        emitter.mark_read(3)
        assert emitter.unread_count() == 2

    def test_mark_read_unknown(self, emitter: NotificationEmitter) -> None:
        with pytest.raises(NotificationNotFoundError):
            emitter.mark_read(42)

    def test_mark_all_read(self, emitter: NotificationEmitter) -> None:
        changed = emitter.mark_all_read()
        assert changed == 2
        assert emitter.unread_count() == 0
        assert [n.id for n in emitter.notifications()] == [1, 2, 3]

    def test_mark_all_read_twice_changes_nothing(self, emitter: NotificationEmitter) -> None:
        emitter.mark_all_read()
        assert emitter.mark_all_read() == 0

    def test_unread_count_tracks_new_emissions(self, emitter: NotificationEmitter) -> None:
        emitter.mark_all_read()
        emitter.emit("new")
        assert emitter.unread_count() == 1

    def test_empty_store(
        self, empty_store: EntityStore, fake_time_authority: FakeTimeAuthority
    ) -> None:
        emitter = NotificationEmitter(empty_store, fake_time_authority)
        assert emitter.unread_count() == 0
        assert emitter.emit("first").id == 1
