"""Pytest configuration and shared fixtures for SGI Cidade tests.

Testing Standards:
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
- Time-dependent tests use FakeTimeAuthority, never the wall clock
"""

from collections.abc import Iterator

import pytest
import structlog

from sgi.application.services.entity_store import EntityStore, StoreDefaults
from sgi.application.services.map_view_controller import MapViewController
from sgi.application.services.notification_emitter import NotificationEmitter
from sgi.application.services.request_lifecycle_service import RequestLifecycleEngine
from sgi.config.lighting_config import DEFAULT_LIGHTING_CONFIG, LightingConfig
from sgi.infrastructure.stubs.in_memory_blob_store import InMemoryBlobStore
from sgi.infrastructure.stubs.map_widget_stub import MapWidgetStub
from tests.helpers import FakeTimeAuthority


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from sgi import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Clock frozen at 2026-01-01 10:00 (UTC-3)."""
    return FakeTimeAuthority()


@pytest.fixture
def lighting_config() -> LightingConfig:
    return DEFAULT_LIGHTING_CONFIG


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def seeded_store(blob_store: InMemoryBlobStore) -> EntityStore:
    """Store loaded with the seed users, requests and notifications."""
    return EntityStore(blob_store)


@pytest.fixture
def empty_store(blob_store: InMemoryBlobStore) -> EntityStore:
    """Store with no seed data at all."""
    return EntityStore(blob_store, StoreDefaults.empty())


@pytest.fixture
def engine(
    seeded_store: EntityStore,
    fake_time_authority: FakeTimeAuthority,
    lighting_config: LightingConfig,
) -> RequestLifecycleEngine:
    return RequestLifecycleEngine(seeded_store, fake_time_authority, lighting_config)


@pytest.fixture
def emitter(
    seeded_store: EntityStore,
    fake_time_authority: FakeTimeAuthority,
) -> NotificationEmitter:
    return NotificationEmitter(seeded_store, fake_time_authority)


@pytest.fixture
def widget() -> MapWidgetStub:
    return MapWidgetStub()


@pytest.fixture
def map_controller(
    widget: MapWidgetStub,
    seeded_store: EntityStore,
    lighting_config: LightingConfig,
) -> MapViewController:
    return MapViewController(widget, seeded_store, lighting_config)
