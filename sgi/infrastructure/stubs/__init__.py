"""In-memory stubs for SGI Cidade ports (development and tests)."""

from sgi.infrastructure.stubs.in_memory_blob_store import InMemoryBlobStore
from sgi.infrastructure.stubs.map_widget_stub import MapWidgetStub

__all__ = ["InMemoryBlobStore", "MapWidgetStub"]
