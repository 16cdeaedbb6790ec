"""Bootstrap wiring for SGI Cidade."""

from sgi.bootstrap.logging import configure_structlog
from sgi.bootstrap.session import SgiSession, build_blob_store, build_session

__all__ = ["SgiSession", "build_blob_store", "build_session", "configure_structlog"]
