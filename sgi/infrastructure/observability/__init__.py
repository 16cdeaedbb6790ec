"""Observability: structured logging configuration."""

from sgi.infrastructure.observability.logging import configure_structlog

__all__ = ["configure_structlog"]
