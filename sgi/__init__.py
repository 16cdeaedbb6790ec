"""
SGI Cidade - Public Lighting Request Core

Citizens report public-lighting defects on a map and administrators
triage and resolve them.

Core components:
- Request lifecycle engine (state machine + append-only timeline)
- Map view synchronization controller (desired vs applied view)
- Search and suggestion ranker (requests first, gazetteer fallback)
- Notification emitter (derived unread count)
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
