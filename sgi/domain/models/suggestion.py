"""Search suggestion models.

Suggestions are transient: produced by the ranker for the current query
and discarded when the list is dismissed or an item is selected.
"""

from __future__ import annotations

from dataclasses import dataclass

from sgi.domain.models.coordinates import Coordinates
from sgi.domain.models.lighting_request import LightingRequest


@dataclass(frozen=True, eq=True)
class GazetteerEntry:
    """A known named location used as a suggestion fallback."""

    name: str
    coordinates: Coordinates


@dataclass(frozen=True, eq=True)
class RequestSuggestion:
    """A suggestion pointing at an existing request."""

    request: LightingRequest

    @property
    def label(self) -> str:
        return self.request.address


@dataclass(frozen=True, eq=True)
class PlaceSuggestion:
    """A suggestion pointing at a gazetteer location."""

    name: str
    coordinates: Coordinates

    @property
    def label(self) -> str:
        return self.name


SuggestionItem = RequestSuggestion | PlaceSuggestion
