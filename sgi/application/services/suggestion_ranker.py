"""Suggestion Ranker and search box.

The ranker turns a free-text query into an ordered suggestion list:
matching requests first (capped), and gazetteer places only when no
request matches. The search box holds the query and the open/closed
state of the list and routes a selection to the map controller.
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from sgi.application.services.base import LoggingMixin
from sgi.application.services.map_view_controller import MapViewController
from sgi.config.lighting_config import DEFAULT_LIGHTING_CONFIG, LightingConfig
from sgi.config.seed_data import GAZETTEER
from sgi.domain.models.lighting_request import LightingRequest
from sgi.domain.models.suggestion import (
    GazetteerEntry,
    PlaceSuggestion,
    RequestSuggestion,
    SuggestionItem,
)

OpenDetailCallback = Callable[[LightingRequest], None]


class SuggestionRanker:
    """Ranks search suggestions for a query.

    Request matches (case-insensitive substring on address, protocol or
    type) keep the order of the visible set and are capped at `limit`.
    Gazetteer matches (substring on the place name) are only consulted
    when there are no request matches and are not capped.
    """

    def __init__(
        self,
        gazetteer: Sequence[GazetteerEntry] = GAZETTEER,
        limit: int = 5,
    ) -> None:
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        self._gazetteer = tuple(gazetteer)
        self._limit = limit

    @property
    def limit(self) -> int:
        return self._limit

    def rank(
        self,
        query: str,
        visible_requests: Iterable[LightingRequest],
    ) -> list[SuggestionItem]:
        """Rank suggestions for a query.

        Args:
            query: Raw search text. Empty or whitespace-only yields [].
            visible_requests: Requests visible to the current user, in
                display order.

        Returns:
            Request suggestions, or place suggestions if none matched.
        """
        if not query.strip():
            return []

        suggestions: list[SuggestionItem] = []
        for request in visible_requests:
            if len(suggestions) >= self._limit:
                break
            if request.matches_text(query):
                suggestions.append(RequestSuggestion(request=request))
        if suggestions:
            return suggestions

        folded = query.casefold()
        return [
            PlaceSuggestion(name=entry.name, coordinates=entry.coordinates)
            for entry in self._gazetteer
            if folded in entry.name.casefold()
        ]


class SearchBox(LoggingMixin):
    """Search field state: query text, suggestions and list visibility."""

    def __init__(
        self,
        ranker: SuggestionRanker,
        map_controller: MapViewController,
        visible_requests: Callable[[], Iterable[LightingRequest]],
        on_open_detail: OpenDetailCallback | None = None,
        config: LightingConfig = DEFAULT_LIGHTING_CONFIG,
    ) -> None:
        self._ranker = ranker
        self._map = map_controller
        self._visible_requests = visible_requests
        self._on_open_detail = on_open_detail
        self._config = config
        self._query = ""
        self._suggestions: list[SuggestionItem] = []
        self._is_open = False
        self._init_logger(component="search")

    @property
    def query(self) -> str:
        return self._query

    @property
    def suggestions(self) -> list[SuggestionItem]:
        return list(self._suggestions)

    @property
    def is_open(self) -> bool:
        return self._is_open

    def set_query(self, query: str) -> list[SuggestionItem]:
        """Update the query and re-rank; the list opens when non-empty."""
        self._query = query
        self._suggestions = self._ranker.rank(query, self._visible_requests())
        self._is_open = bool(self._suggestions)
        return self.suggestions

    def dismiss(self) -> None:
        """Close the list (outside click); the query is kept."""
        self._is_open = False

    def clear(self) -> None:
        self._query = ""
        self._suggestions = []
        self._is_open = False

    def select(self, item: SuggestionItem) -> None:
        """Act on a chosen suggestion.

        A request suggestion highlights the request and opens its detail;
        a place suggestion recentres the map at the place zoom. Either way
        the label is echoed into the query and the list closes.
        """
        log = self._log_operation("select", label=item.label)
        if isinstance(item, RequestSuggestion):
            self._map.set_highlighted(item.request.id)
            if self._on_open_detail is not None:
                self._on_open_detail(item.request)
            log.info("request_suggestion_selected", request_id=item.request.id)
        else:
            self._map.center_on(item.coordinates, self._config.place_zoom)
            log.info("place_suggestion_selected")

        self._query = item.label
        self._suggestions = []
        self._is_open = False
