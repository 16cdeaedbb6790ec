"""Lighting request system configuration.

This module defines tunables for request creation, dispatch defaults, the
map view and the search ranker, with environment variable overrides.

Environment Variables:
- SGI_ENVIRONMENT: 'production' (JSON logs) or 'development' (default: production)
- SGI_DATA_DIR: Directory for the JSON blob store (default: ./sgi-data)
- SGI_PROTOCOL_SUFFIX: Protocol suffix (default: LP)
- SGI_HOME_LAT / SGI_HOME_LNG: Home map location (default: Nova Marabá)
- SGI_DEFAULT_ZOOM: Initial map zoom (default: 13)
- SGI_SUGGESTION_LIMIT: Maximum request suggestions (default: 5)
- SGI_TILE_URL: Tile URL template (default: OpenStreetMap)
- SGI_TILE_ATTRIBUTION: Tile attribution HTML (default: OpenStreetMap)
- SGI_DEFAULT_TEAM: Team assigned when dispatching without one (default: Equipe Delta)
- SGI_DEFAULT_ETA: ETA recorded when dispatching without one (default: 1.5 horas)
- SGI_UTC_OFFSET_HOURS: Local clock offset from UTC (default: -3)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from sgi.domain.models.coordinates import Coordinates
from sgi.domain.models.lighting_request import Priority
from sgi.domain.models.view_state import MAX_ZOOM, MIN_ZOOM

DAMAGED_POLE = "Damaged Pole"
BURNT_OUT_LAMP = "Burnt-out Lamp"
FLICKERING_LIGHT = "Flickering Light"
LAMP_ON_DURING_DAY = "Lamp On During Day"

PROBLEM_TYPES: tuple[str, ...] = (
    BURNT_OUT_LAMP,
    FLICKERING_LIGHT,
    LAMP_ON_DURING_DAY,
    DAMAGED_POLE,
)

OSM_TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)


def normalize_problem_type(problem_type: str) -> str:
    """Normalize a problem type label for table lookups."""
    return " ".join(problem_type.split()).casefold()


def _default_priority_table() -> Mapping[str, Priority]:
    return MappingProxyType({normalize_problem_type(DAMAGED_POLE): Priority.CRITICAL})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_str_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value


@dataclass(frozen=True)
class LightingConfig:
    """Configuration for the lighting request core.

    Attributes:
        environment: Logging environment ('production' or 'development').
        data_dir: Directory used by the JSON file blob store.
        protocol_suffix: Trailing protocol tag. Default: "LP".
        priority_by_type: Default priority keyed by normalized problem type.
            Types not in the table get default_priority.
        default_priority: Priority for types absent from the table.
        home_location: Map home (also the default request location).
        default_address: Address recorded when no location is supplied.
        default_zoom: Initial desired zoom.
        home_zoom: Zoom used by the "home" action. Default: 14.
        highlight_zoom: Zoom used when highlighting a request. Default: 16.
        place_zoom: Zoom used when selecting a gazetteer place. Default: 17.
        min_zoom / max_zoom: Zoom bounds. Default: [10, 18].
        view_epsilon: Coordinate tolerance for view reconciliation.
        suggestion_limit: Maximum request suggestions. Default: 5.
        tile_url_template: Tile source URL template.
        tile_attribution: Tile source attribution string.
        default_team: Team recorded on dispatch when none is given.
        default_estimated_time: ETA recorded on dispatch when none is given.
        utc_offset_hours: Local wall-clock offset for timestamps.
    """

    environment: str = "production"
    data_dir: str = "sgi-data"
    protocol_suffix: str = "LP"
    priority_by_type: Mapping[str, Priority] = field(default_factory=_default_priority_table)
    default_priority: Priority = Priority.MEDIUM
    home_location: Coordinates = field(
        default_factory=lambda: Coordinates(lat=-5.3686, lng=-49.1178)
    )
    default_address: str = "Av. VP8, Folha 32 - Nova Marabá"
    default_zoom: int = 13
    home_zoom: int = 14
    highlight_zoom: int = 16
    place_zoom: int = 17
    min_zoom: int = MIN_ZOOM
    max_zoom: int = MAX_ZOOM
    view_epsilon: float = 1e-9
    suggestion_limit: int = 5
    tile_url_template: str = OSM_TILE_URL
    tile_attribution: str = OSM_ATTRIBUTION
    default_team: str = "Equipe Delta"
    default_estimated_time: str = "1.5 horas"
    utc_offset_hours: int = -3

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in ("production", "development"):
            raise ValueError(
                f"environment must be 'production' or 'development', got {self.environment!r}"
            )
        if not self.protocol_suffix:
            raise ValueError("protocol_suffix must not be empty")
        if not (MIN_ZOOM <= self.min_zoom <= self.max_zoom <= MAX_ZOOM):
            raise ValueError(
                f"zoom bounds must satisfy {MIN_ZOOM} <= min <= max <= {MAX_ZOOM}, "
                f"got [{self.min_zoom}, {self.max_zoom}]"
            )
        for name in ("default_zoom", "home_zoom", "highlight_zoom", "place_zoom"):
            value = getattr(self, name)
            if not (self.min_zoom <= value <= self.max_zoom):
                raise ValueError(
                    f"{name} must be within [{self.min_zoom}, {self.max_zoom}], got {value}"
                )
        if self.view_epsilon < 0:
            raise ValueError(f"view_epsilon must be non-negative, got {self.view_epsilon}")
        if self.suggestion_limit < 1:
            raise ValueError(
                f"suggestion_limit must be positive, got {self.suggestion_limit}"
            )
        if "{z}" not in self.tile_url_template:
            raise ValueError("tile_url_template must contain a {z} placeholder")
        if not (-12 <= self.utc_offset_hours <= 14):
            raise ValueError(
                f"utc_offset_hours must be within [-12, 14], got {self.utc_offset_hours}"
            )

    def priority_for(self, problem_type: str) -> Priority:
        """Look up the default priority for a problem type."""
        return self.priority_by_type.get(
            normalize_problem_type(problem_type), self.default_priority
        )

    @classmethod
    def from_env(cls) -> LightingConfig:
        """Create configuration from environment variables.

        Returns:
            LightingConfig with values from environment or defaults.
        """
        defaults = cls()
        return cls(
            environment=_get_str_env("SGI_ENVIRONMENT", defaults.environment),
            data_dir=_get_str_env("SGI_DATA_DIR", defaults.data_dir),
            protocol_suffix=_get_str_env("SGI_PROTOCOL_SUFFIX", defaults.protocol_suffix),
            home_location=Coordinates(
                lat=_get_float_env("SGI_HOME_LAT", defaults.home_location.lat),
                lng=_get_float_env("SGI_HOME_LNG", defaults.home_location.lng),
            ),
            default_zoom=_get_int_env("SGI_DEFAULT_ZOOM", defaults.default_zoom),
            suggestion_limit=_get_int_env(
                "SGI_SUGGESTION_LIMIT", defaults.suggestion_limit
            ),
            tile_url_template=_get_str_env("SGI_TILE_URL", defaults.tile_url_template),
            tile_attribution=_get_str_env(
                "SGI_TILE_ATTRIBUTION", defaults.tile_attribution
            ),
            default_team=_get_str_env("SGI_DEFAULT_TEAM", defaults.default_team),
            default_estimated_time=_get_str_env(
                "SGI_DEFAULT_ETA", defaults.default_estimated_time
            ),
            utc_offset_hours=_get_int_env(
                "SGI_UTC_OFFSET_HOURS", defaults.utc_offset_hours
            ),
        )


# Default configuration instance
DEFAULT_LIGHTING_CONFIG = LightingConfig()
