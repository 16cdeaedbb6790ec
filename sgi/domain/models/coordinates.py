"""Geographic coordinates value type."""

from __future__ import annotations

import math
from dataclasses import dataclass

from sgi.domain.errors.coordinates import InvalidCoordinatesError

LAT_MIN: float = -90.0
LAT_MAX: float = 90.0
LNG_MIN: float = -180.0
LNG_MAX: float = 180.0


@dataclass(frozen=True, eq=True)
class Coordinates:
    """A WGS84 point owned by a request or a gazetteer entry.

    Attributes:
        lat: Latitude in degrees, within [-90, 90].
        lng: Longitude in degrees, within [-180, 180].

    Raises:
        InvalidCoordinatesError: If either component is out of range or NaN.
    """

    lat: float
    lng: float

    def __post_init__(self) -> None:
        """Validate coordinate bounds."""
        if math.isnan(self.lat) or math.isnan(self.lng):
            raise InvalidCoordinatesError(self.lat, self.lng)
        if not (LAT_MIN <= self.lat <= LAT_MAX) or not (LNG_MIN <= self.lng <= LNG_MAX):
            raise InvalidCoordinatesError(self.lat, self.lng)

    def is_close_to(self, other: Coordinates, epsilon: float) -> bool:
        """Check whether both components differ by at most epsilon."""
        return (
            abs(self.lat - other.lat) <= epsilon
            and abs(self.lng - other.lng) <= epsilon
        )
