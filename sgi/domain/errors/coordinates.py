"""Coordinate validation errors."""

from __future__ import annotations

from sgi.domain.exceptions import SgiError


class InvalidCoordinatesError(SgiError):
    """Raised when a latitude or longitude is outside its valid range.

    Attributes:
        lat: The rejected latitude.
        lng: The rejected longitude.
    """

    def __init__(self, lat: float, lng: float) -> None:
        self.lat = lat
        self.lng = lng
        super().__init__(
            f"Invalid coordinates ({lat}, {lng}): "
            "lat must be in [-90, 90] and lng in [-180, 180]"
        )
