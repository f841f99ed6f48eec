"""Bounds value object — a lat/lng rectangle given by its SW and NE corners.

A rectangle whose ``sw.lng`` is greater than its ``ne.lng`` straddles the
±180° meridian.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from geokit.domain.services import geodesy
from geokit.domain.services.normalizer import normalize as normalize_point
from geokit.domain.value_objects.enums import DEFAULT_UNITS, Units
from geokit.domain.value_objects.lat_lng import LatLng

if TYPE_CHECKING:
    from geokit.application.ports.geocoder_port import GeocoderPort


@dataclass(frozen=True)
class Bounds:
    sw: LatLng
    ne: LatLng

    def __post_init__(self) -> None:
        if not (isinstance(self.sw, LatLng) and isinstance(self.ne, LatLng)):
            raise TypeError(
                f"Bounds corners must be LatLng, got {type(self.sw).__name__} and {type(self.ne).__name__}"
            )

    def __str__(self) -> str:
        return f"{self.sw},{self.ne}"

    def to_pairs(self) -> tuple[tuple[float, float], tuple[float, float]]:
        return (self.sw.to_pair(), self.ne.to_pair())

    def center(self, units: Units = DEFAULT_UNITS) -> LatLng:
        return geodesy.midpoint_between(self.sw, self.ne, units=units)

    def crosses_meridian(self) -> bool:
        return self.sw.lng > self.ne.lng

    def contains(self, point: Any, *, geocoder: GeocoderPort | None = None) -> bool:
        """True if ``point`` lies strictly inside; edges are outside."""
        point = normalize_point(point, geocoder=geocoder)
        inside = self.sw.lat < point.lat < self.ne.lat
        if self.crosses_meridian():
            return inside and (point.lng < self.ne.lng or point.lng > self.sw.lng)
        return inside and self.sw.lng < point.lng < self.ne.lng

    @classmethod
    def from_point_and_radius(
        cls,
        point: Any,
        radius: float,
        units: Units = DEFAULT_UNITS,
        *,
        geocoder: GeocoderPort | None = None,
    ) -> Bounds:
        """Smallest box that encloses the circle of ``radius`` around ``point``."""
        center = normalize_point(point, geocoder=geocoder)
        north = geodesy.endpoint(center, 0, radius, units=units)
        east = geodesy.endpoint(center, 90, radius, units=units)
        south = geodesy.endpoint(center, 180, radius, units=units)
        west = geodesy.endpoint(center, 270, radius, units=units)
        return cls(LatLng(south.lat, west.lng), LatLng(north.lat, east.lng))

    @classmethod
    def normalize(cls, thing: Any, other: Any = None, *, geocoder: GeocoderPort | None = None) -> Bounds:
        """Build Bounds from a Bounds, a [sw, ne] sequence, or two point-likes.

        Points are always taken in the order sw, ne.
        """
        if isinstance(thing, Bounds):
            return thing

        if other is None and isinstance(thing, (list, tuple)) and len(thing) == 2:
            thing, other = thing

        return cls(
            normalize_point(thing, geocoder=geocoder),
            normalize_point(other, geocoder=geocoder),
        )
