"""LatLng value object — immutable (lat, lng) pair in degrees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

from geokit.domain.errors import NormalizationError
from geokit.domain.value_objects.enums import DEFAULT_FORMULA, DEFAULT_UNITS, Formula, Units

if TYPE_CHECKING:
    from geokit.application.ports.geocoder_port import GeocoderPort


@runtime_checkable
class Mappable(Protocol):
    """Anything that can hand out a coordinate."""

    def to_lat_lng(self) -> LatLng: ...


@dataclass(frozen=True)
class LatLng:
    lat: float
    lng: float

    def __post_init__(self) -> None:
        # Coerce once so reads never have to.
        object.__setattr__(self, "lat", float(self.lat))
        object.__setattr__(self, "lng", float(self.lng))

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        return f"{self.lat},{self.lng}"

    def to_pair(self) -> tuple[float, float]:
        return (self.lat, self.lng)

    def to_lat_lng(self) -> LatLng:
        return self

    @classmethod
    def normalize(cls, thing, other=None, *, geocoder: GeocoderPort | None = None) -> LatLng:
        from geokit.domain.services.normalizer import normalize

        return normalize(thing, other, geocoder=geocoder)

    # ─── Geodesy shortcuts ──────────────────────────────────────────

    def distance_to(
        self,
        other: Any,
        units: Units = DEFAULT_UNITS,
        formula: Formula = DEFAULT_FORMULA,
    ) -> float:
        from geokit.domain.services import geodesy

        return geodesy.distance_between(self, other, units=units, formula=formula)

    distance_from = distance_to

    def heading_to(self, other: Any) -> float:
        """Heading in degrees (0 is north, 90 is east) towards ``other``."""
        from geokit.domain.services import geodesy

        return geodesy.heading_between(self, other)

    def heading_from(self, other: Any) -> float:
        """Heading in degrees from ``other`` towards this point."""
        from geokit.domain.services import geodesy

        return geodesy.heading_between(other, self)

    def endpoint(self, heading: float, distance: float, units: Units = DEFAULT_UNITS) -> LatLng:
        from geokit.domain.services import geodesy

        return geodesy.endpoint(self, heading, distance, units=units)

    def midpoint_to(self, other: Any, units: Units = DEFAULT_UNITS) -> LatLng:
        from geokit.domain.services import geodesy

        return geodesy.midpoint_between(self, other, units=units)


class MappableRecord:
    """Mixin for records that keep their coordinate in two named fields.

    Subclasses point ``lat_column_name`` / ``lng_column_name`` at the
    attributes holding latitude and longitude.
    """

    lat_column_name: ClassVar[str] = "lat"
    lng_column_name: ClassVar[str] = "lng"

    def to_lat_lng(self) -> LatLng:
        lat = getattr(self, self.lat_column_name)
        lng = getattr(self, self.lng_column_name)
        if lat is None or lng is None:
            raise NormalizationError(
                f"{type(self).__name__} has no coordinate "
                f"({self.lat_column_name}={lat!r}, {self.lng_column_name}={lng!r})"
            )
        return LatLng(lat, lng)
