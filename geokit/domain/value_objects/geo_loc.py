"""GeoLoc — the unified result of a geocoding lookup.

Providers answer in very different shapes (CSV rows, JSON documents); every
adapter folds its answer into a GeoLoc so callers only ever see one shape.
A GeoLoc holds its coordinate as a LatLng rather than being one; use
``to_lat_lng()`` wherever a plain coordinate is needed.
"""

from __future__ import annotations

import re
import string
from typing import Any

from geokit.domain.errors import NormalizationError
from geokit.domain.value_objects.lat_lng import LatLng

_STREET_NUMBER_RE = re.compile(r"^\d*")


def _titleize(value: str | None) -> str | None:
    return string.capwords(value) if value else value


class GeoLoc:
    def __init__(
        self,
        lat: float | str | None = None,
        lng: float | str | None = None,
        street_address: str | None = None,
        city: str | None = None,
        state: str | None = None,
        postal_code: str | None = None,
        country_code: str | None = None,
        full_address: str | None = None,
        success: bool = False,
        provider: str = "",
        precision: str = "unknown",
    ):
        self._point: LatLng | None = None
        if lat is not None and lng is not None:
            self._point = LatLng(lat, lng)
        self._pending_lat = lat
        self._pending_lng = lng
        self._street_address = street_address
        self._city = city
        self.state = state
        self.postal_code = postal_code
        self.country_code = country_code
        self._full_address = full_address
        self.success = success
        self.provider = provider
        self.precision = precision

    @classmethod
    def failed(cls, provider: str = "") -> GeoLoc:
        return cls(provider=provider)

    # ─── Coordinate ─────────────────────────────────────────────────

    @property
    def point(self) -> LatLng | None:
        return self._point

    @property
    def lat(self) -> float | None:
        return self._point.lat if self._point else None

    @lat.setter
    def lat(self, value: float | str | None) -> None:
        self._pending_lat = value
        self._rebuild_point()

    @property
    def lng(self) -> float | None:
        return self._point.lng if self._point else None

    @lng.setter
    def lng(self, value: float | str | None) -> None:
        self._pending_lng = value
        self._rebuild_point()

    def _rebuild_point(self) -> None:
        if self._pending_lat is None or self._pending_lng is None:
            self._point = None
        else:
            self._point = LatLng(self._pending_lat, self._pending_lng)

    def to_lat_lng(self) -> LatLng:
        if self._point is None:
            raise NormalizationError(f"GeoLoc from {self.provider or 'unknown provider'} has no coordinate")
        return self._point

    @property
    def coordinate_string(self) -> str | None:
        return self._point.to_string() if self._point else None

    # ─── Address fields ─────────────────────────────────────────────

    @property
    def city(self) -> str | None:
        return self._city

    @city.setter
    def city(self, value: str | None) -> None:
        self._city = _titleize(value)

    @property
    def street_address(self) -> str | None:
        return self._street_address

    @street_address.setter
    def street_address(self, value: str | None) -> None:
        self._street_address = _titleize(value)

    @property
    def full_address(self) -> str:
        """Provider-supplied full address, or one derived from the parts."""
        return self._full_address or self.to_geocodeable_string()

    @full_address.setter
    def full_address(self, value: str | None) -> None:
        self._full_address = value

    @property
    def street_number(self) -> str | None:
        if self._street_address is None:
            return None
        return _STREET_NUMBER_RE.match(self._street_address).group(0)

    @property
    def street_name(self) -> str | None:
        if self._street_address is None:
            return None
        return self._street_address[len(self.street_number) :].strip()

    def is_us(self) -> bool:
        return self.country_code == "US"

    def to_geocodeable_string(self) -> str:
        parts = [self._street_address, self._city, self.state, self.postal_code, self.country_code]
        return ", ".join(p for p in parts if p)

    def as_map(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "lat": self.lat,
            "lng": self.lng,
            "country_code": self.country_code,
            "city": self.city,
            "state": self.state,
            "postal_code": self.postal_code,
            "street_address": self.street_address,
            "provider": self.provider,
            "full_address": self.full_address,
            "is_us": self.is_us(),
            "coordinate_string": self.coordinate_string,
            "precision": self.precision,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoLoc):
            return NotImplemented
        return self.as_map() == other.as_map()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"GeoLoc(provider={self.provider!r}, success={self.success}, lat={self.lat}, lng={self.lng})"

    def __str__(self) -> str:
        return (
            f"Provider: {self.provider}\n"
            f"Street: {self.street_address}\n"
            f"City: {self.city}\n"
            f"State: {self.state}\n"
            f"Postal code: {self.postal_code}\n"
            f"Latitude: {self.lat}\n"
            f"Longitude: {self.lng}\n"
            f"Country: {self.country_code}\n"
            f"Success: {self.success}"
        )
