"""GeocodeLocationUseCase — resolve a Location's address before it is saved."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from geokit.application.ports.geocoder_port import GeocoderPort
from geokit.domain.entities.location import Location
from geokit.domain.value_objects.geo_loc import GeoLoc

logger = logging.getLogger(__name__)

ADDRESS_ERROR = "Could not geocode address"


@dataclass
class GeocodeLocationResult:
    """Outcome of geocoding one location."""

    location: Location
    geo_loc: GeoLoc
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors


class GeocodeLocationUseCase:
    def __init__(self, geocoder: GeocoderPort):
        self._geocoder = geocoder

    def execute(self, location: Location) -> GeocodeLocationResult:
        """Geocode ``location.address`` and copy lat/lng onto the record.

        On failure the record is left untouched and an ``address`` error is
        reported so the caller can refuse to persist it.
        """
        geo = self._geocoder.geocode(location.address)
        if not geo.success:
            logger.warning("Location %s: could not geocode '%s'", location.id, location.address)
            return GeocodeLocationResult(location=location, geo_loc=geo, errors={"address": ADDRESS_ERROR})

        location.lat, location.lng = geo.lat, geo.lng
        return GeocodeLocationResult(location=location, geo_loc=geo)
