"""Google Maps geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import json
import logging

from geokit.adapters.geocoder.base import HttpGeocoder
from geokit.application.ports.fetcher_port import FetcherPort
from geokit.config import settings
from geokit.domain.value_objects.geo_loc import GeoLoc

logger = logging.getLogger(__name__)

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

PRECISION_BY_LOCATION_TYPE = {
    "ROOFTOP": "address",
    "RANGE_INTERPOLATED": "street",
    "GEOMETRIC_CENTER": "city",
    "APPROXIMATE": "region",
}


class GoogleGeocoder(HttpGeocoder):
    """Google Geocoding API (JSON) implementation of GeocoderPort."""

    provider = "google"

    def __init__(self, fetcher: FetcherPort, api_key: str | None = None):
        super().__init__(fetcher)
        self._api_key = api_key if api_key is not None else settings.google_maps_api_key

    def _lookup(self, query: str) -> GeoLoc:
        if not self._api_key:
            logger.warning("Google Maps API key is not set. Skipping geocoding.")
            return GeoLoc.failed(self.provider)

        body = self._fetcher.fetch(GOOGLE_GEOCODE_URL, params={"address": query, "key": self._api_key})
        return self._parse(body)

    def _parse(self, body: str) -> GeoLoc:
        try:
            data = json.loads(body)
            if data["status"] != "OK":
                logger.warning("Google Maps status %s", data["status"])
                return GeoLoc.failed(self.provider)

            result = data["results"][0]
            location = result["geometry"]["location"]
            components = self._components(result.get("address_components", []))

            res = GeoLoc(
                lat=location["lat"],
                lng=location["lng"],
                state=components.get("administrative_area_level_1"),
                postal_code=components.get("postal_code"),
                country_code=components.get("country"),
                full_address=result.get("formatted_address"),
                provider=self.provider,
                precision=PRECISION_BY_LOCATION_TYPE.get(result["geometry"].get("location_type"), "unknown"),
            )
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise self._parse_error(body, e) from e

        street = " ".join(p for p in (components.get("street_number"), components.get("route")) if p)
        res.street_address = street or None
        res.city = components.get("locality")
        res.success = True
        return res

    @staticmethod
    def _components(address_components: list[dict]) -> dict[str, str]:
        """Map component type → name (short names for state and country)."""
        short = {"administrative_area_level_1", "country"}
        found: dict[str, str] = {}
        for component in address_components:
            for kind in component.get("types", []):
                if kind not in found:
                    found[kind] = component["short_name"] if kind in short else component["long_name"]
        return found
