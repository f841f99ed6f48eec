"""Nominatim geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import json

from geokit.adapters.geocoder.base import HttpGeocoder
from geokit.domain.value_objects.geo_loc import GeoLoc

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"

# Nominatim names the settlement after its size
CITY_KEYS = ("city", "town", "village", "hamlet")


class NominatimGeocoder(HttpGeocoder):
    """OpenStreetMap Nominatim search, first hit only."""

    provider = "nominatim"

    def _lookup(self, query: str) -> GeoLoc:
        body = self._fetcher.fetch(
            NOMINATIM_URL,
            params={
                "q": query,
                "format": "json",
                "limit": 1,
                "addressdetails": 1,
            },
        )
        return self._parse(body)

    def _parse(self, body: str) -> GeoLoc:
        try:
            results = json.loads(body)
            if not results:
                return GeoLoc.failed(self.provider)

            hit = results[0]
            address = hit.get("address", {})
            res = GeoLoc(
                lat=hit["lat"],
                lng=hit["lon"],
                state=address.get("state"),
                postal_code=address.get("postcode"),
                country_code=(address.get("country_code") or "").upper() or None,
                full_address=hit.get("display_name"),
                provider=self.provider,
                precision=hit.get("addresstype") or hit.get("type") or "unknown",
            )
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            raise self._parse_error(body, e) from e

        street = " ".join(p for p in (address.get("house_number"), address.get("road")) if p)
        res.street_address = street or None
        res.city = next((address[k] for k in CITY_KEYS if address.get(k)), None)
        res.success = True
        return res
