"""geocoder.us adapter — parses the CSV answer of the geocoder.us service.

A hit is a single line, either
``lat,lng,street,city,state,zip`` or ``lat,lng,city,state,zip``.
Anything that does not start with a number is a miss.
"""

from __future__ import annotations

import re

from geokit.adapters.geocoder.base import HttpGeocoder
from geokit.application.ports.fetcher_port import FetcherPort
from geokit.config import settings
from geokit.domain.value_objects.geo_loc import GeoLoc

PUBLIC_URL = "http://geocoder.us/service/csv/geocode"
MEMBER_URL = "http://geocoder.us/member/service/csv/geocode"

_HIT_RE = re.compile(r"^-?\d")


class UsGeocoder(HttpGeocoder):
    provider = "geocoder.us"

    def __init__(self, fetcher: FetcherPort, credentials: str | None = None):
        super().__init__(fetcher)
        credentials = credentials if credentials is not None else settings.geocoder_us_credentials
        self._auth = self._split_credentials(credentials)

    @staticmethod
    def _split_credentials(credentials: str) -> tuple[str, str] | None:
        """``user:password`` → (user, password); the password may contain ':'."""
        if not credentials:
            return None
        user, _, password = credentials.partition(":")
        return (user, password)

    @property
    def url(self) -> str:
        return MEMBER_URL if self._auth else PUBLIC_URL

    def _lookup(self, query: str) -> GeoLoc:
        body = self._fetcher.fetch(self.url, params={"address": query}, auth=self._auth)
        return self._parse(body)

    def _parse(self, body: str) -> GeoLoc:
        line = body.strip().splitlines()[0] if body.strip() else ""
        if not _HIT_RE.match(line):
            return GeoLoc.failed(self.provider)

        fields = [f.strip() for f in line.split(",")]
        res = GeoLoc(provider=self.provider, country_code="US")
        try:
            if len(fields) == 6:
                res.lat, res.lng, res.street_address, res.city, res.state, res.postal_code = fields
                res.precision = "address"
            elif len(fields) == 5:
                res.lat, res.lng, res.city, res.state, res.postal_code = fields
                res.precision = "zip"
            else:
                return GeoLoc.failed(self.provider)
        except ValueError as e:
            raise self._parse_error(body, e) from e

        res.success = True
        return res
