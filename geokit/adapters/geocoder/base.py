"""Shared plumbing for HTTP geocoder adapters."""

from __future__ import annotations

import logging
from abc import abstractmethod

from geokit.application.ports.fetcher_port import FetcherPort
from geokit.application.ports.geocoder_port import GeocoderPort, query_for
from geokit.domain.errors import ProviderError
from geokit.domain.value_objects.geo_loc import GeoLoc

logger = logging.getLogger(__name__)


class HttpGeocoder(GeocoderPort):
    """One request per lookup; transport and parse errors become failures.

    Subclasses set ``provider`` and implement ``_lookup``, which fetches and
    parses the provider's answer and may raise ProviderError.
    """

    provider: str = ""

    def __init__(self, fetcher: FetcherPort):
        self._fetcher = fetcher

    def geocode(self, address: str | GeoLoc) -> GeoLoc:
        query = query_for(address)
        try:
            result = self._lookup(query)
        except ProviderError:
            logger.exception("%s lookup error for '%s'", self.provider, query)
            return GeoLoc.failed(self.provider)

        if result.success:
            logger.info("%s resolved '%s' → (%f, %f)", self.provider, query, result.lat, result.lng)
        else:
            logger.info("%s could not resolve '%s'", self.provider, query)
        return result

    @abstractmethod
    def _lookup(self, query: str) -> GeoLoc: ...

    def _parse_error(self, body: str, error: Exception) -> ProviderError:
        return ProviderError(self.provider, f"unparseable response ({error}): {body[:200]!r}")
