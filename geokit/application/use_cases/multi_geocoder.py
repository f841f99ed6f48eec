"""MultiGeocoder — try providers in order until one resolves the address."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from geokit.application.ports.geocoder_port import GeocoderPort, query_for
from geokit.domain.errors import ProviderError
from geokit.domain.value_objects.geo_loc import GeoLoc

logger = logging.getLogger(__name__)


class MultiGeocoder(GeocoderPort):
    """Chain of geocoders; the first successful answer wins.

    Providers are tried strictly in the given order and a provider is only
    asked after every provider before it failed. A provider raising
    ProviderError counts as that provider failing.
    """

    def __init__(self, providers: Sequence[GeocoderPort]):
        self._providers = list(providers)

    @property
    def providers(self) -> list[GeocoderPort]:
        return list(self._providers)

    def geocode(self, address: str | GeoLoc) -> GeoLoc:
        for provider in self._providers:
            try:
                result = provider.geocode(address)
            except ProviderError:
                logger.exception("Provider %s failed for '%s'", type(provider).__name__, query_for(address))
                continue
            if result.success:
                logger.info("%s resolved '%s'", result.provider or type(provider).__name__, query_for(address))
                return result

        logger.warning("All %d geocoders failed for '%s'", len(self._providers), query_for(address))
        return GeoLoc.failed()
