"""Dependency wiring — builds the provider chain from settings."""

from __future__ import annotations

import logging
from collections.abc import Callable

from geokit.adapters.geocoder.google_geocoder import GoogleGeocoder
from geokit.adapters.geocoder.nominatim_geocoder import NominatimGeocoder
from geokit.adapters.geocoder.us_geocoder import UsGeocoder
from geokit.adapters.http.httpx_fetcher import HttpxFetcher
from geokit.application.ports.fetcher_port import FetcherPort
from geokit.application.ports.geocoder_port import GeocoderPort
from geokit.application.use_cases.geocode_location import GeocodeLocationUseCase
from geokit.application.use_cases.multi_geocoder import MultiGeocoder
from geokit.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def _google(fetcher: FetcherPort, settings: Settings) -> GeocoderPort | None:
    if not settings.google_maps_api_key:
        logger.info("GOOGLE_MAPS_API_KEY not set, leaving Google out of the chain")
        return None
    return GoogleGeocoder(fetcher, api_key=settings.google_maps_api_key)


def _us(fetcher: FetcherPort, settings: Settings) -> GeocoderPort:
    return UsGeocoder(fetcher, credentials=settings.geocoder_us_credentials)


def _nominatim(fetcher: FetcherPort, settings: Settings) -> GeocoderPort:
    return NominatimGeocoder(fetcher)


PROVIDER_FACTORIES: dict[str, Callable[[FetcherPort, Settings], GeocoderPort | None]] = {
    "google": _google,
    "us": _us,
    "nominatim": _nominatim,
}


def build_geocoder(settings: Settings | None = None, fetcher: FetcherPort | None = None) -> MultiGeocoder:
    """Build the MultiGeocoder described by ``settings.geocoder_providers``.

    Raises:
        ValueError: if a configured provider name is unknown.
    """
    settings = settings or default_settings
    fetcher = fetcher or HttpxFetcher(timeout=settings.geocoder_timeout, user_agent=settings.geocoder_user_agent)

    providers: list[GeocoderPort] = []
    for name in settings.provider_order:
        factory = PROVIDER_FACTORIES.get(name)
        if factory is None:
            raise ValueError(f"Unknown geocoder provider {name!r}; expected one of {sorted(PROVIDER_FACTORIES)}")
        provider = factory(fetcher, settings)
        if provider is not None:
            providers.append(provider)

    logger.info("Geocoder chain: %s", [type(p).__name__ for p in providers])
    return MultiGeocoder(providers)


def get_geocode_location_uc(geocoder: GeocoderPort | None = None) -> GeocodeLocationUseCase:
    return GeocodeLocationUseCase(geocoder=geocoder or build_geocoder())
