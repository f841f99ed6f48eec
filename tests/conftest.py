"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from geokit.application.ports.fetcher_port import FetcherPort
from geokit.application.ports.geocoder_port import GeocoderPort
from geokit.domain.errors import ProviderError
from geokit.domain.value_objects.geo_loc import GeoLoc

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeGeocoder(GeocoderPort):
    """Returns a canned GeoLoc and records every address it was asked for."""

    def __init__(self, result: GeoLoc | None = None, error: Exception | None = None):
        self._result = result or GeoLoc.failed("fake")
        self._error = error
        self.calls: list = []

    def geocode(self, address):
        self.calls.append(address)
        if self._error:
            raise self._error
        return self._result


class FakeFetcher(FetcherPort):
    """Returns a canned body and records every request."""

    def __init__(self, body: str = "", error: Exception | None = None):
        self._body = body
        self._error = error
        self.calls: list[tuple] = []
        self.auth: list[tuple[str, str] | None] = []

    def fetch(self, url, params=None, headers=None, auth=None):
        self.calls.append((url, dict(params or {})))
        self.auth.append(auth)
        if self._error:
            raise self._error
        return self._body


@pytest.fixture
def spear_street() -> GeoLoc:
    return GeoLoc(
        lat=37.792528,
        lng=-122.393981,
        street_address="100 Spear St",
        city="San Francisco",
        state="CA",
        postal_code="94105",
        country_code="US",
        success=True,
        provider="fake",
    )


@pytest.fixture
def make_geocoder():
    return FakeGeocoder


@pytest.fixture
def make_fetcher():
    return FakeFetcher


@pytest.fixture
def transport_error() -> ProviderError:
    return ProviderError("fake", "connection refused")
