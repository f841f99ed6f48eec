"""Domain errors — raised by normalization and geocoding."""

from __future__ import annotations


class NormalizationError(ValueError):
    """Input cannot be interpreted as a coordinate."""


class GeocodeError(Exception):
    """No configured provider could geocode the address."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Could not geocode address: {address!r}")


class ProviderError(Exception):
    """Transport or parse failure scoped to a single provider."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")
