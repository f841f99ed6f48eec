"""Port interface for geocoding addresses to coordinates."""

from __future__ import annotations

from abc import ABC, abstractmethod

from geokit.domain.errors import GeocodeError
from geokit.domain.value_objects.geo_loc import GeoLoc


class GeocoderPort(ABC):
    @abstractmethod
    def geocode(self, address: str | GeoLoc) -> GeoLoc:
        """Convert an address into a GeoLoc.

        Never raises for lookup failures; returns a GeoLoc with
        ``success=False`` instead.
        """
        ...

    def geocode_or_raise(self, address: str | GeoLoc) -> GeoLoc:
        """Like ``geocode`` but raises GeocodeError when nothing resolved."""
        result = self.geocode(address)
        if not result.success:
            raise GeocodeError(query_for(address))
        return result


def query_for(address: str | GeoLoc) -> str:
    """The free-text query string for ``address``."""
    if isinstance(address, GeoLoc):
        return address.full_address
    return address.strip()
