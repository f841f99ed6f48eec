"""Turn anything point-like into a LatLng.

Accepted inputs, first match wins:
1) two arguments (lat, lng)
2) a string "37.1234,-129.1234" or "37.1234 -129.1234"
3) any other string, geocoded through the supplied geocoder
4) a two-element sequence [37.1234, -129.1234]
5) a LatLng, passed through as-is
6) anything Mappable (GeoLoc, Location, ...), via ``to_lat_lng()``
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from numbers import Real
from typing import TYPE_CHECKING, Any

from geokit.domain.errors import GeocodeError, NormalizationError
from geokit.domain.value_objects.lat_lng import LatLng, Mappable

if TYPE_CHECKING:
    from geokit.application.ports.geocoder_port import GeocoderPort

logger = logging.getLogger(__name__)

DECIMAL_PAIR_RE = re.compile(r"^(-?\d+\.?\d*)[, ]\s*(-?\d+\.?\d*)$")


def normalize(thing: Any, other: Any = None, *, geocoder: GeocoderPort | None = None) -> LatLng:
    """Normalize ``thing`` (and optionally ``other``) into a LatLng.

    Raises:
        NormalizationError: the input has no recognizable point shape.
        GeocodeError: a free-text address could not be geocoded.
    """
    if other is not None:
        thing = (thing, other)

    match thing:
        case str():
            return _from_text(thing, geocoder)
        case [Real() | Decimal() | str() as lat, Real() | Decimal() | str() as lng]:
            return LatLng(lat, lng)
        case LatLng():
            return thing
        case Mappable():
            return thing.to_lat_lng()
        case _:
            raise NormalizationError(
                f"{thing!r} ({type(thing).__name__}) cannot be normalized to a LatLng: "
                "expected a string, a (lat, lng) pair, a LatLng or a mappable record"
            )


def _from_text(text: str, geocoder: GeocoderPort | None) -> LatLng:
    text = text.strip()
    match = DECIMAL_PAIR_RE.match(text)
    if match:
        return LatLng(match.group(1), match.group(2))

    if geocoder is None:
        logger.warning("No geocoder available to resolve '%s'", text)
        raise GeocodeError(text)
    return geocoder.geocode_or_raise(text).to_lat_lng()
