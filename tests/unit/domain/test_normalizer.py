"""Tests for normalize — anything point-like to LatLng."""

from decimal import Decimal

import pytest

from geokit.domain.entities.location import Location
from geokit.domain.errors import GeocodeError, NormalizationError
from geokit.domain.services.normalizer import normalize
from geokit.domain.value_objects.geo_loc import GeoLoc
from geokit.domain.value_objects.lat_lng import LatLng

# ─── Direct coordinates ─────────────────────────────────────────────


def test_two_arguments():
    assert normalize(32.91663, -96.982841) == LatLng(32.91663, -96.982841)


def test_two_string_arguments():
    assert normalize("32.91663", "-96.982841") == LatLng(32.91663, -96.982841)


@pytest.mark.parametrize(
    "text",
    [
        "32.91663,-96.982841",
        "32.91663, -96.982841",
        "32.91663 -96.982841",
        "  32.91663,-96.982841  ",
    ],
)
def test_decimal_pair_string(text, make_geocoder):
    geocoder = make_geocoder()
    assert normalize(text, geocoder=geocoder) == LatLng(32.91663, -96.982841)
    assert geocoder.calls == []


def test_integer_pair_string():
    assert normalize("30,170") == LatLng(30, 170)


@pytest.mark.parametrize(
    "pair",
    [
        [32.91663, -96.982841],
        (32.91663, -96.982841),
        ["32.91663", "-96.982841"],
        (Decimal("32.91663"), Decimal("-96.982841")),
    ],
)
def test_sequence_pair(pair):
    assert normalize(pair) == LatLng(32.91663, -96.982841)


def test_lat_lng_passes_through():
    p = LatLng(1, 2)
    assert normalize(p) is p


def test_geo_loc_gives_its_coordinate(spear_street):
    assert normalize(spear_street) == LatLng(37.792528, -122.393981)


def test_mappable_record():
    loc = Location(id=1, street="216 S. Michigan St.", lat=44.797213, lng=-91.533813)
    assert normalize(loc) == LatLng(44.797213, -91.533813)


# ─── Free-text addresses ────────────────────────────────────────────


def test_address_is_geocoded(make_geocoder):
    result = GeoLoc(lat=44.797213, lng=-91.533813, success=True, provider="fake")
    geocoder = make_geocoder(result)
    point = normalize("216 S. Michigan St., Eau Claire, WI 54703", geocoder=geocoder)
    assert point == LatLng(44.797213, -91.533813)
    assert geocoder.calls == ["216 S. Michigan St., Eau Claire, WI 54703"]


def test_address_is_stripped_before_geocoding(make_geocoder, spear_street):
    geocoder = make_geocoder(spear_street)
    normalize("  100 Spear St, San Francisco  ", geocoder=geocoder)
    assert geocoder.calls == ["100 Spear St, San Francisco"]


def test_address_geocode_failure_propagates(make_geocoder):
    with pytest.raises(GeocodeError):
        normalize("nowhere at all", geocoder=make_geocoder())


def test_address_without_geocoder_raises():
    with pytest.raises(GeocodeError):
        normalize("216 S. Michigan St., Eau Claire, WI 54703")


# ─── Unrecognized input ─────────────────────────────────────────────


@pytest.mark.parametrize("thing", [None, 42, {"lat": 1, "lng": 2}, [1, 2, 3], [LatLng(1, 2), LatLng(3, 4)], object()])
def test_unrecognized_shapes_raise(thing):
    with pytest.raises(NormalizationError) as exc_info:
        normalize(thing)
    assert type(thing).__name__ in str(exc_info.value)
