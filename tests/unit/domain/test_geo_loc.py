"""Tests for GeoLoc — the unified geocoding result."""

import pytest

from geokit.domain.errors import NormalizationError
from geokit.domain.value_objects.geo_loc import GeoLoc
from geokit.domain.value_objects.lat_lng import LatLng, Mappable


def test_defaults():
    loc = GeoLoc()
    assert loc.success is False
    assert loc.precision == "unknown"
    assert loc.lat is None
    assert loc.point is None
    assert loc.full_address == ""


def test_failed_carries_provider():
    loc = GeoLoc.failed("google")
    assert loc.success is False
    assert loc.provider == "google"


def test_full_address_derived(spear_street):
    assert spear_street.full_address == "100 Spear St, San Francisco, CA, 94105, US"


def test_full_address_skips_blank_parts():
    loc = GeoLoc(city="San Francisco", state="CA", postal_code="", country_code="US")
    assert loc.full_address == "San Francisco, CA, US"


def test_full_address_explicit_wins(spear_street):
    spear_street.full_address = "100 Spear Street, San Francisco, CA 94105, USA"
    assert spear_street.full_address == "100 Spear Street, San Francisco, CA 94105, USA"
    assert spear_street.to_geocodeable_string() == "100 Spear St, San Francisco, CA, 94105, US"


def test_is_us(spear_street):
    assert spear_street.is_us()
    assert not GeoLoc(country_code="CA").is_us()
    assert not GeoLoc().is_us()


# ─── Street number / name ───────────────────────────────────────────


def test_street_number_and_name(spear_street):
    assert spear_street.street_number == "100"
    assert spear_street.street_name == "Spear St"


def test_street_without_number():
    loc = GeoLoc(street_address="Spear St")
    assert loc.street_number == ""
    assert loc.street_name == "Spear St"


def test_street_absent():
    loc = GeoLoc(city="San Francisco")
    assert loc.street_number is None
    assert loc.street_name is None


# ─── Setters ─────────────────────────────────────────────────────────


def test_city_setter_titleizes():
    loc = GeoLoc()
    loc.city = "san FRANCISCO"
    assert loc.city == "San Francisco"


def test_street_address_setter_titleizes():
    loc = GeoLoc()
    loc.street_address = "100 spear st"
    assert loc.street_address == "100 Spear St"


def test_setters_accept_none():
    loc = GeoLoc(city="Dallas")
    loc.city = None
    assert loc.city is None


def test_constructor_keeps_casing():
    assert GeoLoc(city="eau claire").city == "eau claire"


def test_lat_lng_set_field_by_field():
    loc = GeoLoc()
    loc.lat = "44.797213"
    assert loc.point is None
    loc.lng = "-91.533813"
    assert loc.to_lat_lng() == LatLng(44.797213, -91.533813)
    assert loc.coordinate_string == "44.797213,-91.533813"


# ─── Coordinate capability ──────────────────────────────────────────


def test_geo_loc_is_mappable(spear_street):
    assert isinstance(spear_street, Mappable)
    assert spear_street.to_lat_lng() == LatLng(37.792528, -122.393981)


def test_geo_loc_without_coordinate_cannot_convert():
    with pytest.raises(NormalizationError):
        GeoLoc.failed("google").to_lat_lng()


def test_distance_from_geo_loc(spear_street):
    assert LatLng(37.792528, -122.393981).distance_to(spear_street) == 0.0


# ─── as_map ──────────────────────────────────────────────────────────


def test_as_map(spear_street):
    assert spear_street.as_map() == {
        "success": True,
        "lat": 37.792528,
        "lng": -122.393981,
        "country_code": "US",
        "city": "San Francisco",
        "state": "CA",
        "postal_code": "94105",
        "street_address": "100 Spear St",
        "provider": "fake",
        "full_address": "100 Spear St, San Francisco, CA, 94105, US",
        "is_us": True,
        "coordinate_string": "37.792528,-122.393981",
        "precision": "unknown",
    }


def test_str_summary(spear_street):
    text = str(spear_street)
    assert "Provider: fake" in text
    assert "City: San Francisco" in text
    assert "Success: True" in text
