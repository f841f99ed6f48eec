"""Geodesy — distance, heading, endpoint and midpoint on a spherical Earth.

All functions are pure: they accept anything ``normalize`` understands
without a geocoder (LatLng, (lat, lng) pairs, "lat,lng" strings, Mappable
records) and never geocode. Angles are taken and returned in degrees.
"""

from __future__ import annotations

import math
from typing import Any

from geokit.domain.value_objects.enums import DEFAULT_FORMULA, DEFAULT_UNITS, Formula, Units
from geokit.domain.services.normalizer import normalize
from geokit.domain.value_objects.lat_lng import LatLng

KMS_PER_MILE = 1.609
EARTH_RADIUS_IN_MILES = 3963.19
EARTH_RADIUS_IN_KMS = EARTH_RADIUS_IN_MILES * KMS_PER_MILE
MILES_PER_LATITUDE_DEGREE = 69.1
KMS_PER_LATITUDE_DEGREE = MILES_PER_LATITUDE_DEGREE * KMS_PER_MILE
# Historical constant: the flat formula scales longitude degrees by
# EARTH_RADIUS_IN_MILES / MILES_PER_LATITUDE_DEGREE, not by 69.1.
LATITUDE_DEGREES = EARTH_RADIUS_IN_MILES / MILES_PER_LATITUDE_DEGREE


def deg2rad(degrees: float) -> float:
    return degrees / 180.0 * math.pi


def rad2deg(radians: float) -> float:
    return radians * 180.0 / math.pi


def to_heading(radians: float) -> float:
    return (rad2deg(radians) + 360) % 360


def earth_radius(units: Units) -> float:
    return EARTH_RADIUS_IN_MILES if units == Units.MILES else EARTH_RADIUS_IN_KMS


def units_per_latitude_degree(units: Units) -> float:
    return MILES_PER_LATITUDE_DEGREE if units == Units.MILES else KMS_PER_LATITUDE_DEGREE


def units_per_longitude_degree(lat: float, units: Units) -> float:
    """Length of one longitude degree at ``lat``; shrinks towards the poles."""
    miles_per_longitude_degree = abs(LATITUDE_DEGREES * math.cos(deg2rad(lat)))
    if units == Units.MILES:
        return miles_per_longitude_degree
    return miles_per_longitude_degree * KMS_PER_MILE


def distance_between(
    origin: Any,
    destination: Any,
    units: Units = DEFAULT_UNITS,
    formula: Formula = DEFAULT_FORMULA,
) -> float:
    """Distance between two points in ``units``.

    Args:
        origin: start point.
        destination: end point.
        units: miles or kilometers.
        formula: ``SPHERICAL`` (law of cosines) or ``FLAT`` (planar).

    Returns:
        0.0 for identical points, the distance otherwise.
    """
    start = normalize(origin)
    end = normalize(destination)
    if start == end:
        return 0.0

    if formula == Formula.FLAT:
        d_lat = units_per_latitude_degree(units) * (start.lat - end.lat)
        d_lng = units_per_longitude_degree(start.lat, units) * (start.lng - end.lng)
        return math.sqrt(d_lat**2 + d_lng**2)

    cos_angle = math.sin(deg2rad(start.lat)) * math.sin(deg2rad(end.lat)) + math.cos(
        deg2rad(start.lat)
    ) * math.cos(deg2rad(end.lat)) * math.cos(deg2rad(end.lng) - deg2rad(start.lng))
    # Rounding can push near-identical points a hair past 1.0.
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return earth_radius(units) * math.acos(cos_angle)


def heading_between(origin: Any, destination: Any) -> float:
    """Initial bearing in degrees, in [0, 360), from ``origin`` to ``destination``."""
    start = normalize(origin)
    end = normalize(destination)

    d_lng = deg2rad(end.lng - start.lng)
    from_lat = deg2rad(start.lat)
    to_lat = deg2rad(end.lat)
    y = math.sin(d_lng) * math.cos(to_lat)
    x = math.cos(from_lat) * math.sin(to_lat) - math.sin(from_lat) * math.cos(to_lat) * math.cos(d_lng)
    return to_heading(math.atan2(y, x))


def endpoint(
    start: Any,
    heading: float,
    distance: float,
    units: Units = DEFAULT_UNITS,
) -> LatLng:
    """Destination reached from ``start`` after ``distance`` along ``heading``."""
    origin = normalize(start)
    angular = float(distance) / earth_radius(units)
    lat = deg2rad(origin.lat)
    lng = deg2rad(origin.lng)
    bearing = deg2rad(heading)

    end_lat = math.asin(
        math.sin(lat) * math.cos(angular) + math.cos(lat) * math.sin(angular) * math.cos(bearing)
    )
    end_lng = lng + math.atan2(
        math.sin(bearing) * math.sin(angular) * math.cos(lat),
        math.cos(angular) - math.sin(lat) * math.sin(end_lat),
    )
    return LatLng(rad2deg(end_lat), rad2deg(end_lng))


def midpoint_between(origin: Any, destination: Any, units: Units = DEFAULT_UNITS) -> LatLng:
    """Point halfway along the great circle, not the arithmetic mean."""
    heading = heading_between(origin, destination)
    distance = distance_between(origin, destination, units=units)
    return endpoint(origin, heading, distance / 2, units=units)
