"""
services/distance.py
──────────────────────────────────────────────────────────────────────────────
Great-circle distance between two localities (haversine formula).

    a = sin²(Δφ/2) + cos φ1 ⋅ cos φ2 ⋅ sin²(Δλ/2)
    c = 2 ⋅ atan2(√a, √(1−a))
    d = R ⋅ c

where φ is latitude, λ is longitude and R is the Earth's mean radius
(6 371 km).  Angles are converted to radians before the trig calls.

Coordinates are handled as Decimal up to the trig step and the result is
quantised to 0.01 km with ROUND_HALF_EVEN.

When either side has no coordinates, distance() returns MISSING_DISTANCE
instead of raising.  That value lies outside both the near and the fringe
band, so callers filter it out without a special case.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, Decimal

from suburb_finder.domain.models import Coordinates, Suburb

EARTH_MEAN_RADIUS_KM = Decimal(6371)

# Returned for any pair with a missing position; excluded by both bands.
MISSING_DISTANCE = Decimal(100)

_DEGREES_TO_RADIANS = Decimal(math.pi / 180)
_TWO_PLACES = Decimal("0.01")


def degrees_to_radians(degrees: Decimal) -> Decimal:
    """Convert an angle in decimal degrees to radians."""
    return degrees * _DEGREES_TO_RADIANS


def distance(a: Coordinates | None, b: Coordinates | None) -> Decimal:
    """Haversine distance in km between two points, rounded to 2 dp.

    Args:
        a: First point, or None if unknown.
        b: Second point, or None if unknown.

    Returns:
        Distance in kilometres, or MISSING_DISTANCE when either point is
        None.

    Examples:
        >>> sydney = Coordinates(Decimal("-33.8697"), Decimal("151.2099"))
        >>> surry_hills = Coordinates(Decimal("-33.8849"), Decimal("151.21"))
        >>> distance(sydney, surry_hills)
        Decimal('1.69')
        >>> distance(sydney, None)
        Decimal('100')
    """
    if a is None or b is None:
        return MISSING_DISTANCE

    d_lat = degrees_to_radians(b.latitude - a.latitude)
    d_lon = degrees_to_radians(b.longitude - a.longitude)
    lat1 = degrees_to_radians(a.latitude)
    lat2 = degrees_to_radians(b.latitude)

    # cos φ1 ⋅ cos φ2 is multiplied first so swapping a and b is bit-exact
    half_chord = (
        math.sin(float(d_lat) / 2) ** 2
        + math.cos(float(lat1)) * math.cos(float(lat2))
        * math.sin(float(d_lon) / 2) ** 2
    )
    angle = 2 * math.atan2(math.sqrt(half_chord), math.sqrt(1 - half_chord))

    return (EARTH_MEAN_RADIUS_KM * Decimal(angle)).quantize(
        _TWO_PLACES, rounding=ROUND_HALF_EVEN
    )


def distance_between(home: Suburb, other: Suburb) -> Decimal:
    """Distance between two localities; see distance()."""
    return distance(home.coordinates, other.coordinates)
