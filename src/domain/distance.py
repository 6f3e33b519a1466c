"""
Distance calculation using the Haversine formula.

Assumption
----------
Beekeepers are compared by great-circle distance, not road distance.  For
a visitor looking for honey within a few dozen km the difference is small
and the calculation needs no external routing service.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import GeoPoint

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    h = min(h, 1.0)  # rounding near antipodes
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two ``GeoPoint`` values."""
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def format_distance(km: float) -> str:
    """Human readable label: metres below 1 km, else one decimal km."""
    if km < 1:
        return f"{round(km * 1000)} m"
    return f"{km:.1f} km"
