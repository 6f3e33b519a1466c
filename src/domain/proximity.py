"""
Proximity Search
================

Radius search over an in-memory list of beekeepers.

1. **Annotate** -- haversine distance from the query point to every
   candidate.
2. **Filter**   -- keep candidates with ``distance_km <= radius_km``
   (the boundary is inclusive).
3. **Rank**     -- stable ascending sort on ``distance_km``; candidates at
   the same distance keep their input order.

``nearest`` is the one "closest beekeeper" reduction used both for map
framing and for the distance shown next to the nearest result.

Complexity
----------
* ``search``:  O(n log n) -- one distance per candidate plus the sort
* ``nearest``: O(n)

A linear scan is deliberate: the directory holds tens to low hundreds of
beekeepers, so no spatial index is maintained.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from .distance import distance_km
from .entities import GeoPoint, InvalidArgument, RankedVendor, V


def search(
    query: GeoPoint, radius_km: float, candidates: Iterable[V]
) -> list[RankedVendor[V]]:
    """Return candidates within *radius_km* of *query*, nearest first."""
    require_point(query)
    if not _positive(radius_km):
        raise InvalidArgument(f"radius must be > 0 km, got {radius_km!r}")

    ranked = [
        RankedVendor(vendor=c, distance_km=d)
        for c, d in _annotate(query, candidates)
        if d <= radius_km
    ]
    # list.sort is stable -> equal distances keep input order
    ranked.sort(key=lambda r: r.distance_km)
    return ranked


def rank(query: GeoPoint, candidates: Iterable[V]) -> list[RankedVendor[V]]:
    """Annotate and sort every candidate, without a radius bound."""
    require_point(query)
    ranked = [
        RankedVendor(vendor=c, distance_km=d)
        for c, d in _annotate(query, candidates)
    ]
    ranked.sort(key=lambda r: r.distance_km)
    return ranked


def nearest(
    query: GeoPoint, candidates: Sequence[V]
) -> Optional[RankedVendor[V]]:
    """Closest candidate to *query*; first occurrence wins ties."""
    require_point(query)
    best: Optional[RankedVendor[V]] = None
    for c, d in _annotate(query, candidates):
        if best is None or d < best.distance_km:
            best = RankedVendor(vendor=c, distance_km=d)
    return best


def require_point(point: object) -> GeoPoint:
    """Reject anything that is not a constructed (hence valid) ``GeoPoint``."""
    if not isinstance(point, GeoPoint):
        raise InvalidArgument(f"expected a GeoPoint, got {point!r}")
    return point


# ── Internals ─────────────────────────────────────────────────────────


def _annotate(query: GeoPoint, candidates: Iterable[V]):
    for c in candidates:
        location = getattr(c, "location", None)
        if not isinstance(location, GeoPoint):
            raise InvalidArgument(
                f"candidate {getattr(c, 'id', c)!r} has no valid location"
            )
        yield c, distance_km(query, location)


def _positive(value: float) -> bool:
    try:
        return math.isfinite(value) and value > 0
    except TypeError:
        return False
