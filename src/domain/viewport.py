"""
Viewport Framing
================

Picks the map center and a discrete zoom level for a search page.

Cases
-----
1. **No query point**          -- whole service region (Austria), zoom 7.
2. **Query, no beekeepers**    -- centered on the query point, zoom 12.
3. **Query + beekeepers**      -- box around the query point and the
   nearest beekeeper, padded by 15 % per side; center is the box centroid
   and the zoom comes from a step function of the box's larger side,
   clamped to [9, 14].

Zoom breakpoints (degrees of the padded box's larger side)
----------------------------------------------------------
  > 5 -> 7,  > 2 -> 9,  > 1 -> 10,  > 0.5 -> 11,  > 0.2 -> 12,  > 0.1 -> 13,
  else 14

Every breakpoint keeps both markers inside the frame, so no continuous
fit-to-bounds computation is needed.

Note: boxes are not wrapped across the antimeridian.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .entities import GeoPoint, RankedVendor, Viewport, V
from .proximity import nearest, require_point

REGION_CENTER = GeoPoint(47.5, 13.5)
REGION_ZOOM = 7
QUERY_ONLY_ZOOM = 12
MIN_ZOOM = 9
MAX_ZOOM = 14
PADDING_RATIO = 0.15

# (span threshold in degrees, zoom) -- first threshold exceeded wins
ZOOM_BREAKPOINTS: tuple[tuple[float, int], ...] = (
    (5.0, 7),
    (2.0, 9),
    (1.0, 10),
    (0.5, 11),
    (0.2, 12),
    (0.1, 13),
)
CLOSEST_ZOOM = 14


@dataclass(frozen=True)
class BoundingBox:
    south: float
    west: float
    north: float
    east: float

    @classmethod
    def around(cls, *points: GeoPoint) -> BoundingBox:
        lats = [p.latitude for p in points]
        lngs = [p.longitude for p in points]
        return cls(min(lats), min(lngs), max(lats), max(lngs))

    @property
    def lat_span(self) -> float:
        return self.north - self.south

    @property
    def lng_span(self) -> float:
        return self.east - self.west

    @property
    def center(self) -> GeoPoint:
        return GeoPoint(
            (self.south + self.north) / 2, (self.west + self.east) / 2
        )

    def pad(self, ratio: float) -> BoundingBox:
        """Grow every side by *ratio* of the span along that axis."""
        dlat = self.lat_span * ratio
        dlng = self.lng_span * ratio
        return BoundingBox(
            self.south - dlat,
            self.west - dlng,
            self.north + dlat,
            self.east + dlng,
        )


def zoom_for_span(span_deg: float) -> int:
    """Step function from angular span to map zoom.  O(1)."""
    for threshold, zoom in ZOOM_BREAKPOINTS:
        if span_deg > threshold:
            return zoom
    return CLOSEST_ZOOM


class ViewportFramer:
    """Decides what part of the map to show for a query point."""

    def __init__(
        self,
        region_center: GeoPoint = REGION_CENTER,
        region_zoom: int = REGION_ZOOM,
        query_only_zoom: int = QUERY_ONLY_ZOOM,
        min_zoom: int = MIN_ZOOM,
        max_zoom: int = MAX_ZOOM,
        padding: float = PADDING_RATIO,
    ):
        self.region_center = region_center
        self.region_zoom = region_zoom
        self.query_only_zoom = query_only_zoom
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.padding = padding

    def frame(
        self, query: Optional[GeoPoint], candidates: Sequence[V]
    ) -> Viewport:
        if query is None:
            return Viewport(center=self.region_center, zoom=self.region_zoom)
        return self.frame_nearest(query, nearest(query, candidates))

    def frame_nearest(
        self, query: Optional[GeoPoint], closest: Optional[RankedVendor]
    ) -> Viewport:
        """Same decision as ``frame`` for a nearest result computed upstream."""
        if query is None:
            return Viewport(center=self.region_center, zoom=self.region_zoom)
        require_point(query)
        if closest is None:
            return Viewport(center=query, zoom=self.query_only_zoom)

        box = BoundingBox.around(query, closest.vendor.location).pad(
            self.padding
        )
        zoom = zoom_for_span(max(box.lat_span, box.lng_span))
        return Viewport(
            center=box.center,
            zoom=max(self.min_zoom, min(self.max_zoom, zoom)),
        )


_default_framer = ViewportFramer()


def frame(query: Optional[GeoPoint], candidates: Sequence[V]) -> Viewport:
    """Frame *query* and its nearest candidate with the default settings."""
    return _default_framer.frame(query, candidates)
