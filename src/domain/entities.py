"""
Domain entities and value objects.

Everything here is immutable: search results and viewports are built fresh
for every query and nothing is shared between requests.

- ``GeoPoint`` validates its coordinates on construction, so any point that
  exists is a valid one.
- ``Beekeeper`` is the concrete vendor record.  The proximity engine only
  relies on the ``Located`` protocol (an ``id`` and a ``location``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, Optional, Protocol, TypeVar


class InvalidArgument(ValueError):
    """Raised for out-of-range coordinates or a non-positive radius."""


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not _in_range(self.latitude, 90.0):
            raise InvalidArgument(
                f"latitude must be within [-90, 90], got {self.latitude!r}"
            )
        if not _in_range(self.longitude, 180.0):
            raise InvalidArgument(
                f"longitude must be within [-180, 180], got {self.longitude!r}"
            )

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


def _in_range(value: float, bound: float) -> bool:
    try:
        return math.isfinite(value) and -bound <= value <= bound
    except TypeError:
        return False


@dataclass(frozen=True)
class Viewport:
    center: GeoPoint
    zoom: int


class Located(Protocol):
    """Anything the proximity engine can rank."""

    @property
    def id(self) -> object: ...

    @property
    def location(self) -> GeoPoint: ...


V = TypeVar("V", bound=Located)


@dataclass(frozen=True)
class RankedVendor(Generic[V]):
    vendor: V
    distance_km: float


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class HoneyType:
    name: str
    price: Optional[float] = None  # EUR per unit
    unit: Optional[str] = None  # jar size, e.g. "500g Glas"
    available: bool = True


@dataclass(frozen=True)
class Beekeeper:
    id: str
    name: str
    location: GeoPoint
    address: str = ""
    city: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    description: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    # weekday name ("monday") -> "08:00-12:00, 14:00-18:00"
    opening_hours: dict[str, str] = field(default_factory=dict)
    honey_types: tuple[HoneyType, ...] = ()
    is_verified: bool = False

    def available_honey(self) -> tuple[HoneyType, ...]:
        return tuple(h for h in self.honey_types if h.available)

    def cheapest_price(self) -> Optional[float]:
        """Lowest price over all priced honey types, ``None`` if unpriced."""
        prices = [h.price for h in self.honey_types if h.price is not None]
        return min(prices) if prices else None
