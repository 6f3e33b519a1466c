"""
Exploratory filters applied on top of a proximity search.

These are the sidebar filters of the search page: plain conjunctive
predicates over beekeeper attributes, evaluated after ranking.  They never
reject their input -- ``max_distance_km`` in particular is advisory and may
be wider than the radius accepted by the nearby search endpoint.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, time
from typing import Iterable, Optional, TypeVar, Union

from .entities import Beekeeper, HoneyType, RankedVendor
from .enums import WEEKDAYS, SortBy

logger = logging.getLogger(__name__)

Result = TypeVar("Result", Beekeeper, RankedVendor)


@dataclass(frozen=True)
class ExploreFilters:
    honey_types: frozenset[str] = frozenset()
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    jar_sizes: frozenset[str] = frozenset()
    open_now: bool = False
    has_website: bool = False
    city: Optional[str] = None
    max_distance_km: Optional[float] = None

    def matches(
        self,
        bk: Beekeeper,
        distance_km: Optional[float] = None,
        at: Optional[datetime] = None,
    ) -> bool:
        if (
            self.max_distance_km is not None
            and distance_km is not None
            and distance_km > self.max_distance_km
        ):
            return False
        if self._filters_honey and not any(
            self._honey_matches(h) for h in bk.honey_types
        ):
            return False
        if self.has_website and not (bk.website or "").strip():
            return False
        if self.city and self.city.casefold() not in (bk.city or "").casefold():
            return False
        if self.open_now and not is_open(bk, at or datetime.now()):
            return False
        return True

    @property
    def _filters_price(self) -> bool:
        return self.min_price is not None or self.max_price is not None

    @property
    def _filters_honey(self) -> bool:
        return bool(self.honey_types or self.jar_sizes or self._filters_price)

    def _honey_matches(self, honey: HoneyType) -> bool:
        """Name, price and jar size must all hold for the same honey type.

        Price and jar size only count for honey that is still available.
        """
        if self.honey_types and honey.name.casefold() not in {
            n.casefold() for n in self.honey_types
        }:
            return False
        if (self._filters_price or self.jar_sizes) and not honey.available:
            return False
        if self._filters_price and not _priced_within(
            honey.price, self.min_price, self.max_price
        ):
            return False
        if self.jar_sizes and (honey.unit or "").casefold() not in {
            s.casefold() for s in self.jar_sizes
        }:
            return False
        return True

    def apply(
        self, results: Iterable[Result], at: Optional[datetime] = None
    ) -> list[Result]:
        """Keep the entries matching every active predicate, order unchanged.

        Accepts ranked search output or plain beekeepers (no location given).
        *at* is the moment for ``open_now``; pass an aware datetime in the
        region's timezone, opening hours are stored as local wall-clock times.
        """
        moment = at or datetime.now()
        kept = []
        for item in results:
            if isinstance(item, RankedVendor):
                ok = self.matches(item.vendor, item.distance_km, moment)
            else:
                ok = self.matches(item, None, moment)
            if ok:
                kept.append(item)
        return kept


def sort_results(results: list[Result], sort_by: SortBy) -> list[Result]:
    """Reorder results; every ordering is stable.

    ``DISTANCE`` keeps the incoming order, which for ranked search output is
    already nearest first.
    """
    if sort_by is SortBy.NAME:
        return sorted(results, key=lambda r: _vendor(r).name.casefold())
    if sort_by is SortBy.PRICE:
        return sorted(results, key=_price_key)
    return list(results)


def is_open(beekeeper: Beekeeper, at: datetime) -> bool:
    """True if one of the day's opening ranges covers *at*."""
    hours = beekeeper.opening_hours.get(WEEKDAYS[at.weekday()].value)
    if not hours:
        return False
    now = at.time()
    return any(start <= now < end for start, end in parse_opening_ranges(hours))


def parse_opening_ranges(text: str) -> list[tuple[time, time]]:
    """Parse ``"08:00-12:00, 14:00-18:00"``; unparseable parts are skipped."""
    ranges: list[tuple[time, time]] = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            start_s, end_s = part.split("-")
            start = time.fromisoformat(start_s.strip())
            end = time.fromisoformat(end_s.strip())
        except ValueError:
            logger.debug("Ignoring unparseable opening hours %r", part)
            continue
        ranges.append((start, end))
    return ranges


# ── Internals ─────────────────────────────────────────────────────────


def _vendor(item: Union[Beekeeper, RankedVendor]) -> Beekeeper:
    return item.vendor if isinstance(item, RankedVendor) else item


def _priced_within(
    price: Optional[float], low: Optional[float], high: Optional[float]
) -> bool:
    if price is None:
        return False
    if low is not None and price < low:
        return False
    if high is not None and price > high:
        return False
    return True


def _price_key(item: Union[Beekeeper, RankedVendor]) -> float:
    price = _vendor(item).cheapest_price()
    return math.inf if price is None else price
