"""Unit tests for the sidebar filters and result orderings."""

from datetime import datetime, time, timezone
from zoneinfo import ZoneInfo

import pytest

from src.domain import proximity
from src.domain.entities import HoneyType
from src.domain.enums import SortBy
from src.domain.filters import (
    ExploreFilters,
    is_open,
    parse_opening_ranges,
    sort_results,
)
from tests.conftest import VIENNA, make_beekeeper

MONDAY_10AM = datetime(2026, 10, 19, 10, 0)  # a Monday
MONDAY_1PM = datetime(2026, 10, 19, 13, 0)
SATURDAY_9AM = datetime(2026, 10, 24, 9, 0)


def _ids(results):
    return [getattr(r, "vendor", r).id for r in results]


@pytest.fixture
def ranked(directory):
    return proximity.rank(VIENNA, directory)


class TestExploreFilters:
    def test_no_filters_keep_everything(self, ranked):
        assert ExploreFilters().apply(ranked) == ranked

    def test_honey_type_case_insensitive(self, ranked):
        f = ExploreFilters(honey_types=frozenset({"akazienhonig"}))
        assert _ids(f.apply(ranked)) == ["stephansplatz"]

    def test_price_range_ignores_unavailable_and_unpriced(self, ranked):
        # Prater's 4.00 Waldhonig is sold out, Innsbruck has no price
        f = ExploreFilters(max_price=5.0)
        assert f.apply(ranked) == []

    def test_price_range_inclusive(self, ranked):
        f = ExploreFilters(min_price=8.5, max_price=10.5)
        assert _ids(f.apply(ranked)) == ["stephansplatz", "prater"]

    def test_jar_size(self, ranked):
        f = ExploreFilters(jar_sizes=frozenset({"250g Glas"}))
        assert f.apply(ranked) == []
        f = ExploreFilters(jar_sizes=frozenset({"500G GLAS"}))
        assert len(f.apply(ranked)) == 3

    def test_has_website_ignores_blank(self, ranked):
        f = ExploreFilters(has_website=True)
        assert _ids(f.apply(ranked)) == ["stephansplatz"]

    def test_city_substring(self, ranked):
        f = ExploreFilters(city="WIE")
        assert _ids(f.apply(ranked)) == ["stephansplatz", "prater"]

    def test_open_now(self, ranked):
        f = ExploreFilters(open_now=True)
        assert _ids(f.apply(ranked, at=MONDAY_10AM)) == ["stephansplatz"]
        assert f.apply(ranked, at=MONDAY_1PM) == []
        assert _ids(f.apply(ranked, at=SATURDAY_9AM)) == ["prater"]

    def test_advisory_distance_accepts_wide_values(self, ranked):
        assert len(ExploreFilters(max_distance_km=200).apply(ranked)) == 2
        assert len(ExploreFilters(max_distance_km=1000).apply(ranked)) == 3

    def test_predicates_are_conjunctive(self, ranked):
        f = ExploreFilters(city="Wien", honey_types=frozenset({"Lindenhonig"}))
        assert _ids(f.apply(ranked)) == ["prater"]

    def test_honey_type_and_price_hold_for_the_same_jar(self):
        bk = make_beekeeper(
            "mixed",
            VIENNA,
            honey_types=(
                HoneyType("Lindenhonig", 10.5, "500g Glas"),
                HoneyType("Akazienhonig", 9.9, "250g Glas"),
            ),
        )
        linden_cheap = ExploreFilters(
            honey_types=frozenset({"Lindenhonig"}), max_price=10
        )
        assert not linden_cheap.matches(bk)
        assert ExploreFilters(
            honey_types=frozenset({"Akazienhonig"}), max_price=10
        ).matches(bk)

    def test_honey_type_and_jar_size_hold_for_the_same_jar(self):
        bk = make_beekeeper(
            "mixed",
            VIENNA,
            honey_types=(
                HoneyType("Lindenhonig", 10.5, "500g Glas"),
                HoneyType("Akazienhonig", 9.9, "250g Glas"),
            ),
        )
        f = ExploreFilters(
            honey_types=frozenset({"Lindenhonig"}),
            jar_sizes=frozenset({"250g Glas"}),
        )
        assert not f.matches(bk)

    def test_sold_out_type_does_not_satisfy_price(self, ranked):
        # Prater's Waldhonig is cheap but sold out
        f = ExploreFilters(honey_types=frozenset({"Waldhonig"}), max_price=5.0)
        assert f.apply(ranked) == []
        assert _ids(
            ExploreFilters(honey_types=frozenset({"Waldhonig"})).apply(ranked)
        ) == ["prater"]

    def test_aware_moment_uses_its_wall_clock(self, ranked):
        vienna = ZoneInfo("Europe/Vienna")
        at = datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc).astimezone(vienna)
        f = ExploreFilters(open_now=True)
        assert _ids(f.apply(ranked, at=at)) == ["stephansplatz"]

    def test_plain_beekeepers_skip_distance(self, directory):
        f = ExploreFilters(max_distance_km=1.0, city="wien")
        assert _ids(f.apply(directory)) == ["stephansplatz", "prater"]


class TestSortResults:
    def test_distance_keeps_order(self, ranked):
        assert sort_results(ranked, SortBy.DISTANCE) == ranked

    def test_name(self, ranked):
        assert _ids(sort_results(ranked, SortBy.NAME)) == [
            "innsbruck",  # Alpenhonig Tirol
            "prater",  # Bienenhof Prater
            "stephansplatz",  # Imkerei Donaublick
        ]

    def test_price_unpriced_last(self, ranked):
        # cheapest: Prater 4.00 (sold out still counts), Donaublick 8.50
        assert _ids(sort_results(ranked, SortBy.PRICE)) == [
            "prater",
            "stephansplatz",
            "innsbruck",
        ]

    def test_price_is_stable(self):
        a = make_beekeeper("a", VIENNA, honey_types=(HoneyType("X", 5.0),))
        b = make_beekeeper("b", VIENNA, honey_types=(HoneyType("Y", 5.0),))
        assert _ids(sort_results([b, a], SortBy.PRICE)) == ["b", "a"]


class TestOpeningHours:
    def test_parse_multiple_ranges(self):
        assert parse_opening_ranges("09:00-12:00, 14:00-18:00") == [
            (time(9), time(12)),
            (time(14), time(18)),
        ]

    def test_parse_skips_garbage(self):
        assert parse_opening_ranges("nach Vereinbarung, 10:00-11:00") == [
            (time(10), time(11))
        ]

    def test_end_is_exclusive(self):
        bk = make_beekeeper("x", VIENNA, opening_hours={"monday": "09:00-10:00"})
        assert not is_open(bk, MONDAY_10AM)
        assert is_open(bk, datetime(2026, 10, 19, 9, 59))

    def test_missing_day_is_closed(self):
        bk = make_beekeeper("x", VIENNA)
        assert not is_open(bk, MONDAY_10AM)
