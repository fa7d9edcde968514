"""Tests for the heuristic intent parser, vehicle lexicon and route extraction."""

import pytest

from rideshare.domain.models import SearchIntent
from rideshare.nlp import (
    contains,
    detect_vehicle,
    extract_route,
    find_vehicle_token,
    has_route_separator,
    parse_query,
    split_route,
)


@pytest.mark.parametrize("query", ["", "   ", None])
def test_blank_query_returns_none(query):
    assert parse_query(query) is None


def test_vehicle_and_destination():
    """'Bike to Cyber Hub' has no origin once the vehicle is removed."""
    intent = parse_query("Bike to Cyber Hub")
    assert intent == SearchIntent(destination="Cyber Hub", vehicle_type="Bike")
    assert intent.origin is None


def test_plain_route():
    intent = parse_query("Delhi to Gurgaon")
    assert intent == SearchIntent(origin="Delhi", destination="Gurgaon")
    assert intent.vehicle_type is None


def test_vehicle_only():
    assert parse_query("Luxury") == SearchIntent(vehicle_type="Luxury")


def test_no_structure_returns_none():
    assert parse_query("hello world") is None


@pytest.mark.parametrize(
    "query,expected",
    [
        ("from Noida to Cyber Hub", SearchIntent(origin="Noida", destination="Cyber Hub")),
        ("FROM Saket TO Connaught Place", SearchIntent(origin="Saket", destination="Connaught Place")),
        ("  Mumbai to Pune  ", SearchIntent(origin="Mumbai", destination="Pune")),
        ("Toronto to Ottawa", SearchIntent(origin="Toronto", destination="Ottawa")),
        ("Delhi to Gurgaon suv", SearchIntent(origin="Delhi", destination="Gurgaon", vehicle_type="Suv")),
        ("Road to Mandalay to Yangon", SearchIntent(origin="Road", destination="Mandalay to Yangon")),
    ],
)
def test_route_variants(query, expected):
    assert parse_query(query) == expected


def test_dangling_separator_keeps_vehicle_only():
    """A query ending in ' to' yields no route, the vehicle survives."""
    assert parse_query("bike to ") == SearchIntent(vehicle_type="Bike")


def test_dangling_separator_without_vehicle():
    assert parse_query("Delhi to ") is None


def test_parse_is_deterministic():
    assert parse_query("Sedan to Airport") == parse_query("Sedan to Airport")


class TestVehicleLexicon:
    """Vehicle keyword detection."""

    @pytest.mark.parametrize(
        "query,expected",
        [
            ("bike", "Bike"),
            ("SUV to airport", "Suv"),
            ("need a hatchback", "Hatchback"),
            ("Delhi to Gurgaon", None),
            ("", None),
        ],
    )
    def test_detect_vehicle(self, query, expected):
        assert detect_vehicle(query) == expected

    def test_list_order_wins_over_text_position(self):
        # 'suv' precedes 'luxury' in the lexicon even though it comes later in the text
        assert detect_vehicle("luxury suv") == "Suv"
        assert detect_vehicle("scooty or sedan") == "Sedan"

    def test_ev_scooty_matches_scooty_first(self):
        assert find_vehicle_token("ev scooty") == "scooty"


class TestRouteExtraction:
    """Splitting a query into origin and destination."""

    def test_no_separator(self):
        route = extract_route("Delhi Gurgaon")
        assert route.is_empty

    def test_separator_needs_spaces(self):
        assert not has_route_separator("Toronto")
        assert not has_route_separator("laptop")
        assert has_route_separator("a TO b")

    def test_empty_second_half(self):
        assert extract_route("Delhi to ").is_empty

    def test_vehicle_removed_from_both_halves(self):
        route = extract_route("Bike to Office bike", "bike")
        assert route.origin == ""
        assert route.destination == "Office"

    def test_from_prefix_stripped(self):
        route = extract_route("From Bandra to Lonavala")
        assert route.origin == "Bandra"
        assert route.destination == "Lonavala"

    def test_split_route_keeps_casing(self):
        assert split_route("Noida TO Cyber Hub") == ("Noida", "Cyber Hub")
        assert split_route("no separator") is None


@pytest.mark.parametrize(
    "haystack,needle,expected",
    [
        ("New Delhi", "delhi", True),
        ("New Delhi", "  DELHI ", True),
        ("Mumbai", "pune", False),
        ("Mumbai", "", True),
        ("Mumbai", None, True),
        (None, "x", False),
    ],
)
def test_contains(haystack, needle, expected):
    assert contains(haystack, needle) is expected
