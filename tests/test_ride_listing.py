"""Tests for posting and looking up rides."""

from datetime import datetime

import pytest

from rideshare.adapters.repository import InMemoryRideRepository
from rideshare.domain.errors import RideNotFoundError, RideValidationError
from rideshare.domain.models import RideDraft, User
from rideshare.services import RideListingService
from rideshare.services.ride_listing import normalize_ride_date

NOW = datetime(2026, 10, 19, 12, 0)


@pytest.fixture
def repository():
    return InMemoryRideRepository()


@pytest.fixture
def service(repository):
    return RideListingService(repository=repository, clock=lambda: NOW)


@pytest.fixture
def host():
    return User(id="u-1", name="Aarav Mehta", avatar="fern.png", rating=4.8)


def test_post_ride_builds_listing(service, repository, host):
    draft = RideDraft(
        origin=" Saket ",
        destination="Connaught Place",
        price=180,
        vehicle_type="Hatchback",
        seats=2,
        date="2026-11-02",
        time="18:45",
    )

    ride = service.post_ride(host, draft)

    assert ride.host_id == "u-1"
    assert ride.name == "Aarav Mehta"
    assert ride.avatar == "fern.png"
    assert ride.car == "Hatchback (Verify)"
    assert ride.origin == "Saket"
    assert ride.price == 180.0
    assert ride.seats_left == 2
    assert ride.date == "2026-11-02"
    assert ride.time == "18:45"
    assert ride.rating == 4.8
    assert repository.list()[0] is ride


def test_defaults_for_optional_fields(service, host):
    ride = service.post_ride(
        host, RideDraft(origin="A", destination="B", price=50, vehicle_type="Bike")
    )

    assert ride.seats_left == 1
    assert ride.date == "2026-10-19"
    assert ride.time == "Now"
    assert ride.eta == "Now"


def test_newest_ride_first(service, repository, host):
    first = service.post_ride(host, RideDraft(origin="A", destination="B", price=1, vehicle_type="SUV"))
    second = service.post_ride(host, RideDraft(origin="C", destination="D", price=1, vehicle_type="SUV"))

    assert [r.id for r in repository.list()] == [second.id, first.id]
    assert first.id != second.id


def test_missing_fields_are_reported(service, repository, host):
    with pytest.raises(RideValidationError) as excinfo:
        service.post_ride(host, RideDraft(origin="A", destination=" "))

    assert excinfo.value.missing_fields == ("destination", "price", "vehicle_type")
    assert repository.list() == ()


def test_zero_price_is_allowed(service, host):
    ride = service.post_ride(host, RideDraft(origin="A", destination="B", price=0, vehicle_type="Bike"))
    assert ride.price == 0.0


def test_get_ride(service, host):
    ride = service.post_ride(host, RideDraft(origin="A", destination="B", price=1, vehicle_type="Bike"))

    assert service.get_ride(ride.id) is ride
    with pytest.raises(RideNotFoundError) as excinfo:
        service.get_ride("missing")
    assert excinfo.value.ride_id == "missing"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("2026-11-02", "2026-11-02"),
        ("tomorrow", "2026-10-20"),
        ("", "2026-10-19"),
        ("   ", "2026-10-19"),
        ("???", "2026-10-19"),
    ],
)
def test_normalize_ride_date(raw, expected):
    assert normalize_ride_date(raw, NOW) == expected
