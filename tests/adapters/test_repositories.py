"""Tests for the ride repository adapters."""

import threading
import time
from dataclasses import replace

import pytest

from rideshare.adapters.repository import CSVRideRepository, InMemoryRideRepository
from rideshare.config import RepositoryConfig
from rideshare.domain.errors import RepositoryError

HEADER = "id,host_id,name,car,vehicle_type,price,seats_left,avatar,eta,badge,from,to,date,time,rating"


@pytest.fixture
def csv_config(tmp_path):
    rows = [
        HEADER,
        "r1,u1,Aarav,Honda City,Sedan,250,3,,10 min,Top Host,New Delhi,Gurgaon,2026-10-20,08:30,4.8",
        "r2,u2,Priya,XUV700,SUV,not-a-price,,,,,Mumbai,,2026-10-20,07:00,4.6",
        ",u3,Nobody,Car,Sedan,10,1,,,,A,B,,,",
        "r4,u4,Kabir,Enfield,Bike,abc,x,,5 min,,Noida,Cyber Hub,2026-10-21,09:15,",
    ]
    (tmp_path / "rides.csv").write_text("\n".join(rows) + "\n", encoding="utf-8")
    return RepositoryConfig(data_dir=tmp_path, rides_file="rides.csv")


class TestCSVRideRepository:
    def test_loads_valid_rows_and_skips_incomplete(self, csv_config):
        repo = CSVRideRepository(csv_config)

        rides = repo.list()

        assert [r.id for r in rides] == ["r1", "r4"]
        first = rides[0]
        assert first.origin == "New Delhi"
        assert first.destination == "Gurgaon"
        assert first.price == 250.0
        assert first.seats_left == 3
        assert first.badge == "Top Host"

    def test_bad_numbers_fall_back_to_defaults(self, csv_config):
        ride = CSVRideRepository(csv_config).get("r4")

        assert ride.price == 0.0
        assert ride.seats_left == 1
        assert ride.rating == 5.0
        assert ride.badge is None

    def test_missing_file_raises(self, tmp_path):
        repo = CSVRideRepository(RepositoryConfig(data_dir=tmp_path, rides_file="nope.csv"))

        with pytest.raises(RepositoryError) as excinfo:
            repo.list()

        assert excinfo.value.file_path.endswith("nope.csv")

    def test_add_prepends(self, csv_config):
        repo = CSVRideRepository(csv_config)
        new_ride = replace(repo.get("r1"), id="r9")

        repo.add(new_ride)

        assert [r.id for r in repo.list()] == ["r9", "r1", "r4"]

    def test_clear_cache_reloads_file(self, csv_config):
        repo = CSVRideRepository(csv_config)
        repo.add(replace(repo.get("r1"), id="r9"))

        repo.clear_cache()

        assert [r.id for r in repo.list()] == ["r1", "r4"]

    def test_concurrent_first_access_loads_once(self, csv_config):
        repo = CSVRideRepository(csv_config)
        posted = replace(CSVRideRepository(csv_config).get("r1"), id="r9")
        read_file = repo._read_file
        loads = []

        def slow_read():
            loads.append(1)
            time.sleep(0.05)
            return read_file()

        repo._read_file = slow_read
        start = threading.Barrier(9)

        def reader():
            start.wait()
            repo.list()

        def poster():
            start.wait()
            repo.add(posted)

        threads = [threading.Thread(target=reader) for _ in range(8)]
        threads.append(threading.Thread(target=poster))
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(loads) == 1
        assert [r.id for r in repo.list()] == ["r9", "r1", "r4"]

    def test_shipped_sample_data(self):
        rides = CSVRideRepository(RepositoryConfig()).list()

        assert len(rides) == 7
        assert {r.vehicle_type for r in rides} >= {"Sedan", "SUV", "Bike", "Luxury"}


class TestInMemoryRideRepository:
    def test_list_get_add(self, csv_config):
        seed = CSVRideRepository(csv_config).list()
        repo = InMemoryRideRepository(seed)

        assert repo.get("r4") is seed[1]
        assert repo.get("missing") is None

        new_ride = replace(seed[0], id="r9")
        assert repo.add(new_ride) is new_ride
        assert [r.id for r in repo.list()] == ["r9", "r1", "r4"]

    def test_listing_is_a_snapshot(self, csv_config):
        repo = InMemoryRideRepository(CSVRideRepository(csv_config).list())
        before = repo.list()

        repo.add(replace(before[0], id="r9"))

        assert len(before) == 2
