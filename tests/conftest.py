from datetime import datetime, timedelta, timezone

import pytest
import requests

from cleancharge.models import FuelMix, GenerationSample
from cleancharge.time_source import FixedTimeSource

NOW = datetime(2025, 1, 1, 0, 0, tzinfo=timezone.utc)


def sample(start: str, **percs) -> GenerationSample:
    """Half-hour sample starting at an ISO timestamp, e.g. sample('2025-01-01T00:00', wind=10)."""
    begin = datetime.fromisoformat(start).replace(tzinfo=timezone.utc)
    mix = tuple(FuelMix(fuel=fuel, perc=float(perc)) for fuel, perc in percs.items())
    return GenerationSample(start=begin, end=begin + timedelta(minutes=30), mix=mix)


class FakeProvider:
    """Records fetch calls and returns canned samples or raises."""

    def __init__(self, samples=None, error: Exception | None = None):
        self.samples = samples
        self.error = error
        self.calls = []

    def fetch(self, start_utc, end_utc):
        self.calls.append((start_utc, end_utc))
        if self.error is not None:
            raise self.error
        return self.samples


@pytest.fixture
def time_source():
    return FixedTimeSource(NOW)


@pytest.fixture
def window_samples():
    """Six half-hour slots; slots 2 and 3 are the cleanest pair."""
    return [
        sample("2025-01-01T00:00", biomass=0, nuclear=5, hydro=0, wind=10, solar=0, gas=70, coal=15),
        sample("2025-01-01T00:30", biomass=0, nuclear=10, hydro=0, wind=20, solar=0, gas=70),
        sample("2025-01-01T01:00", biomass=0, nuclear=20, hydro=10, wind=50, solar=0, gas=20),
        sample("2025-01-01T01:30", biomass=0, nuclear=30, hydro=10, wind=50, solar=0, gas=10),
        sample("2025-01-01T02:00", biomass=0, nuclear=5, hydro=0, wind=10, solar=0, gas=85),
        sample("2025-01-01T02:30", biomass=0, nuclear=2, hydro=0, wind=5, solar=0, gas=93),
    ]


@pytest.fixture
def three_day_samples():
    return [
        sample("2025-01-01T00:00", biomass=0, nuclear=5, hydro=0, wind=2, solar=0),
        sample("2025-01-02T00:00", biomass=0, nuclear=10, hydro=0, wind=50, solar=0),
        sample("2025-01-03T00:00", biomass=0, nuclear=2, hydro=0, wind=13, solar=0),
    ]


@pytest.fixture
def connection_error():
    return requests.ConnectionError("API down")
