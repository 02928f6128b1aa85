from datetime import timedelta
from typing import List

import requests

from cleancharge.daily_average import calculate_daily_averages
from cleancharge.errors import GenerationError, NoDataFound, ProviderUnavailable
from cleancharge.models import ChargingWindow, DailySummary, GenerationSample
from cleancharge.result import Failure, Result, Success
from cleancharge.temporal_window import find_optimal_window, validate_window_hours
from cleancharge.time_source import TimeSource

THREE_DAY_FORECAST_DAYS = 3
CHARGING_LOOKAHEAD_DAYS = 2


class GenerationAggregator:
    """
    Derives daily clean-energy averages and the best charging window from the
    forecast generation mix.

    time_source : anything with now() -> aware UTC datetime
    provider    : anything with fetch(start_utc, end_utc) -> list of GenerationSample
    """

    def __init__(self, time_source: TimeSource, provider):
        self.time_source = time_source
        self.provider    = provider

    def fetch_generation_data(self, days: int) -> List[GenerationSample]:
        """
        Fetch samples for [now, now + days).
        Raises NoDataFound on an empty result and ProviderUnavailable when the
        provider call fails.
        """
        start_utc = self.time_source.now()
        end_utc   = start_utc + timedelta(days=days)

        try:
            samples = self.provider.fetch(start_utc, end_utc)
        except requests.RequestException as e:
            raise ProviderUnavailable("Failed to fetch data from CarbonIntensity API", e) from e

        if not samples:
            raise NoDataFound("No generation data found for the requested period.")
        return list(samples)

    def three_day_average(self) -> Result[List[DailySummary]]:
        """Average clean-energy share for each of the next three days."""
        try:
            samples = self.fetch_generation_data(THREE_DAY_FORECAST_DAYS)
            return Success(calculate_daily_averages(samples))
        except GenerationError as e:
            return Failure(e)

    def optimal_charging_window(self, hours: int) -> Result[ChargingWindow]:
        """
        Best contiguous window of `hours` full hours (1-6) within the next two
        days. The window length is checked before anything is fetched.
        """
        try:
            validate_window_hours(hours)
            samples = self.fetch_generation_data(CHARGING_LOOKAHEAD_DAYS)
            return Success(find_optimal_window(samples, hours))
        except GenerationError as e:
            return Failure(e)
