from typing import List

from cleancharge.energy_source import clean_energy_percentage
from cleancharge.errors import InsufficientData, InvalidWindowLength
from cleancharge.models import ChargingWindow, GenerationSample

MIN_WINDOW_HOURS = 1
MAX_WINDOW_HOURS = 6
SAMPLES_PER_HOUR = 2  # half-hour buckets


def validate_window_hours(hours: int) -> None:
    if hours < MIN_WINDOW_HOURS or hours > MAX_WINDOW_HOURS:
        raise InvalidWindowLength(
            f"Charging window length must be between {MIN_WINDOW_HOURS} and {MAX_WINDOW_HOURS} hours"
        )


def find_optimal_window(samples: List[GenerationSample], hours: int) -> ChargingWindow:
    """
    Given chronologically ordered half-hour samples and a window length in hours,
    slide an exact-size window (hours * 2 samples) over the sequence to find
    the highest average clean-energy share.
    Ties go to the earliest window.
    """
    validate_window_hours(hours)
    window_size = hours * SAMPLES_PER_HOUR

    n = len(samples)
    if n < window_size:
        raise InsufficientData("Not enough data to calculate the optimal window")

    clean = [clean_energy_percentage(s) for s in samples]

    best_avg = float('-inf')
    best_start = 0

    # Slide over sample-index, not wall-clock time
    for i in range(n - window_size + 1):
        avg = sum(clean[i : i + window_size]) / window_size
        if avg > best_avg:
            best_avg = avg
            best_start = i

    return ChargingWindow(
        start=samples[best_start].start,
        end=samples[best_start + window_size - 1].end,
        average_clean_energy_percentage=best_avg,
    )
