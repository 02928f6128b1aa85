from collections import defaultdict
from datetime import timezone
from typing import Dict, List

from cleancharge.energy_source import clean_mix
from cleancharge.models import DailySummary, GenerationSample

DAY_FORMAT = "%Y-%m-%d"


def group_by_date(samples: List[GenerationSample]) -> Dict[str, List[GenerationSample]]:
    """Bucket samples by the UTC calendar day of their start instant, keeping order."""
    grouped: Dict[str, List[GenerationSample]] = defaultdict(list)
    for sample in samples:
        grouped[sample.start.astimezone(timezone.utc).strftime(DAY_FORMAT)].append(sample)
    return dict(grouped)


def average_clean_mix(samples: List[GenerationSample]) -> Dict[str, float]:
    """
    Average share of each clean fuel over a day's samples.
    The divisor is the number of samples in the day, so a fuel missing from
    a sample counts as 0 for that sample.
    """
    count = len(samples)
    totals: Dict[str, float] = {}
    for sample in samples:
        for entry in clean_mix(sample.mix):
            totals[entry.fuel] = totals.get(entry.fuel, 0.0) + entry.perc
    return {fuel: total / count for fuel, total in totals.items()}


def calculate_daily_averages(samples: List[GenerationSample]) -> List[DailySummary]:
    """One DailySummary per distinct date, oldest first."""
    summaries = []
    for day, day_samples in group_by_date(samples).items():
        avg_mix = average_clean_mix(day_samples)
        summaries.append(DailySummary(
            date=day,
            average_mix_by_source=avg_mix,
            clean_energy_percentage=sum(avg_mix.values()),
        ))
    summaries.sort(key=lambda s: s.date)
    return summaries
