from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Tuple


def format_utc(instant: datetime) -> str:
    """Render an instant as ISO-8601 UTC with a trailing 'Z'."""
    return instant.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class FuelMix:
    fuel: str
    perc: float


@dataclass(frozen=True)
class GenerationSample:
    """One half-hour bucket of the generation mix: [start, end)."""
    start: datetime
    end: datetime
    mix: Tuple[FuelMix, ...] = ()


@dataclass(frozen=True)
class DailySummary:
    date: str
    average_mix_by_source: Dict[str, float] = field(default_factory=dict)
    clean_energy_percentage: float = 0.0

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "averageMixBySource": dict(self.average_mix_by_source),
            "cleanEnergyPercentage": self.clean_energy_percentage,
        }


@dataclass(frozen=True)
class ChargingWindow:
    start: datetime
    end: datetime
    average_clean_energy_percentage: float

    def to_dict(self) -> dict:
        return {
            "start": format_utc(self.start),
            "end": format_utc(self.end),
            "averageCleanEnergyPercentage": self.average_clean_energy_percentage,
        }
