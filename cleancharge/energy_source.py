from enum import Enum
from typing import Iterable, List


class EnergySource(Enum):
    """Fuel sources counted as clean generation."""
    BIOMASS = "biomass"
    NUCLEAR = "nuclear"
    HYDRO   = "hydro"
    WIND    = "wind"
    SOLAR   = "solar"

    @property
    def fuel_name(self) -> str:
        return self.value


CLEAN_FUELS = frozenset(source.fuel_name for source in EnergySource)


def clean_mix(mix: Iterable) -> List:
    """
    Keep only the FuelMix entries whose fuel is one of the clean sources.
    Matching is exact and case-sensitive ("Wind" is not "wind").
    """
    return [entry for entry in mix if entry.fuel in CLEAN_FUELS]


def clean_energy_percentage(sample) -> float:
    """Sum of the clean-fuel percentages within a single sample."""
    return sum(entry.perc for entry in clean_mix(sample.mix))
