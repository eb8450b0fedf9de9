"""Revenue, emission and heat-rate computation per generator kind."""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from .documents import GeneratorKind, GeneratorRecord
from .reference_data import ReferenceFactors, ReferenceTable, lookup_factors


@dataclass(frozen=True)
class EmissionRecord:
    generator_name: str
    date: pd.Timestamp
    emission: float


@dataclass(frozen=True)
class HeatRateEntry:
    generator_name: str
    heat_rate: float


@dataclass
class GeneratorOutcome:
    total: float
    emission_records: list[EmissionRecord] = field(default_factory=list)
    heat_rate: HeatRateEntry | None = None


def _revenue(record: GeneratorRecord, factors: ReferenceFactors) -> float:
    total = 0.0
    for reading in record.readings:
        total += reading.energy * reading.price * factors.value_factor
    return total


def _daily_emissions(record: GeneratorRecord, factors: ReferenceFactors) -> list[EmissionRecord]:
    rating = record.emissions_rating or 0.0
    return [
        EmissionRecord(
            generator_name=record.name,
            date=reading.date,
            emission=reading.energy * rating * factors.emission_factor,
        )
        for reading in record.readings
    ]


def actual_heat_rate(total_heat_input: float, actual_net_generation: float) -> float:
    """Heat input per unit of net generation; zero when nothing was generated."""
    if actual_net_generation != 0:
        return total_heat_input / actual_net_generation
    return 0.0


def process_wind(record: GeneratorRecord, factors: ReferenceFactors) -> GeneratorOutcome:
    return GeneratorOutcome(total=_revenue(record, factors))


def process_gas(record: GeneratorRecord, factors: ReferenceFactors) -> GeneratorOutcome:
    return GeneratorOutcome(
        total=_revenue(record, factors),
        emission_records=_daily_emissions(record, factors),
    )


def process_coal(record: GeneratorRecord, factors: ReferenceFactors) -> GeneratorOutcome:
    heat_rate = HeatRateEntry(
        generator_name=record.name,
        heat_rate=actual_heat_rate(
            record.total_heat_input or 0.0, record.actual_net_generation or 0.0
        ),
    )
    return GeneratorOutcome(
        total=_revenue(record, factors),
        emission_records=_daily_emissions(record, factors),
        heat_rate=heat_rate,
    )


def compute_generator_outcome(
    record: GeneratorRecord, reference_table: ReferenceTable
) -> GeneratorOutcome:
    """Compute the total and the records one generator contributes.

    Raises ``ReferenceDataMissingError`` when the generator's name has no
    entry in ``reference_table``.
    """
    factors = lookup_factors(reference_table, record.name)
    if record.kind is GeneratorKind.WIND:
        return process_wind(record, factors)
    if record.kind is GeneratorKind.GAS:
        return process_gas(record, factors)
    if record.kind is GeneratorKind.COAL:
        return process_coal(record, factors)
    raise ValueError(f"Unsupported generator kind: {record.kind!r}")
