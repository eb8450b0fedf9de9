"""Read generator input documents into typed records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator

import pandas as pd
from lxml import etree

from .constants import COAL_TAG, GAS_TAG, GENERATOR_GROUPS, WIND_TAG
from .errors import GenerationAccountingError, StructuralMissingError
from .parsing import child_text, parse_number


class GeneratorKind(Enum):
    WIND = WIND_TAG
    GAS = GAS_TAG
    COAL = COAL_TAG

    @classmethod
    def from_tag(cls, tag: object) -> GeneratorKind | None:
        """Return the kind for an element tag, or ``None`` when unrecognized."""
        try:
            return cls(tag)
        except ValueError:
            return None

    @property
    def emits(self) -> bool:
        return self in (GeneratorKind.GAS, GeneratorKind.COAL)


@dataclass(frozen=True)
class DailyReading:
    energy: float
    price: float
    date: pd.Timestamp | None = None


@dataclass
class GeneratorRecord:
    name: str
    kind: GeneratorKind
    readings: list[DailyReading] = field(default_factory=list)
    emissions_rating: float | None = None
    total_heat_input: float | None = None
    actual_net_generation: float | None = None


# pandas resolves these against the clock instead of the text.
RELATIVE_DATE_WORDS = frozenset({"now", "today"})


def parse_reading_date(text: str) -> pd.Timestamp:
    """Parse a reading date; timezone-aware values are normalised to naive UTC."""
    if text.strip().lower() in RELATIVE_DATE_WORDS:
        raise GenerationAccountingError(f"Invalid reading date '{text}'.")
    try:
        stamp = pd.Timestamp(text.strip())
    except (TypeError, ValueError) as exc:
        raise GenerationAccountingError(f"Invalid reading date '{text}'.") from exc
    if pd.isna(stamp):
        raise GenerationAccountingError(f"Invalid reading date '{text}'.")
    if stamp.tzinfo is not None:
        stamp = stamp.tz_convert("UTC").tz_localize(None)
    return stamp


def _read_days(element: etree._Element, name: str, with_dates: bool) -> list[DailyReading]:
    generation = element.find("Generation")
    if generation is None:
        raise StructuralMissingError("Generation", name)
    readings = []
    for day in generation.iterchildren("Day"):
        energy = parse_number(child_text(day, "Energy", name))
        price = parse_number(child_text(day, "Price", name))
        date = parse_reading_date(child_text(day, "Date", name)) if with_dates else None
        readings.append(DailyReading(energy=energy, price=price, date=date))
    return readings


def read_generator(element: etree._Element, kind: GeneratorKind) -> GeneratorRecord:
    """Read the attributes ``kind`` needs from a generator element."""
    name = child_text(element, "Name", element.tag)
    record = GeneratorRecord(name=name, kind=kind)
    if kind is GeneratorKind.COAL:
        record.total_heat_input = parse_number(child_text(element, "TotalHeatInput", name))
        record.actual_net_generation = parse_number(
            child_text(element, "ActualNetGeneration", name)
        )
    if kind.emits:
        record.emissions_rating = parse_number(child_text(element, "EmissionsRating", name))
    record.readings = _read_days(element, name, with_dates=kind.emits)
    return record


def iter_generator_elements(root: etree._Element) -> Iterator[etree._Element]:
    """Yield generator elements group by group, in document order within a group."""
    for group_name in GENERATOR_GROUPS:
        for group in root.iterdescendants(group_name):
            yield from group.iterchildren(tag=etree.Element)


def load_input_document(path: Path | str) -> etree._Element:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: {path}")
    return etree.parse(str(path)).getroot()
