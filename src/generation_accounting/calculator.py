"""Compute generator revenue totals, daily emission maxima and coal heat rates.

One input document is processed at a time. The reference table is rebuilt for
every document, and the emission ledger, totals and heat rates live only for
the duration of that document's run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

import pandas as pd
from lxml import etree

from .documents import GeneratorKind, iter_generator_elements, load_input_document, read_generator
from .errors import GenerationAccountingError
from .processors import EmissionRecord, HeatRateEntry, compute_generator_outcome
from .reference_data import ReferenceTable, load_reference_file
from .settings import AccountingConfig, load_config
from .writers import output_path_for, write_result_document

LOGGER = logging.getLogger("generation_accounting")
if not LOGGER.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    LOGGER.addHandler(handler)
LOGGER.setLevel(logging.INFO)
LOGGER.propagate = False

LEDGER_COLUMNS = ["generator_name", "date", "emission"]


@dataclass(frozen=True)
class TotalEntry:
    generator_name: str
    total: float


@dataclass(frozen=True)
class MaxEmissionEntry:
    date: pd.Timestamp
    generator_name: str
    emission: float


@dataclass
class AccountingResult:
    """Output document for one input document."""

    totals: list[TotalEntry]
    max_emissions: list[MaxEmissionEntry]
    heat_rates: list[HeatRateEntry]
    emission_records: list[EmissionRecord] = field(default_factory=list)

    def emission_ledger(self) -> pd.DataFrame:
        return emission_ledger(self.emission_records)


@dataclass
class BatchReport:
    written: dict[str, Path] = field(default_factory=dict)
    results: dict[str, AccountingResult] = field(default_factory=dict)
    failed: dict[str, Exception] = field(default_factory=dict)


def emission_ledger(records: Iterable[EmissionRecord]) -> pd.DataFrame:
    rows = [(r.generator_name, r.date, r.emission) for r in records]
    return pd.DataFrame(rows, columns=LEDGER_COLUMNS)


def max_emission_per_day(records: Iterable[EmissionRecord]) -> list[MaxEmissionEntry]:
    """Pick the highest-emitting record for each date, ascending by date.

    Dates are grouped by exact timestamp. When several records share the
    maximum, the one encountered first wins. NaN emissions rank below every
    number and are only selected when a date has nothing else.
    """
    ledger = emission_ledger(records)
    if ledger.empty:
        return []
    ranked = ledger.sort_values("emission", ascending=False, kind="stable", na_position="last")
    selected = ranked.groupby("date", sort=True).head(1).sort_values("date", kind="stable")
    return [
        MaxEmissionEntry(
            date=row.date,
            generator_name=row.generator_name,
            emission=float(row.emission),
        )
        for row in selected.itertuples(index=False)
    ]


def run_accounting(document: etree._Element, reference_table: ReferenceTable) -> AccountingResult:
    """Process every generator of a parsed input document."""
    totals: list[TotalEntry] = []
    heat_rates: list[HeatRateEntry] = []
    records: list[EmissionRecord] = []

    for element in iter_generator_elements(document):
        kind = GeneratorKind.from_tag(element.tag)
        if kind is None:
            LOGGER.debug("Skipping unrecognized generator element '%s'", element.tag)
            continue
        generator = read_generator(element, kind)
        outcome = compute_generator_outcome(generator, reference_table)
        totals.append(TotalEntry(generator.name, outcome.total))
        if outcome.heat_rate is not None:
            heat_rates.append(outcome.heat_rate)
        records.extend(outcome.emission_records)

    return AccountingResult(
        totals=totals,
        max_emissions=max_emission_per_day(records),
        heat_rates=heat_rates,
        emission_records=records,
    )


def process_document(input_path: Path | str, reference_path: Path | str) -> AccountingResult:
    """Load fresh reference data and account for a single input file."""
    reference_table = load_reference_file(reference_path)
    document = load_input_document(input_path)
    return run_accounting(document, reference_table)


def run_from_config(config: AccountingConfig | Path | str | None = None) -> BatchReport:
    """Process every input file named by ``config`` and write one result per file.

    A document that fails is logged and reported in ``BatchReport.failed``;
    nothing is written for it and the remaining files are still processed.
    """
    if not isinstance(config, AccountingConfig):
        config = load_config(config)

    LOGGER.info("Input folder: %s", config.input_folder)
    LOGGER.info("Output folder: %s", config.output_folder)
    LOGGER.info("Reference data path: %s", config.reference_data_path)
    LOGGER.info("Starting the processing...")

    report = BatchReport()
    if not config.input_folder.is_dir():
        LOGGER.warning("Input folder does not exist: %s", config.input_folder)
        return report

    files = sorted(p for p in config.input_folder.glob(config.file_pattern) if p.is_file())
    if not files:
        LOGGER.info("No files matching '%s' found in the input folder.", config.file_pattern)

    for path in files:
        LOGGER.info("Processing file: %s", path.name)
        destination = output_path_for(path, config.output_folder, config.output_suffix)
        try:
            result = process_document(path, config.reference_data_path)
            write_result_document(result, destination)
        except (GenerationAccountingError, etree.XMLSyntaxError, OSError) as exc:
            LOGGER.error("Failed to process %s: %s", path.name, exc)
            report.failed[path.name] = exc
            continue
        except Exception as exc:
            LOGGER.exception("Unexpected error while processing %s", path.name)
            report.failed[path.name] = exc
            continue
        report.written[path.name] = destination
        report.results[path.name] = result
        LOGGER.info("Processed %s and saved results to %s", path.name, destination)

    LOGGER.info("Processing completed.")
    return report
