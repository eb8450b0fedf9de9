"""Run generation accounting over every input document in the configured folder.

Settings come from the ``generation_accounting`` section of ``config.yaml``
(or the file named by ``--config`` / ``$GENERATION_ACCOUNTING_CONFIG``). One
result document is written per input document; documents that fail are
reported and skipped without stopping the batch.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

import pandas as pd

ROOT = Path(__file__).resolve().parents[1]

sys.path.insert(0, str(ROOT / "src"))

from generation_accounting import (  # noqa: E402
    AccountingConfig,
    BatchReport,
    load_config,
    run_from_config,
)

LOGGER = logging.getLogger("generation_accounting.run")


def _apply_overrides(config: AccountingConfig, args: argparse.Namespace) -> AccountingConfig:
    overrides = {}
    if args.input_folder:
        overrides["input_folder"] = Path(args.input_folder).resolve()
    if args.output_folder:
        overrides["output_folder"] = Path(args.output_folder).resolve()
    if args.reference_data:
        overrides["reference_data_path"] = Path(args.reference_data).resolve()
    return replace(config, **overrides) if overrides else config


def _log_summary(report: BatchReport) -> None:
    for name, result in report.results.items():
        totals = pd.DataFrame(
            [(t.generator_name, t.total) for t in result.totals], columns=["generator", "total"]
        )
        LOGGER.info("Totals for %s:\n%s", name, totals.to_string(index=False))
        ledger = result.emission_ledger()
        if not ledger.empty:
            daily = ledger.groupby("date")["emission"].sum().to_frame(name="emission")
            LOGGER.info("Daily emissions for %s:\n%s", name, daily.to_string())


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(name)s: %(message)s")

    parser = argparse.ArgumentParser(
        description="Compute generator totals, daily emission maxima and coal heat rates"
    )
    parser.add_argument("--config", help="Explicit path to a config file")
    parser.add_argument("--input-folder", help="Override generation_accounting.input_folder")
    parser.add_argument("--output-folder", help="Override generation_accounting.output_folder")
    parser.add_argument(
        "--reference-data", help="Override generation_accounting.reference_data_path"
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Log per-generator totals and daily emission sums for each processed file.",
    )
    args = parser.parse_args(argv)

    config = _apply_overrides(load_config(args.config), args)
    report = run_from_config(config)

    if args.summary:
        _log_summary(report)

    if report.failed:
        LOGGER.error(
            "%d document(s) failed: %s", len(report.failed), ", ".join(sorted(report.failed))
        )
        return 1
    LOGGER.info("%d document(s) written under %s", len(report.written), config.output_folder)
    return 0


if __name__ == "__main__":
    sys.exit(main())
