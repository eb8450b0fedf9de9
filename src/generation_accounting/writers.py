from __future__ import annotations

import math
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd
from lxml import etree

from .constants import DEFAULT_OUTPUT_SUFFIX

if TYPE_CHECKING:  # pragma: no cover
    from .calculator import AccountingResult


def format_number(value: float) -> str:
    """Shortest round-trip text for ``value``; integral values drop the ``.0``.

    Non-finite values use the XML Schema spellings ``INF``, ``-INF`` and ``NaN``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_date(value: pd.Timestamp) -> str:
    return pd.Timestamp(value).isoformat()


def _add_fields(parent: etree._Element, tag: str, fields: list[tuple[str, str]]) -> None:
    entry = etree.SubElement(parent, tag)
    for name, text in fields:
        etree.SubElement(entry, name).text = text


def build_output_tree(result: AccountingResult) -> etree._Element:
    root = etree.Element("GenerationOutput")

    totals = etree.SubElement(root, "Totals")
    for item in result.totals:
        _add_fields(
            totals,
            "Generator",
            [("Name", item.generator_name), ("Total", format_number(item.total))],
        )

    maxima = etree.SubElement(root, "MaxEmissionGenerators")
    for item in result.max_emissions:
        _add_fields(
            maxima,
            "Day",
            [
                ("Name", item.generator_name),
                ("Date", format_date(item.date)),
                ("Emission", format_number(item.emission)),
            ],
        )

    heat_rates = etree.SubElement(root, "ActualHeatRates")
    for item in result.heat_rates:
        _add_fields(
            heat_rates,
            "ActualHeatRate",
            [("Name", item.generator_name), ("HeatRate", format_number(item.heat_rate))],
        )
    return root


def output_path_for(
    input_path: Path | str,
    output_dir: Path | str,
    suffix: str = DEFAULT_OUTPUT_SUFFIX,
) -> Path:
    """``<output_dir>/<stem><suffix><ext>`` for an input file."""
    input_path = Path(input_path)
    return Path(output_dir) / f"{input_path.stem}{suffix}{input_path.suffix}"


def write_result_document(result: AccountingResult, destination: Path | str) -> Path:
    """Write ``result`` to ``destination``, replacing it only once fully written."""
    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)
    tree = etree.ElementTree(build_output_tree(result))
    fd, tmp_name = tempfile.mkstemp(
        dir=destination.parent, prefix=f".{destination.name}.", suffix=".tmp"
    )
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            tree.write(handle, pretty_print=True, xml_declaration=True, encoding="utf-8")
        tmp_path.replace(destination)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    return destination
