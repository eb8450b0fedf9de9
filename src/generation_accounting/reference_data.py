"""Reference pricing and emission factors keyed by generator identity."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from lxml import etree

from .constants import EMISSIONS_FACTOR_TAG, REFERENCE_TIERS, VALUE_FACTOR_TAG
from .errors import (
    ReferenceDataInvalidError,
    ReferenceDataMissingError,
    StructuralMissingError,
)
from .parsing import element_text

LOGGER = logging.getLogger("generation_accounting")


@dataclass(frozen=True)
class ReferenceFactors:
    """Multipliers applied to one generator identity."""

    value_factor: float
    emission_factor: float


ReferenceTable = Mapping[str, ReferenceFactors]


def _first_descendant(root: etree._Element, tag: str) -> etree._Element:
    if root.tag == tag:
        return root
    found = next(root.iterdescendants(tag), None)
    if found is None:
        raise StructuralMissingError(tag, "reference data")
    return found


def _tier_factor(container: etree._Element, tier: str) -> float:
    """Read one tier strictly; only an absent tier node counts as zero."""
    node = container.find(tier)
    if node is None:
        return 0.0
    text = element_text(node)
    try:
        value = float(text.strip())
    except ValueError:
        raise ReferenceDataInvalidError(container.tag, tier, text) from None
    if not math.isfinite(value):
        raise ReferenceDataInvalidError(container.tag, tier, text)
    return value


def load_reference_data(document: etree._Element | etree._ElementTree) -> dict[str, ReferenceFactors]:
    """Build the reference table from a parsed reference document.

    Each identity in ``REFERENCE_TIERS`` takes its value factor from the
    ``ValueFactor`` tier and its emission factor from the ``EmissionsFactor``
    tier. A missing tier node counts as ``"0"``; a tier holding anything
    other than a finite number raises ``ReferenceDataInvalidError``.
    """
    root = document.getroot() if isinstance(document, etree._ElementTree) else document
    value_factors = _first_descendant(root, VALUE_FACTOR_TAG)
    emission_factors = _first_descendant(root, EMISSIONS_FACTOR_TAG)

    table: dict[str, ReferenceFactors] = {}
    for identity, (value_tier, emission_tier) in REFERENCE_TIERS.items():
        value_factor = _tier_factor(value_factors, value_tier)
        if emission_tier is None:
            emission_factor = 0.0
        else:
            emission_factor = _tier_factor(emission_factors, emission_tier)
        table[identity] = ReferenceFactors(value_factor, emission_factor)
    return table


def load_reference_file(path: Path | str) -> dict[str, ReferenceFactors]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Reference data file not found: {path}")
    table = load_reference_data(etree.parse(str(path)))
    LOGGER.info("Loaded reference data from %s", path)
    return table


def lookup_factors(table: ReferenceTable, identity: str) -> ReferenceFactors:
    try:
        return table[identity]
    except KeyError:
        raise ReferenceDataMissingError(identity, list(table)) from None
