"""Tolerant readers for numeric and element text values."""

from __future__ import annotations

import math

from lxml import etree

from .errors import StructuralMissingError


def parse_number(text: str | None) -> float:
    """Return ``text`` as a float, or ``0.0`` when it cannot be parsed.

    Malformed values never abort a run; they contribute zero to the totals.
    """
    if text is None:
        return 0.0
    try:
        value = float(str(text).strip())
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def element_text(element: etree._Element) -> str:
    """Concatenated text of ``element`` and its descendants."""
    return "".join(element.itertext())


def child_text(parent: etree._Element, tag: str, context: str | None = None) -> str:
    child = parent.find(tag)
    if child is None:
        raise StructuralMissingError(tag, context or parent.tag)
    return element_text(child)

