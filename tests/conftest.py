"""Ensure the project package is importable during tests without installation."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from lxml import etree

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

root_path = str(ROOT)
if root_path not in sys.path:
    sys.path.insert(0, root_path)

src_path = str(SRC)
if src_path not in sys.path:
    sys.path.insert(0, src_path)


REFERENCE_XML = """<?xml version="1.0" encoding="utf-8"?>
<ReferenceData>
  <Factors>
    <ValueFactor>
      <High>1.0</High>
      <Medium>0.75</Medium>
      <Low>0.5</Low>
    </ValueFactor>
    <EmissionsFactor>
      <High>1.2</High>
      <Medium>0.9</Medium>
      <Low>0.3</Low>
    </EmissionsFactor>
  </Factors>
</ReferenceData>
"""


def day_xml(date: str, energy: str, price: str) -> str:
    return (
        f"<Day><Date>{date}</Date><Energy>{energy}</Energy><Price>{price}</Price></Day>"
    )


def generator_xml(tag: str, name: str, days: list[str], **attributes: str) -> str:
    extra = "".join(f"<{key}>{value}</{key}>" for key, value in attributes.items())
    return f"<{tag}><Name>{name}</Name><Generation>{''.join(days)}</Generation>{extra}</{tag}>"


def input_xml(wind: list[str] = (), gas: list[str] = (), coal: list[str] = ()) -> str:
    return (
        "<GenerationReport>"
        f"<Wind>{''.join(wind)}</Wind>"
        f"<Gas>{''.join(gas)}</Gas>"
        f"<Coal>{''.join(coal)}</Coal>"
        "</GenerationReport>"
    )


@pytest.fixture
def reference_path(tmp_path: Path) -> Path:
    path = tmp_path / "ReferenceData.xml"
    path.write_text(REFERENCE_XML, encoding="utf-8")
    return path


@pytest.fixture
def reference_root():
    return etree.fromstring(REFERENCE_XML.encode("utf-8"))
