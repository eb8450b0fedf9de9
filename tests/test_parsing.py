import pytest
from lxml import etree

from generation_accounting.errors import StructuralMissingError
from generation_accounting.parsing import child_text, parse_number


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12.5", 12.5),
        (" 7 ", 7.0),
        ("-3.25", -3.25),
        ("1e3", 1000.0),
        ("abc", 0.0),
        ("", 0.0),
        (None, 0.0),
        ("nan", 0.0),
        ("inf", 0.0),
    ],
)
def test_parse_number_coerces_malformed_values_to_zero(text, expected):
    assert parse_number(text) == pytest.approx(expected)


def test_child_text_joins_nested_text():
    element = etree.fromstring("<Day><Energy>1<b>2</b>.5</Energy></Day>")
    assert child_text(element, "Energy") == "12.5"


def test_child_text_raises_for_missing_element():
    element = etree.fromstring("<Day><Energy>1</Energy></Day>")
    with pytest.raises(StructuralMissingError) as excinfo:
        child_text(element, "Price", "Gas[1]")
    assert excinfo.value.element == "Price"
    assert "Gas[1]" in str(excinfo.value)

