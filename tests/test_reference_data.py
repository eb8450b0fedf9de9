from pathlib import Path

import pytest
from lxml import etree

from generation_accounting.errors import (
    GenerationAccountingError,
    ReferenceDataInvalidError,
    ReferenceDataMissingError,
    StructuralMissingError,
)
from generation_accounting.reference_data import (
    ReferenceFactors,
    load_reference_data,
    load_reference_file,
    lookup_factors,
)


def test_load_reference_data_maps_tiers_to_identities(reference_root):
    table = load_reference_data(reference_root)

    assert table == {
        "Wind[Offshore]": ReferenceFactors(0.5, 0.0),
        "Wind[Onshore]": ReferenceFactors(1.0, 0.0),
        "Gas[1]": ReferenceFactors(0.75, 0.9),
        "Coal[1]": ReferenceFactors(0.75, 1.2),
    }


def test_missing_tier_counts_as_zero():
    root = etree.fromstring(
        "<Ref><ValueFactor><Medium>0.6</Medium></ValueFactor>"
        "<EmissionsFactor><Medium> 0.25 </Medium></EmissionsFactor></Ref>"
    )
    table = load_reference_data(root)

    assert table["Wind[Offshore]"].value_factor == 0.0
    assert table["Wind[Onshore]"].value_factor == 0.0
    assert table["Gas[1]"] == ReferenceFactors(0.6, 0.25)
    assert table["Coal[1]"].emission_factor == 0.0


@pytest.mark.parametrize("text", ["oops", "0,7x", "", "nan"])
def test_malformed_tier_raises_instead_of_zeroing(text):
    root = etree.fromstring(
        f"<Ref><ValueFactor><Medium>{text}</Medium><Low>1</Low></ValueFactor>"
        "<EmissionsFactor><Medium>1</Medium></EmissionsFactor></Ref>"
    )
    with pytest.raises(ReferenceDataInvalidError) as excinfo:
        load_reference_data(root)
    assert excinfo.value.container == "ValueFactor"
    assert excinfo.value.tier == "Medium"
    assert isinstance(excinfo.value, GenerationAccountingError)


def test_missing_factor_container_is_structural_error():
    root = etree.fromstring("<Ref><ValueFactor><Low>1</Low></ValueFactor></Ref>")
    with pytest.raises(StructuralMissingError):
        load_reference_data(root)


def test_load_reference_file_reads_from_disk(reference_path: Path):
    table = load_reference_file(reference_path)
    assert table["Coal[1]"] == ReferenceFactors(0.75, 1.2)


def test_load_reference_file_requires_existing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_reference_file(tmp_path / "missing.xml")


def test_lookup_factors_raises_for_unknown_identity(reference_root):
    table = load_reference_data(reference_root)

    with pytest.raises(ReferenceDataMissingError) as excinfo:
        lookup_factors(table, "Gas[2]")
    assert excinfo.value.identity == "Gas[2]"
    assert "Gas[1]" in excinfo.value.available
    assert isinstance(excinfo.value, LookupError)
