from __future__ import annotations

GENERATOR_GROUPS: tuple[str, ...] = ("Wind", "Gas", "Coal")

WIND_TAG = "WindGenerator"
GAS_TAG = "GasGenerator"
COAL_TAG = "CoalGenerator"

VALUE_FACTOR_TAG = "ValueFactor"
EMISSIONS_FACTOR_TAG = "EmissionsFactor"

# identity -> (value factor tier, emission factor tier); ``None`` means a fixed 0.
REFERENCE_TIERS: dict[str, tuple[str, str | None]] = {
    "Wind[Offshore]": ("Low", None),
    "Wind[Onshore]": ("High", None),
    "Gas[1]": ("Medium", "Medium"),
    "Coal[1]": ("Medium", "High"),
}

DEFAULT_FILE_PATTERN = "*.xml"
DEFAULT_OUTPUT_SUFFIX = "-Result"
