"""Explicit run settings loaded from the ``generation_accounting`` config section."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import yaml

from config_paths import config_root, get_config_path, resolve_config_value

from .constants import DEFAULT_FILE_PATTERN, DEFAULT_OUTPUT_SUFFIX

SECTION = "generation_accounting"
REQUIRED_KEYS = ("input_folder", "output_folder", "reference_data_path")


@dataclass(frozen=True)
class AccountingConfig:
    input_folder: Path
    output_folder: Path
    reference_data_path: Path
    file_pattern: str = DEFAULT_FILE_PATTERN
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX

    @classmethod
    def from_mapping(cls, values: Mapping[str, object], root: Path) -> AccountingConfig:
        """Build settings from a config section, resolving paths against ``root``."""
        missing = [key for key in REQUIRED_KEYS if not values.get(key)]
        if missing:
            raise ValueError(f"'{SECTION}' section is missing required keys: {missing}")

        return cls(
            input_folder=resolve_config_value(values["input_folder"], root),
            output_folder=resolve_config_value(values["output_folder"], root),
            reference_data_path=resolve_config_value(values["reference_data_path"], root),
            file_pattern=str(values.get("file_pattern") or DEFAULT_FILE_PATTERN),
            output_suffix=str(values.get("output_suffix", DEFAULT_OUTPUT_SUFFIX)),
        )


def load_config(config_path: Path | str | None = None) -> AccountingConfig:
    """Read ``config.yaml`` (or ``$GENERATION_ACCOUNTING_CONFIG``) into settings."""
    config_path = Path(config_path) if config_path is not None else get_config_path()
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    with config_path.open() as handle:
        config = yaml.safe_load(handle) or {}

    module_cfg = config.get(SECTION)
    if not isinstance(module_cfg, Mapping) or not module_cfg:
        raise ValueError(f"'{SECTION}' section missing from {config_path.name}")
    return AccountingConfig.from_mapping(module_cfg, config_root(config_path))
