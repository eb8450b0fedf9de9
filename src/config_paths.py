"""Helpers to locate the configuration file and the root its relative paths use."""

from __future__ import annotations

import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]

CONFIG_ENV_VAR = "GENERATION_ACCOUNTING_CONFIG"
CONFIG_FILENAME = "config.yaml"


def get_config_path(default: Path | None = None) -> Path:
    """Return the configuration path, honouring GENERATION_ACCOUNTING_CONFIG when set.

    Without an override or explicit default, ``config.yaml`` in the working
    directory wins over the one at the repository root.
    """

    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser().resolve()
    if default is not None:
        return default.resolve()
    local = Path.cwd() / CONFIG_FILENAME
    if local.exists():
        return local.resolve()
    return (REPO_ROOT / CONFIG_FILENAME).resolve()


def config_root(config_path: Path | str) -> Path:
    """Directory that relative paths inside ``config_path`` are resolved against."""

    return Path(config_path).expanduser().resolve().parent


def resolve_config_value(value: object, root: Path) -> Path:
    """Turn a configured path into an absolute one, anchoring relatives at ``root``."""

    path = Path(str(value)).expanduser()
    if not path.is_absolute():
        path = Path(root) / path
    return path.resolve()
