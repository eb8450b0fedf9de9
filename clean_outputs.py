"""Remove the output folder named in ``config.yaml``."""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT / "src"))

from generation_accounting import load_config  # noqa: E402


def _remove_tree(path: Path) -> None:
    if not path.exists():
        print(f"Skipping {path} (not found)")
        return
    if not path.is_dir():
        raise NotADirectoryError(f"Refusing to delete non-directory path: {path}")
    print(f"Removing {path}")
    shutil.rmtree(path)


def main() -> None:
    config = load_config(ROOT / "config.yaml")
    _remove_tree(config.output_folder)


if __name__ == "__main__":
    main()
