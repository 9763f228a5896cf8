"""Run the machine-uuid CLI from a source checkout: `python -m main show`.

The package lives under `src/`, so this adds that directory to `sys.path`
before importing the CLI. Installed copies use the `machine-uuid` script.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from machine_uuid.cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
