#!/usr/bin/env python3
"""Verify that every path in a comma-separated list exists.

Thin wrapper around :func:`filecheck.cli.main` so the check can be run from a
checkout without installing the package. The script exits with a non-zero
status when the list is empty or any listed path is missing.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

try:
    from filecheck.cli import main
except ModuleNotFoundError as exc:  # pragma: no cover - dependency issues
    if exc.name == "filecheck":
        raise SystemExit(
            "Unable to import 'filecheck'. Ensure the repository is installed or "
            "the PYTHONPATH includes its src directory before running this helper."
        ) from exc
    raise


if __name__ == "__main__":
    sys.exit(main())
