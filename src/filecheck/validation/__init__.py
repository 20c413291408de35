"""Parse comma-separated file lists and verify that every entry exists."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .checker import (
    MISSING_FILES_PREFIX,
    ExistenceProbe,
    ValidationResult,
    check_files,
    path_exists,
)
from .parser import (
    EmptyInputError,
    InvalidInputError,
    NoValidCandidatesError,
    parse_file_list,
)

__all__ = [
    "EmptyInputError",
    "ExistenceProbe",
    "InvalidInputError",
    "MISSING_FILES_PREFIX",
    "NoValidCandidatesError",
    "ValidationResult",
    "check_files",
    "parse_file_list",
    "path_exists",
    "validate_files",
]


def validate_files(
    raw: Optional[str],
    *,
    probe: ExistenceProbe = path_exists,
    base_dir: Optional[Path] = None,
    workers: int = 1,
) -> ValidationResult:
    """Parse ``raw`` and check the resulting candidates in one step.

    Parser errors (:class:`InvalidInputError` subclasses) propagate unchanged;
    missing files are reported through the returned result.
    """

    candidates = parse_file_list(raw)
    return check_files(candidates, probe=probe, base_dir=base_dir, workers=workers)
