"""Parsing of comma-separated file lists supplied by CI callers."""

from __future__ import annotations

from typing import List, Optional

__all__ = [
    "DELIMITER",
    "EmptyInputError",
    "InvalidInputError",
    "NoValidCandidatesError",
    "parse_file_list",
]

DELIMITER = ","


class InvalidInputError(ValueError):
    """Raised when the raw file list cannot be turned into path candidates."""


class EmptyInputError(InvalidInputError):
    """Raised when the raw file list is empty or only contains whitespace."""

    def __init__(self) -> None:
        super().__init__(
            "Input cannot be empty. Please provide a comma-separated list of files to validate."
        )


class NoValidCandidatesError(InvalidInputError):
    """Raised when splitting the raw file list leaves no usable entries."""

    def __init__(self) -> None:
        super().__init__(
            "No valid files found in input. Please provide a comma-separated list of file names."
        )


def parse_file_list(raw: Optional[str]) -> List[str]:
    """Split ``raw`` on commas into trimmed, non-empty path candidates.

    Order follows the input and duplicates are kept. Only leading and trailing
    whitespace of each entry is stripped; whitespace inside a file name is
    preserved. Commas cannot be escaped.

    Raises:
        EmptyInputError: If ``raw`` is empty, ``None`` or whitespace-only.
        NoValidCandidatesError: If no entry survives trimming, e.g. ``",,,"``.
    """

    if not raw or not raw.strip():
        raise EmptyInputError()

    candidates = [entry.strip() for entry in raw.split(DELIMITER)]
    candidates = [entry for entry in candidates if entry]
    if not candidates:
        raise NoValidCandidatesError()
    return candidates
