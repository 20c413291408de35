"""Existence checks for parsed file candidates.

Each candidate is resolved against a base directory (the current working
directory unless told otherwise) and handed to an *existence probe*: a callable
that receives the absolute :class:`~pathlib.Path` and answers whether an entry
exists there. Probes are injectable so tests can substitute a fake filesystem.

Any ``OSError`` or ``ValueError`` raised while resolving or probing a candidate
counts as "does not exist"; nothing escapes :func:`check_files` for a single
bad path. Reports always use the candidate text as given, never the resolved
path.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

__all__ = [
    "ExistenceProbe",
    "MISSING_FILES_PREFIX",
    "ValidationResult",
    "check_files",
    "path_exists",
]

logger = logging.getLogger(__name__)

ExistenceProbe = Callable[[Path], bool]

MISSING_FILES_PREFIX = "The following files do not exist: "


@dataclass(frozen=True)
class ValidationResult:
    """Immutable summary of one existence check run."""

    exists: bool
    missing_files: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.exists != (not self.missing_files):
            raise ValueError(
                "ValidationResult.exists must be True exactly when no files are missing"
            )

    @classmethod
    def from_missing(cls, missing_files: Iterable[str]) -> "ValidationResult":
        missing = tuple(missing_files)
        return cls(exists=not missing, missing_files=missing)

    def failure_message(self) -> Optional[str]:
        """Return the human readable failure text, or ``None`` on success."""

        if self.exists:
            return None
        return MISSING_FILES_PREFIX + ", ".join(self.missing_files)

    def as_dict(self) -> dict[str, object]:
        return {
            "exists": self.exists,
            "missing_files": list(self.missing_files),
        }


def path_exists(path: Path) -> bool:
    """Default existence probe; directories count as existing entries."""

    return path.exists()


def _probe_candidate(
    candidate: str,
    base_dir: Path,
    probe: ExistenceProbe,
) -> bool:
    try:
        resolved = (base_dir / candidate).resolve()
        return bool(probe(resolved))
    except (OSError, ValueError, RuntimeError) as exc:
        # RuntimeError covers symlink loops on interpreters before 3.13.
        logger.debug("Probe failed for %s: %s", candidate, exc)
        return False


def check_files(
    candidates: Sequence[str],
    *,
    probe: ExistenceProbe = path_exists,
    base_dir: Optional[Path] = None,
    workers: int = 1,
) -> ValidationResult:
    """Probe every entry of ``candidates`` and summarise which are missing.

    Args:
        candidates: Trimmed path strings, typically from
            :func:`~filecheck.validation.parser.parse_file_list`.
        probe: Existence probe invoked once per candidate with its absolute path.
        base_dir: Directory relative candidates are resolved against. Defaults
            to the current working directory at call time.
        workers: Number of threads used to run probes. Diagnostics and the
            missing list keep candidate order regardless of this value.

    Returns:
        A :class:`ValidationResult` listing missing candidates in input order.
    """

    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    base = Path.cwd() if base_dir is None else Path(base_dir)

    if workers == 1 or len(candidates) < 2:
        outcomes = [_probe_candidate(candidate, base, probe) for candidate in candidates]
    else:
        with ThreadPoolExecutor(max_workers=min(workers, len(candidates))) as pool:
            outcomes = list(
                pool.map(lambda candidate: _probe_candidate(candidate, base, probe), candidates)
            )

    missing: List[str] = []
    for candidate, present in zip(candidates, outcomes):
        if present:
            logger.debug("File exists: %s", candidate)
        else:
            logger.debug("File does not exist: %s", candidate)
            missing.append(candidate)
    return ValidationResult.from_missing(missing)
