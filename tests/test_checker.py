from __future__ import annotations

import logging
import os
import sys
import threading
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from filecheck.validation import (
    EmptyInputError,
    ValidationResult,
    check_files,
    validate_files,
)

CHECKER_LOGGER = "filecheck.validation.checker"


class FakeProbe:
    """Existence probe backed by a set of file names instead of the disk."""

    def __init__(self, present, errors=None):
        self.present = set(present)
        self.errors = dict(errors or {})
        self.calls = []
        self._lock = threading.Lock()

    def __call__(self, path: Path) -> bool:
        with self._lock:
            self.calls.append(path)
        if path.name in self.errors:
            raise self.errors[path.name]
        return path.name in self.present


def _diagnostics(caplog):
    return [
        record.getMessage()
        for record in caplog.records
        if record.name == CHECKER_LOGGER and record.getMessage().startswith("File ")
    ]


def test_all_present_files_pass(tmp_path: Path, caplog) -> None:
    (tmp_path / "file1.txt").write_text("a")
    (tmp_path / "file2.txt").write_text("b")

    with caplog.at_level(logging.DEBUG, logger=CHECKER_LOGGER):
        result = check_files(["file1.txt", "file2.txt"], base_dir=tmp_path)

    assert result == ValidationResult(exists=True, missing_files=())
    assert _diagnostics(caplog) == ["File exists: file1.txt", "File exists: file2.txt"]


def test_missing_file_is_reported(tmp_path: Path, caplog) -> None:
    (tmp_path / "file1.txt").write_text("a")

    with caplog.at_level(logging.DEBUG, logger=CHECKER_LOGGER):
        result = check_files(["file1.txt", "missing.txt"], base_dir=tmp_path)

    assert result.exists is False
    assert result.missing_files == ("missing.txt",)
    assert _diagnostics(caplog) == [
        "File exists: file1.txt",
        "File does not exist: missing.txt",
    ]


def test_relative_paths_resolve_against_cwd(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "present.txt").write_text("x")
    monkeypatch.chdir(tmp_path)

    result = check_files(["present.txt", "absent.txt"])

    assert result.missing_files == ("absent.txt",)


def test_probe_receives_absolute_paths_and_reports_original_text(tmp_path: Path) -> None:
    probe = FakeProbe(present=[])

    result = check_files(["./nested/../gone.txt"], probe=probe, base_dir=tmp_path)

    assert probe.calls == [(tmp_path / "gone.txt").resolve()]
    assert all(call.is_absolute() for call in probe.calls)
    assert result.missing_files == ("./nested/../gone.txt",)


def test_existing_directory_counts_as_present(tmp_path: Path) -> None:
    (tmp_path / "build").mkdir()

    assert check_files(["build"], base_dir=tmp_path).exists is True


def test_probe_errors_are_treated_as_missing(tmp_path: Path) -> None:
    probe = FakeProbe(
        present=["ok.txt"],
        errors={
            "locked.txt": PermissionError("permission denied"),
            "flaky.txt": OSError("I/O error"),
        },
    )

    result = check_files(
        ["locked.txt", "ok.txt", "flaky.txt"],
        probe=probe,
        base_dir=tmp_path,
    )

    assert result.exists is False
    assert result.missing_files == ("locked.txt", "flaky.txt")


def test_invalid_path_text_is_treated_as_missing(tmp_path: Path) -> None:
    result = check_files(["bad\x00name.txt"], base_dir=tmp_path)

    assert result.missing_files == ("bad\x00name.txt",)


def test_duplicates_are_checked_and_reported_each_time(tmp_path: Path) -> None:
    probe = FakeProbe(present=[])

    result = check_files(["gone.txt", "gone.txt"], probe=probe, base_dir=tmp_path)

    assert len(probe.calls) == 2
    assert result.missing_files == ("gone.txt", "gone.txt")


def test_check_is_idempotent(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("a")
    candidates = ["a.txt", "b.txt"]

    first = check_files(candidates, base_dir=tmp_path)
    second = check_files(candidates, base_dir=tmp_path)

    assert first == second


def test_parallel_probes_keep_candidate_order(tmp_path: Path, caplog) -> None:
    names = [f"f{index}.txt" for index in range(20)]
    present = names[::2]
    probe = FakeProbe(present=present)

    with caplog.at_level(logging.DEBUG, logger=CHECKER_LOGGER):
        result = check_files(names, probe=probe, base_dir=tmp_path, workers=8)

    assert len(probe.calls) == len(names)
    assert result.missing_files == tuple(names[1::2])
    expected = [
        f"File exists: {name}" if name in present else f"File does not exist: {name}"
        for name in names
    ]
    assert _diagnostics(caplog) == expected


def test_check_rejects_non_positive_workers(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        check_files(["a.txt"], base_dir=tmp_path, workers=0)


def test_validation_result_invariant() -> None:
    with pytest.raises(ValueError):
        ValidationResult(exists=True, missing_files=("missing.txt",))
    with pytest.raises(ValueError):
        ValidationResult(exists=False, missing_files=())


def test_failure_message_lists_missing_files_in_order() -> None:
    result = ValidationResult.from_missing(["b.txt", "a.txt"])

    assert result.failure_message() == "The following files do not exist: b.txt, a.txt"
    assert result.as_dict() == {"exists": False, "missing_files": ["b.txt", "a.txt"]}
    assert ValidationResult.from_missing([]).failure_message() is None


def test_validate_files_parses_then_checks(tmp_path: Path) -> None:
    (tmp_path / "file1.txt").write_text("a")

    result = validate_files(" file1.txt , missing.txt ,", base_dir=tmp_path)

    assert result.missing_files == ("missing.txt",)


def test_validate_files_propagates_parser_errors(tmp_path: Path) -> None:
    probe = FakeProbe(present=[])

    with pytest.raises(EmptyInputError):
        validate_files("  ", probe=probe, base_dir=tmp_path)
    assert probe.calls == []


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_dangling_symlink_is_missing(tmp_path: Path) -> None:
    link = tmp_path / "link.txt"
    try:
        link.symlink_to(tmp_path / "target.txt")
    except OSError:
        pytest.skip("symlink creation not permitted")

    assert check_files(["link.txt"], base_dir=tmp_path).missing_files == ("link.txt",)
