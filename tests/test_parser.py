import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from filecheck.validation.parser import (
    EmptyInputError,
    InvalidInputError,
    NoValidCandidatesError,
    parse_file_list,
)


EMPTY_MESSAGE = "Input cannot be empty. Please provide a comma-separated list of files to validate."
NO_FILES_MESSAGE = "No valid files found in input. Please provide a comma-separated list of file names."


def test_parse_skips_empty_and_blank_segments():
    assert parse_file_list("file1.txt,,file2.txt, ,file3.txt") == [
        "file1.txt",
        "file2.txt",
        "file3.txt",
    ]


def test_parse_trims_but_keeps_internal_whitespace():
    assert parse_file_list("  docs/my notes.md ,\tREADME \n") == ["docs/my notes.md", "README"]


def test_parse_keeps_order_and_duplicates():
    assert parse_file_list("b.txt,a.txt,b.txt") == ["b.txt", "a.txt", "b.txt"]


def test_parse_single_entry_without_delimiter():
    assert parse_file_list("action.yml") == ["action.yml"]


@pytest.mark.parametrize("raw", ["", "   ", "\n\t", None])
def test_parse_rejects_empty_input(raw):
    with pytest.raises(EmptyInputError) as excinfo:
        parse_file_list(raw)
    assert str(excinfo.value) == EMPTY_MESSAGE


@pytest.mark.parametrize("raw", [",,,", " , , ", ","])
def test_parse_rejects_delimiter_only_input(raw):
    with pytest.raises(NoValidCandidatesError) as excinfo:
        parse_file_list(raw)
    assert str(excinfo.value) == NO_FILES_MESSAGE


def test_parse_errors_share_a_value_error_base():
    assert issubclass(EmptyInputError, InvalidInputError)
    assert issubclass(NoValidCandidatesError, InvalidInputError)
    assert issubclass(InvalidInputError, ValueError)
