"""Minimal GitHub Actions host channel.

Inputs arrive as ``INPUT_<NAME>`` environment variables, outputs are appended
to the file named by ``GITHUB_OUTPUT`` and everything else travels as workflow
commands (``::debug::``, ``::error::`` ...) written to stdout. The host
environment and stream are passed in explicitly so callers and tests control
them.
"""

from __future__ import annotations

import logging
import os
import sys
import uuid
from typing import Mapping, Optional, TextIO

__all__ = [
    "ActionContext",
    "ActionInputError",
    "WorkflowCommandHandler",
    "escape_data",
]


class ActionInputError(ValueError):
    """Raised when a required action input is absent."""


def escape_data(value: str) -> str:
    """Escape ``value`` for use as workflow command data."""

    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionContext:
    """Reads inputs from and reports results to the Actions runner."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.environ = os.environ if environ is None else environ
        self.stream = sys.stdout if stream is None else stream
        self.exit_code = 0

    @staticmethod
    def input_variable(name: str) -> str:
        return "INPUT_" + name.replace(" ", "_").upper()

    def get_input(self, name: str, *, required: bool = False) -> str:
        value = self.environ.get(self.input_variable(name))
        if value is None:
            if required:
                raise ActionInputError(f"Input required and not supplied: {name}")
            return ""
        return value.strip()

    def issue_command(self, command: str, message: str) -> None:
        self.stream.write(f"::{command}::{escape_data(message)}\n")
        self.stream.flush()

    def debug(self, message: str) -> None:
        self.issue_command("debug", message)

    def set_output(self, name: str, value: str) -> None:
        output_path = self.environ.get("GITHUB_OUTPUT")
        if not output_path:
            self.stream.write("\n")
            self.issue_command(f"set-output name={name}", value)
            return
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name or delimiter in value:
            raise ValueError(f"Unexpected delimiter collision while writing output {name}")
        with open(output_path, "a", encoding="utf-8") as handle:
            handle.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

    def set_failed(self, message: str) -> None:
        self.exit_code = 1
        self.issue_command("error", message)


class WorkflowCommandHandler(logging.Handler):
    """Route :mod:`logging` records to workflow commands on ``context``."""

    def __init__(self, context: ActionContext, level: int = logging.DEBUG) -> None:
        super().__init__(level)
        self.context = context

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            if record.levelno >= logging.ERROR:
                self.context.issue_command("error", message)
            elif record.levelno >= logging.WARNING:
                self.context.issue_command("warning", message)
            elif record.levelno >= logging.INFO:
                self.context.stream.write(message + "\n")
                self.context.stream.flush()
            else:
                self.context.debug(message)
        except Exception:  # pragma: no cover - mirrors logging.StreamHandler
            self.handleError(record)
