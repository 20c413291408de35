"""Entry point for running the file check as a GitHub Action."""

from __future__ import annotations

import logging
import sys
from typing import Mapping, Optional, TextIO

from filecheck.logs import attached_handler
from filecheck.validation import InvalidInputError, validate_files

from .core import ActionContext, ActionInputError, WorkflowCommandHandler

__all__ = ["main", "run"]


def _read_workers(context: ActionContext) -> int:
    raw = context.get_input("workers")
    if not raw:
        return 1
    try:
        workers = int(raw)
    except ValueError as exc:
        raise ActionInputError(f"Input 'workers' must be a positive integer, got {raw!r}") from exc
    if workers < 1:
        raise ActionInputError(f"Input 'workers' must be a positive integer, got {raw!r}")
    return workers


def run(
    environ: Optional[Mapping[str, str]] = None,
    stream: Optional[TextIO] = None,
) -> int:
    """Check the ``required-files`` input and report through the Actions host.

    On success the ``exists`` output is set to ``"true"``. Any failure is
    reported with a single error command and a non-zero return value.
    """

    context = ActionContext(environ, stream)
    with attached_handler(WorkflowCommandHandler(context), logging.DEBUG):
        try:
            files = context.get_input("required-files", required=True)
            workers = _read_workers(context)
            result = validate_files(files, workers=workers)
        except (ActionInputError, InvalidInputError) as exc:
            context.set_failed(str(exc))
            return context.exit_code

        message = result.failure_message()
        if message is not None:
            context.set_failed(message)
            return context.exit_code

        try:
            context.set_output("exists", "true")
        except OSError as exc:
            context.set_failed(f"Unable to write output 'exists': {exc}")
    return context.exit_code


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
