"""Temporary handler installation on the package logger."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

PACKAGE_LOGGER = "filecheck"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@contextmanager
def attached_handler(handler: logging.Handler, level: int) -> Iterator[logging.Logger]:
    """Attach ``handler`` to the ``filecheck`` logger at ``level`` for a block.

    The logger's previous level and handler list are restored on exit, so
    repeated in-process runs do not stack handlers.
    """

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    previous_level = package_logger.level
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    try:
        yield package_logger
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)
        handler.close()
