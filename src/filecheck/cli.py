from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .configs import resolve_config_path
from .configs.layered import ConfigError
from .configs.settings import CheckSettings, load_check_settings
from .logs import LOG_FORMAT, attached_handler
from .validation import InvalidInputError, validate_files


def _resolve_with_default(path: Path, resolver) -> Path:
    """Resolve ``path`` relative to a repository directory when not absolute."""

    if path.is_absolute() or path.exists():
        return path.resolve()
    return resolver(path)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="filecheck",
        description="Verify that every file in a comma-separated list exists.",
    )
    parser.add_argument(
        "files",
        nargs="?",
        default=None,
        help="Comma-separated list of paths (defaults to required_files from --config).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Layered YAML config providing required_files, workers and log_level.",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=None,
        help="Number of concurrent existence probes (default: 1).",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Directory relative paths are resolved against (default: cwd).",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log one diagnostic line per checked file.",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress the success line.",
    )
    return parser.parse_args(argv)


def _load_settings(config_path: Optional[Path]) -> CheckSettings:
    if config_path is None:
        return CheckSettings()
    return load_check_settings(_resolve_with_default(config_path, resolve_config_path))


def _stderr_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        settings = _load_settings(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level)
    files = args.files if args.files is not None else settings.required_files
    workers = args.workers if args.workers is not None else settings.workers
    with attached_handler(_stderr_handler(), level):
        try:
            result = validate_files(files, base_dir=args.base_dir, workers=workers)
        except InvalidInputError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    message = result.failure_message()
    if message is not None:
        print(f"Error: {message}", file=sys.stderr)
        return 1
    if not args.quiet:
        print("exists=true")
    return 0


if __name__ == "__main__":
    sys.exit(main())
