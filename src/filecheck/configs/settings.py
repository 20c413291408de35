"""Typed view over the keys the file check reads from a layered config."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from .layered import ConfigError, load_layered_config

__all__ = [
    "CheckSettings",
    "load_check_settings",
    "settings_from_mapping",
]

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class CheckSettings:
    """Settings for one file check run."""

    required_files: Optional[str] = None
    workers: int = 1
    log_level: str = "WARNING"


def _coerce_required_files(value: Any, source: str) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        entries = []
        for entry in value:
            if not isinstance(entry, (str, Path)):
                raise ConfigError(
                    f"{source}: required_files entries must be strings, got {type(entry).__name__}"
                )
            entries.append(str(entry))
        return ",".join(entries)
    raise ConfigError(
        f"{source}: required_files must be a string or a list of strings"
    )


def _coerce_workers(value: Any, source: str) -> int:
    if value is None:
        return 1
    if isinstance(value, bool):
        raise ConfigError(f"{source}: workers must be a positive integer")
    try:
        workers = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{source}: workers must be a positive integer") from exc
    if workers < 1:
        raise ConfigError(f"{source}: workers must be a positive integer")
    return workers


def _coerce_log_level(value: Any, source: str) -> str:
    if value is None:
        return "WARNING"
    level = str(value).strip().upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"{source}: unknown log_level {value!r}")
    return level


def settings_from_mapping(config: Mapping[str, Any], *, source: str = "config") -> CheckSettings:
    """Build :class:`CheckSettings` from an already loaded config mapping."""

    return CheckSettings(
        required_files=_coerce_required_files(config.get("required_files"), source),
        workers=_coerce_workers(config.get("workers"), source),
        log_level=_coerce_log_level(config.get("log_level"), source),
    )


def load_check_settings(reference: str | Path) -> CheckSettings:
    """Load ``reference`` via :func:`load_layered_config` and extract settings."""

    config = load_layered_config(reference)
    sources = config.get("__sources__") or [str(reference)]
    logger.debug("Loaded config from %s", ", ".join(sources))
    return settings_from_mapping(config, source=str(sources[-1]))
