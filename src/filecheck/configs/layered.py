"""Utilities for layered YAML check configuration loading."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List, MutableMapping, Tuple

import yaml

from . import config_root, resolve_config_path


class ConfigError(RuntimeError):
    """Raised when a configuration file cannot be loaded or is malformed."""


def _ensure_yaml_suffix(path: Path) -> Path:
    if path.suffix:
        return path
    return path.with_suffix(".yaml")


def _resolve_reference(reference: str | Path, anchor: Path | None = None) -> Path:
    candidate = Path(reference)
    candidate = _ensure_yaml_suffix(candidate)
    if candidate.is_absolute():
        return candidate
    if anchor is not None:
        anchored = (anchor.parent / candidate).resolve()
        if anchored.exists():
            return anchored
    resolved = resolve_config_path(candidate)
    if resolved.exists():
        return resolved
    # Missing references still resolve so the open() below reports the path.
    return (config_root() / candidate).resolve()


def _deep_merge(base: MutableMapping[str, Any], updates: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    result: MutableMapping[str, Any] = deepcopy(base)
    for key, value in updates.items():
        if key in result and isinstance(result[key], MutableMapping) and isinstance(value, MutableMapping):
            result[key] = _deep_merge(result[key], value)  # type: ignore[assignment]
        else:
            result[key] = deepcopy(value)
    return result


def _read_yaml_mapping(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle)
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config {path} is not valid YAML: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must contain a mapping at the top level")
    return raw


def _load_recursive(path: Path, stack: Tuple[Path, ...]) -> Tuple[Dict[str, Any], List[Path]]:
    if path in stack:
        chain = " -> ".join(str(p) for p in stack + (path,))
        raise ConfigError(f"Cyclic defaults detected while loading configs: {chain}")

    raw = _read_yaml_mapping(path)

    defaults = raw.pop("defaults", None)
    if defaults is None:
        defaults = []
    elif isinstance(defaults, (str, Path)):
        defaults = [defaults]
    if not isinstance(defaults, list) or not all(
        isinstance(default, (str, Path)) for default in defaults
    ):
        raise ConfigError(
            f"Config {path}: defaults must be a config name or a list of config names"
        )

    merged: Dict[str, Any] = {}
    sources: List[Path] = []
    for default in defaults:
        default_path = _resolve_reference(default, anchor=path)
        default_cfg, default_sources = _load_recursive(default_path, stack + (path,))
        merged = _deep_merge(merged, default_cfg)  # type: ignore[assignment]
        sources.extend(default_sources)

    merged = _deep_merge(merged, raw)  # type: ignore[assignment]
    sources.append(path)
    return merged, sources


def load_layered_config(reference: str | Path) -> Dict[str, Any]:
    """Load ``reference`` resolving ``defaults`` recursively."""

    path = _resolve_reference(reference)
    config, sources = _load_recursive(path, tuple())
    config.setdefault("__sources__", [str(p) for p in sources])
    return config


__all__ = [
    "ConfigError",
    "load_layered_config",
]
