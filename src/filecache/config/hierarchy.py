"""Configuration hierarchy — merges sources in priority order.

Precedence (later overrides earlier):
  1. Package defaults
  2. Global config    (~/.filecache/config.yaml, or $FILECACHE_CONFIG_DIR/config.yaml)
  3. Project config   (./filecache.yaml, searched from cwd upward)
  4. Environment variables (FILECACHE_*)
  5. Runtime arguments

Files that are missing, unreadable or not a YAML mapping are skipped with a
warning; they never stop the cache from starting.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml

from filecache.config.defaults import get_defaults

logger = logging.getLogger(__name__)

_CONFIG_DIR_ENV = "FILECACHE_CONFIG_DIR"
_GLOBAL_CONFIG_DIR = Path.home() / ".filecache"
_GLOBAL_CONFIG_NAME = "config.yaml"
_PROJECT_CONFIG_NAME = "filecache.yaml"

# env var -> (config key, converter)
_ENV_KEYS: dict[str, tuple[str, type]] = {
    "FILECACHE_CAPACITY": ("capacity", int),
    "FILECACHE_ENCODING": ("encoding", str),
    "FILECACHE_LOG_LEVEL": ("log_level", str),
}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Load and merge configuration from all sources.

    ``None`` runtime values mean "not given" and do not override anything.
    """
    config = get_defaults()
    for path in _config_files():
        config.update(_load_yaml_config(path) or {})
    config.update(_load_env_vars())
    config.update({k: v for k, v in runtime_overrides.items() if v is not None})
    return config


def _config_files() -> Iterator[Path]:
    """Yield config file locations from lowest to highest priority."""
    yield _global_config_path()
    project = _find_project_config()
    if project is not None:
        yield project


def _global_config_path() -> Path:
    config_dir = os.environ.get(_CONFIG_DIR_ENV)
    base = Path(config_dir).expanduser() if config_dir else _GLOBAL_CONFIG_DIR
    return base / _GLOBAL_CONFIG_NAME


def _find_project_config() -> Path | None:
    """Search for filecache.yaml from cwd upward."""
    cwd = Path.cwd()
    for directory in (cwd, *cwd.parents):
        candidate = directory / _PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
    return None


def _load_yaml_config(path: Path) -> dict[str, Any] | None:
    """Parse a YAML mapping from ``path``; None if absent or unusable.

    The file is handed to PyYAML as bytes so that undecodable content is
    reported as a YAML reader error.
    """
    if not path.is_file():
        return None
    try:
        with open(path, "rb") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
        return None
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, ignoring", path)
        return None
    return data


def _load_env_vars() -> dict[str, Any]:
    """Read FILECACHE_* environment variables."""
    result: dict[str, Any] = {}
    for env_key, (config_key, convert) in _ENV_KEYS.items():
        raw = os.environ.get(env_key)
        if raw is not None:
            result[config_key] = _coerce_env_value(config_key, raw, convert)
    return result


def _coerce_env_value(key: str, value: str, convert: type = str) -> Any:
    """Convert an env string, leaving it as-is for settings validation to reject."""
    try:
        return convert(value)
    except (ValueError, TypeError):
        logger.warning("Cannot convert env var for '%s' to %s: %s", key, convert.__name__, value)
        return value
