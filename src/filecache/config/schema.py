"""Pydantic model for validated cache settings."""

from __future__ import annotations

import codecs
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from filecache.config.defaults import DEFAULT_CAPACITY, DEFAULT_ENCODING, DEFAULT_LOG_LEVEL
from filecache.config.hierarchy import load_config_hierarchy
from filecache.errors.exceptions import ConfigError

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class CacheSettings(BaseModel):
    capacity: int = Field(default=DEFAULT_CAPACITY, gt=0)
    encoding: str = DEFAULT_ENCODING
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level


def load_settings(**runtime_overrides: Any) -> CacheSettings:
    """Resolve the configuration hierarchy and validate it.

    Unknown keys in config files are ignored.
    """
    config = load_config_hierarchy(**runtime_overrides)
    try:
        return CacheSettings(**{k: v for k, v in config.items() if k in CacheSettings.model_fields})
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
