"""Error handling — the filecache exception hierarchy."""

from filecache.errors.exceptions import (
    ConfigError,
    FileCacheError,
    NotFoundError,
    ReadError,
)

__all__ = [
    "FileCacheError",
    "NotFoundError",
    "ReadError",
    "ConfigError",
]
