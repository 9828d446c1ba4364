"""filecache — in-process file content cache with mtime validation."""

from filecache.cache import CacheEntry, CacheStats, FileCache
from filecache.errors import FileCacheError, NotFoundError, ReadError

__all__ = [
    "FileCache",
    "CacheEntry",
    "CacheStats",
    "FileCacheError",
    "NotFoundError",
    "ReadError",
]
