"""Cache subsystem — file contents keyed by absolute path, validated by mtime."""

from filecache.cache.entry import CacheEntry, CacheStats, EntryInfo
from filecache.cache.file_cache import FileCache

__all__ = [
    "FileCache",
    "CacheEntry",
    "CacheStats",
    "EntryInfo",
]
