"""Bounded in-process cache of file contents, validated by modification time."""

from __future__ import annotations

import functools
import logging
import os
import time
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from filecache.cache.entry import CacheEntry, CacheStats, EntryInfo
from filecache.config.defaults import DEFAULT_CAPACITY, DEFAULT_ENCODING
from filecache.errors.exceptions import NotFoundError, ReadError
from filecache.utils.files import FileStatus, read_text, stat_file

if TYPE_CHECKING:
    from filecache.config.schema import CacheSettings

logger = logging.getLogger(__name__)

Reader = Callable[[Path], str]
Stat = Callable[[Path], FileStatus]
Clock = Callable[[], float]


class FileCache:
    """File content cache keyed by absolute path with least-recently-read eviction.

    An entry is served only while the file's modification time equals the one
    recorded when the content was read; otherwise the file is read again.
    When a new path is added to a full cache, the entry with the smallest
    ``last_read_time`` is evicted. Ties go to the entry inserted first.

    Not safe for concurrent use; callers sharing an instance across threads
    must guard every call with a single lock.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        *,
        encoding: str = DEFAULT_ENCODING,
        reader: Reader | None = None,
        stat: Stat = stat_file,
        clock: Clock = time.time,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity}")
        self._capacity = capacity
        self._entries: dict[str, CacheEntry] = {}
        self._reader = reader or functools.partial(read_text, encoding=encoding)
        self._stat = stat
        self._clock = clock
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @classmethod
    def from_settings(cls, settings: CacheSettings, **kwargs) -> FileCache:
        return cls(capacity=settings.capacity, encoding=settings.encoding, **kwargs)

    @property
    def capacity(self) -> int:
        return self._capacity

    def read_file(self, path: str | os.PathLike[str]) -> str:
        """Return the content of ``path``, from cache when still valid.

        Raises:
            NotFoundError: ``path`` is not an existing file.
            ReadError: the disk read failed; the cache is left as it was.
        """
        key = _cache_key(path)
        resolved = Path(key)

        status = self._stat(resolved)
        if not status.exists:
            raise NotFoundError(f"File not found: {path}", path=key)

        entry = self._entries.get(key)
        if entry is not None and entry.is_valid(status.mtime_ns):
            self._entries[key] = entry.model_copy(update={"last_read_time": self._clock()})
            self._hits += 1
            logger.debug("Cache hit: %s", key)
            return entry.content

        try:
            content = self._reader(resolved)
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"Failed to read {key}: {e}", path=key, original=e) from e

        if entry is None:
            logger.debug("Cache miss: %s", key)
            if len(self._entries) >= self._capacity:
                self._evict_oldest()
        else:
            logger.debug("Stale entry refreshed: %s", key)

        self._entries[key] = CacheEntry(
            content=content,
            last_read_time=self._clock(),
            last_modified_at_read=status.mtime_ns,
        )
        self._misses += 1
        return content

    def invalidate(self, path: str | os.PathLike[str]) -> bool:
        """Drop the entry for ``path``. Returns whether one was present."""
        return self._entries.pop(_cache_key(path), None) is not None

    def invalidate_all(self) -> int:
        """Drop every entry. Returns how many were removed."""
        count = len(self._entries)
        self._entries.clear()
        return count

    def is_cached(self, path: str | os.PathLike[str]) -> bool:
        """Whether an entry exists for ``path``.

        Presence only: the entry may be stale relative to the file on disk.
        """
        return _cache_key(path) in self._entries

    def cached_count(self) -> int:
        return len(self._entries)

    def approximate_memory_usage(self) -> int:
        """Estimated content size in bytes (two bytes per character)."""
        return sum(e.size_bytes for e in self._entries.values())

    def get_entry(self, path: str | os.PathLike[str]) -> CacheEntry | None:
        return self._entries.get(_cache_key(path))

    def stats(self) -> CacheStats:
        """Return a snapshot of cache state and counters."""
        return CacheStats(
            entries=len(self._entries),
            size_bytes=self.approximate_memory_usage(),
            capacity=self._capacity,
            hits=self._hits,
            misses=self._misses,
            evictions=self._evictions,
            files=[
                EntryInfo(path=key, size_bytes=e.size_bytes, last_read_time=e.last_read_time)
                for key, e in self._entries.items()
            ],
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return self.is_cached(path)

    def _evict_oldest(self) -> None:
        if not self._entries:
            return
        # min() keeps the first-inserted entry on ties
        oldest_key, oldest = min(self._entries.items(), key=lambda item: item[1].last_read_time)
        del self._entries[oldest_key]
        self._evictions += 1
        logger.debug("Evicted %s (last read %s)", oldest_key, oldest.last_read_time)


def _cache_key(path: str | os.PathLike[str]) -> str:
    """Canonical absolute form of ``path``.

    Symlink loops resolve as far as they can; paths the OS rejects outright
    (embedded NUL) fall back to the plain absolute path.
    """
    absolute = os.path.abspath(path)
    try:
        return os.path.realpath(absolute)
    except (OSError, ValueError):
        return absolute
