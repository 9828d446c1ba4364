"""Cache entry and statistics models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# UTF-16 style accounting: two bytes per character.
CHAR_SIZE_BYTES = 2


class CacheEntry(BaseModel):
    """Cached content of one file."""

    model_config = ConfigDict(frozen=True)

    content: str
    last_read_time: float
    last_modified_at_read: int

    @property
    def size_bytes(self) -> int:
        return len(self.content) * CHAR_SIZE_BYTES

    def is_valid(self, current_mtime: int) -> bool:
        """True when the file has not been modified since ``content`` was read."""
        return self.last_modified_at_read == current_mtime


class EntryInfo(BaseModel):
    path: str
    size_bytes: int
    last_read_time: float


class CacheStats(BaseModel):
    """Point-in-time snapshot of a cache."""

    entries: int = 0
    size_bytes: int = 0
    capacity: int = 0
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    files: list[EntryInfo] = Field(default_factory=list)

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0
