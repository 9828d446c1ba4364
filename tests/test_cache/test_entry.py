"""Tests for cache entry and stats models."""

import pytest
from pydantic import ValidationError

from filecache.cache.entry import CacheEntry, CacheStats


class TestCacheEntry:
    def test_size_bytes_is_two_per_char(self):
        entry = CacheEntry(content="hello", last_read_time=1.0, last_modified_at_read=1)
        assert entry.size_bytes == 10

    def test_size_counts_characters_not_utf8_bytes(self):
        entry = CacheEntry(content="héllo", last_read_time=1.0, last_modified_at_read=1)
        assert entry.size_bytes == 10

    def test_is_valid(self):
        entry = CacheEntry(content="", last_read_time=1.0, last_modified_at_read=100)
        assert entry.is_valid(100)
        assert not entry.is_valid(101)

    def test_frozen(self):
        entry = CacheEntry(content="x", last_read_time=1.0, last_modified_at_read=1)
        with pytest.raises(ValidationError):
            entry.content = "y"

    def test_copy_with_new_read_time(self):
        entry = CacheEntry(content="x", last_read_time=1.0, last_modified_at_read=7)
        bumped = entry.model_copy(update={"last_read_time": 2.0})
        assert bumped.last_read_time == 2.0
        assert bumped.last_modified_at_read == 7
        assert entry.last_read_time == 1.0


class TestCacheStats:
    def test_defaults(self):
        stats = CacheStats()
        assert stats.entries == 0
        assert stats.hits == 0
        assert stats.files == []

    def test_hit_rate_zero_when_no_requests(self):
        assert CacheStats().hit_rate == 0.0

    def test_hit_rate_calculation(self):
        assert CacheStats(hits=3, misses=1).hit_rate == 0.75
