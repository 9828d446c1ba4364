"""Filesystem helpers."""

from filecache.utils.files import FileStatus, read_text, stat_file

__all__ = ["FileStatus", "read_text", "stat_file"]
