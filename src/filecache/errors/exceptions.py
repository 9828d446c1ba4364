"""Custom exception hierarchy for filecache."""

from __future__ import annotations

from pathlib import Path


class FileCacheError(Exception):
    """Base exception for all filecache errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(FileCacheError):
    """The requested path does not reference an existing file.

    Raised before any cache lookup or disk read, so cache state is unchanged.
    """

    def __init__(self, message: str = "", path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None


class ReadError(FileCacheError):
    """Reading the file from disk failed.

    Examples: permission denied, I/O fault, file removed between stat and read,
    content not decodable with the configured encoding.
    """

    def __init__(
        self,
        message: str = "",
        path: str | Path | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None
        self.original = original


class ConfigError(FileCacheError):
    """Configuration values failed validation."""
