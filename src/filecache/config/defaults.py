"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Default cache settings
DEFAULT_CAPACITY = 100
DEFAULT_ENCODING = "utf-8"

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "capacity": DEFAULT_CAPACITY,
        "encoding": DEFAULT_ENCODING,
        "log_level": DEFAULT_LOG_LEVEL,
    }
