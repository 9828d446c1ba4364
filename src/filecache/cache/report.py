"""Rich tables for a cache statistics snapshot."""

from __future__ import annotations

from datetime import datetime

from rich.console import Console
from rich.table import Table

from filecache.cache.entry import CacheStats


def build_stats_table(stats: CacheStats) -> Table:
    table = Table(title="Cache Statistics", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value")

    table.add_row("Entries", str(stats.entries))
    table.add_row("Size (bytes)", f"{stats.size_bytes:,}")
    table.add_row("Capacity", str(stats.capacity))
    table.add_row("Hits", str(stats.hits))
    table.add_row("Misses", str(stats.misses))
    table.add_row("Hit rate", f"{stats.hit_rate:.1%}")
    table.add_row("Evictions", str(stats.evictions))
    return table


def build_files_table(stats: CacheStats) -> Table:
    table = Table(title="Cached Files", show_header=True)
    table.add_column("Path", style="cyan")
    table.add_column("Size (bytes)", justify="right")
    table.add_column("Last read")

    for info in stats.files:
        table.add_row(info.path, f"{info.size_bytes:,}", _format_time(info.last_read_time))
    return table


def print_stats(stats: CacheStats, console: Console | None = None) -> None:
    """Print the statistics table, followed by the file list when non-empty."""
    console = console or Console()
    console.print(build_stats_table(stats))
    if stats.files:
        console.print(build_files_table(stats))


def _format_time(timestamp: float) -> str:
    try:
        return datetime.fromtimestamp(timestamp).isoformat(sep=" ", timespec="seconds")
    except (OverflowError, OSError, ValueError):
        return str(timestamp)
