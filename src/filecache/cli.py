"""Click CLI for filecache — read files through the cache and report statistics."""

from __future__ import annotations

import logging
import sys
import time

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from filecache.cache.file_cache import FileCache
from filecache.cache.report import print_stats
from filecache.config.schema import CacheSettings, load_settings
from filecache.errors.exceptions import ConfigError, FileCacheError

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(default_level)
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(package_name="filecache")
def cli() -> None:
    """filecache — in-process file content cache with mtime validation."""


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path())
@click.option("--capacity", type=int, default=None, help="Maximum number of cached files.")
@click.option("--passes", type=click.IntRange(min=1), default=2, show_default=True,
              help="How many times to read every path.")
@click.option("--encoding", type=str, default=None, help="Text encoding of the files.")
@click.option("--show-content", is_flag=True, default=False, help="Print file contents.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def read(
    paths: tuple[str, ...],
    capacity: int | None,
    passes: int,
    encoding: str | None,
    show_content: bool,
    verbose: int,
) -> None:
    """Read PATHS through one cache, PASSES times, and show what was cached."""
    settings = _resolve_settings(capacity=capacity, encoding=encoding)
    _setup_logging(verbose, settings.log_level)

    cache = FileCache.from_settings(settings)

    reads = Table(title="Reads", show_header=True)
    reads.add_column("Pass", justify="right")
    reads.add_column("Path", style="cyan")
    reads.add_column("Source")
    reads.add_column("Time (ms)", justify="right")

    for n in range(1, passes + 1):
        for path in paths:
            hits_before = cache.stats().hits
            start = time.perf_counter()
            try:
                content = cache.read_file(path)
            except FileCacheError as e:
                error_console.print(f"[red]Error:[/red] {e}")
                sys.exit(1)
            elapsed_ms = (time.perf_counter() - start) * 1000
            source = "cache" if cache.stats().hits > hits_before else "disk"
            reads.add_row(str(n), path, source, f"{elapsed_ms:.3f}")
            if show_content:
                console.print(content, end="", markup=False, highlight=False)

    console.print(reads)
    print_stats(cache.stats(), console)


@cli.command("config")
def show_config() -> None:
    """Show the resolved, validated configuration."""
    config = _resolve_settings().model_dump()

    table = Table(title="Configuration", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key in sorted(config):
        table.add_row(key, str(config[key]))

    console.print(table)


def _resolve_settings(**overrides: object) -> CacheSettings:
    try:
        return load_settings(**overrides)
    except ConfigError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def main() -> None:
    """Entry point for the CLI."""
    cli()
