import itertools
from pathlib import Path

import pytest

from filecache.utils.files import FileStatus


class FakeFS:
    """In-memory stand-in for the stat and reader collaborators."""

    def __init__(self) -> None:
        self.files: dict[str, tuple[str, int]] = {}
        self.reads: list[str] = []
        self.fail_reads: set[str] = set()

    def write(self, path: str | Path, content: str, mtime_ns: int = 1) -> str:
        key = str(Path(path).resolve())
        self.files[key] = (content, mtime_ns)
        return key

    def remove(self, path: str | Path) -> None:
        self.files.pop(str(Path(path).resolve()), None)

    def stat(self, path: Path) -> FileStatus:
        entry = self.files.get(str(path))
        if entry is None:
            return FileStatus(exists=False, mtime_ns=0)
        return FileStatus(exists=True, mtime_ns=entry[1])

    def reader(self, path: Path) -> str:
        self.reads.append(str(path))
        if str(path) in self.fail_reads:
            raise PermissionError(13, "Permission denied", str(path))
        return self.files[str(path)][0]

    def read_count(self, path: str | Path) -> int:
        return self.reads.count(str(Path(path).resolve()))


@pytest.fixture
def fake_fs():
    return FakeFS()


@pytest.fixture
def clock():
    """Strictly increasing fake clock: 1.0, 2.0, 3.0, ..."""
    counter = itertools.count(1)
    return lambda: float(next(counter))


@pytest.fixture
def make_cache(fake_fs, clock):
    """Build a FileCache wired to the fake filesystem and clock."""
    from filecache.cache.file_cache import FileCache

    def _make(capacity: int = 100) -> FileCache:
        return FileCache(capacity, reader=fake_fs.reader, stat=fake_fs.stat, clock=clock)

    return _make


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep the user's global config and FILECACHE_* env out of tests."""
    monkeypatch.setenv("FILECACHE_CONFIG_DIR", str(tmp_path_factory.mktemp("config_home")))
    for var in ("FILECACHE_CAPACITY", "FILECACHE_ENCODING", "FILECACHE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
