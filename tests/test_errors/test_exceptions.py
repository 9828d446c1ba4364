"""Tests for custom exception hierarchy."""

from filecache.errors.exceptions import ConfigError, FileCacheError, NotFoundError, ReadError


class TestExceptionHierarchy:
    def test_all_inherit_from_base(self):
        assert issubclass(NotFoundError, FileCacheError)
        assert issubclass(ReadError, FileCacheError)
        assert issubclass(ConfigError, FileCacheError)

    def test_all_inherit_from_exception(self):
        assert issubclass(FileCacheError, Exception)


class TestNotFoundError:
    def test_attributes(self, tmp_path):
        err = NotFoundError("File not found", path=tmp_path / "x")
        assert err.path == str(tmp_path / "x")
        assert err.message == "File not found"
        assert "File not found" in str(err)

    def test_defaults(self):
        assert NotFoundError("test").path is None


class TestReadError:
    def test_attributes(self):
        cause = PermissionError("denied")
        err = ReadError("Failed", path="/a", original=cause)
        assert err.path == "/a"
        assert err.original is cause

    def test_defaults(self):
        err = ReadError("test")
        assert err.path is None
        assert err.original is None
