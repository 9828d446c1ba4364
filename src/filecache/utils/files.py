"""Filesystem collaborators used by the cache: stat and full-text read."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import NamedTuple

_DEFAULT_ENCODING = "utf-8"


class FileStatus(NamedTuple):
    exists: bool
    mtime_ns: int


_MISSING = FileStatus(exists=False, mtime_ns=0)


def stat_file(path: str | Path) -> FileStatus:
    """Return existence and modification time of a regular file.

    Directories, broken or looping symlinks and paths the OS rejects (such as
    ones with an embedded NUL) report as missing.
    """
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return _MISSING
    if not stat.S_ISREG(st.st_mode):
        return _MISSING
    return FileStatus(exists=True, mtime_ns=st.st_mtime_ns)


def read_text(path: str | Path, encoding: str = _DEFAULT_ENCODING) -> str:
    """Read a whole text file, terminating every line with ``os.linesep``.

    Line endings in the file (``\\n``, ``\\r\\n`` or ``\\r``) are decoded as
    universal newlines. A last line without a terminator still gets one.
    """
    with open(path, encoding=encoding, newline=None) as f:
        text = f.read()
    if not text:
        return ""
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return "".join(line + os.linesep for line in lines)
