"""Filesystem capability. Engines touch the disk only through it.

The predicate helpers treat a path the OS rejects outright (``ValueError``,
e.g. an embedded NUL) the same as a missing one.
"""

from __future__ import annotations

import os
import stat as stat_mod
from dataclasses import dataclass
from typing import IO, Protocol, runtime_checkable


@dataclass(frozen=True)
class FileStat:
    """Minimal stat result: what the engines need to know about a path."""

    is_dir: bool


@runtime_checkable
class FileSystem(Protocol):
    """Interface every filesystem backend must satisfy.

    ``open`` and ``stat`` raise ``FileNotFoundError`` (or another ``OSError``)
    when the path cannot be used. ``listdir`` raises ``OSError`` when the
    directory cannot be listed.
    """

    def open(self, path: str) -> IO[bytes]: ...

    def stat(self, path: str) -> FileStat: ...

    def join(self, *parts: str) -> str: ...

    def listdir(self, path: str) -> list[str]: ...


class LocalFileSystem:
    """FileSystem backed by the real disk."""

    def open(self, path: str) -> IO[bytes]:
        return open(path, "rb")

    def stat(self, path: str) -> FileStat:
        st = os.stat(path)
        return FileStat(is_dir=stat_mod.S_ISDIR(st.st_mode))

    def join(self, *parts: str) -> str:
        return os.path.join(*parts)

    def listdir(self, path: str) -> list[str]:
        return sorted(os.listdir(path))


def read_bytes(fs: FileSystem, path: str) -> bytes:
    """Read a whole file; the handle is closed before returning."""
    with fs.open(path) as fh:
        return fh.read()


def path_exists(fs: FileSystem, path: str) -> bool:
    try:
        fs.stat(path)
    except (OSError, ValueError):
        return False
    return True


def is_regular_file(fs: FileSystem, path: str) -> bool:
    try:
        return not fs.stat(path).is_dir
    except (OSError, ValueError):
        return False


def is_directory(fs: FileSystem, path: str) -> bool:
    try:
        return fs.stat(path).is_dir
    except (OSError, ValueError):
        return False
