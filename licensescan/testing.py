"""Test doubles for licensescan — use in unit and integration tests.

Usage::

    from licensescan.testing import MemoryFileSystem

    fs = MemoryFileSystem()
    fs.add_file("proj/package-lock.json", '{"packages": {}}')
    fs.add_dir("proj/node_modules/.pnpm")
"""

from __future__ import annotations

import io
import os
import posixpath
from typing import IO

from licensescan.core.filesystem import FileStat


def _norm(path: str) -> str:
    return posixpath.normpath(path.replace(os.sep, "/"))


class MemoryFileSystem:
    """Drop-in replacement for LocalFileSystem that keeps everything in memory.

    Parent directories of every added file or directory exist implicitly.
    """

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}
        self._dirs: set[str] = set()
        self._opened: list[str] = []

    @property
    def opened(self) -> list[str]:
        """Paths passed to ``open``, in call order."""
        return self._opened

    def add_file(self, path: str, content: str | bytes) -> None:
        data = content.encode("utf-8") if isinstance(content, str) else content
        norm = _norm(path)
        self._files[norm] = data
        self._add_parents(norm)

    def add_dir(self, path: str) -> None:
        norm = _norm(path)
        self._dirs.add(norm)
        self._add_parents(norm)

    def _add_parents(self, norm: str) -> None:
        parent = posixpath.dirname(norm)
        while parent and parent not in (".", "/"):
            self._dirs.add(parent)
            parent = posixpath.dirname(parent)

    # ── FileSystem protocol ──────────────────────────────────────────────

    def open(self, path: str) -> IO[bytes]:
        norm = _norm(path)
        self._opened.append(norm)
        if norm in self._dirs:
            raise IsADirectoryError(path)
        if norm not in self._files:
            raise FileNotFoundError(path)
        return io.BytesIO(self._files[norm])

    def stat(self, path: str) -> FileStat:
        norm = _norm(path)
        if norm in self._files:
            return FileStat(is_dir=False)
        if norm in self._dirs:
            return FileStat(is_dir=True)
        raise FileNotFoundError(path)

    def join(self, *parts: str) -> str:
        return posixpath.join(*parts)

    def listdir(self, path: str) -> list[str]:
        norm = _norm(path)
        if norm in self._files:
            raise NotADirectoryError(path)
        if norm not in self._dirs:
            raise FileNotFoundError(path)
        prefix = norm + "/"
        children = {
            entry[len(prefix):].split("/", 1)[0]
            for entry in (*self._files, *self._dirs)
            if entry.startswith(prefix)
        }
        return sorted(children)
