"""Data models for the lock-file engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Dependency:
    """A single package entry pinned by a lock file.

    The same name may appear more than once (nested npm trees, several
    installed versions); entries are never deduplicated.
    """

    name: str
    version: str
    license: str | None = None
