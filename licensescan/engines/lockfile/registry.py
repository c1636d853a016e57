"""Parser registry — detect the lock file and match it to a parser."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import structlog

from licensescan.constants import (
    PACKAGE_MANAGER_NPM,
    PACKAGE_MANAGER_PNPM,
    PACKAGE_MANAGER_YARN,
)
from licensescan.core.filesystem import FileSystem, is_regular_file, read_bytes
from licensescan.engines.lockfile.models import Dependency
from licensescan.exceptions import (
    LockFileNotFoundError,
    LockFileParseError,
    UnsupportedPackageManagerError,
)

log = structlog.get_logger("licensescan.engine")

# Manager ids in detection order; each parser names its own lock file.
# When several lock files coexist, the first manager listed here wins.
LOCK_FILE_PRECEDENCE: tuple[str, ...] = (
    PACKAGE_MANAGER_NPM,
    PACKAGE_MANAGER_YARN,
    PACKAGE_MANAGER_PNPM,
)


@runtime_checkable
class LockFileParser(Protocol):
    """Interface that every lock-file parser must satisfy."""

    package_manager: str
    lock_file: str

    def parse(self, path: str, content: str) -> list[Dependency]: ...


PARSER_REGISTRY: dict[str, LockFileParser] = {}


def register_parser(parser: LockFileParser) -> None:
    """Register a parser instance by its package_manager id."""
    PARSER_REGISTRY[parser.package_manager] = parser


def get_parser(package_manager: str) -> LockFileParser:
    try:
        return PARSER_REGISTRY[package_manager]
    except KeyError:
        raise UnsupportedPackageManagerError(package_manager) from None


def detect_lock_file(fs: FileSystem, root: str) -> tuple[str, str]:
    """Return ``(lock_file_path, package_manager)`` for the project at *root*.

    Raises :class:`LockFileNotFoundError` when none of the candidates exists.
    """
    for package_manager in LOCK_FILE_PRECEDENCE:
        path = fs.join(root, get_parser(package_manager).lock_file)
        if is_regular_file(fs, path):
            log.debug("lockfile.detected", path=path, package_manager=package_manager)
            return path, package_manager
    raise LockFileNotFoundError(root)


def parse_lock_file(fs: FileSystem, path: str, package_manager: str) -> list[Dependency]:
    """Read *path* through *fs* and run the matching parser over it.

    Any read or decode failure is fatal and surfaces as
    :class:`LockFileParseError`.
    """
    parser = get_parser(package_manager)
    try:
        raw = read_bytes(fs, path)
    except OSError as exc:
        raise LockFileParseError(path, package_manager, str(exc)) from exc
    try:
        content = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise LockFileParseError(path, package_manager, "not valid UTF-8") from exc

    deps = parser.parse(path, content)
    log.debug(
        "lockfile.parsed",
        path=path,
        package_manager=package_manager,
        dependency_count=len(deps),
    )
    return deps
