"""Lock-file engine — detect a project's lock file and list its packages."""

# Ensure parsers are registered before any lookup runs.
import licensescan.engines.lockfile.parsers  # noqa: F401
from licensescan.engines.lockfile.models import Dependency
from licensescan.engines.lockfile.registry import (
    LOCK_FILE_PRECEDENCE,
    PARSER_REGISTRY,
    LockFileParser,
    detect_lock_file,
    get_parser,
    parse_lock_file,
)

__all__ = [
    "Dependency",
    "LOCK_FILE_PRECEDENCE",
    "LockFileParser",
    "PARSER_REGISTRY",
    "detect_lock_file",
    "get_parser",
    "parse_lock_file",
]
