"""Lock-file parsers — auto-registered on import."""

from licensescan.engines.lockfile.parsers import (
    npm_lock,  # noqa: F401
    pnpm_lock,  # noqa: F401
    yarn_lock,  # noqa: F401
)
