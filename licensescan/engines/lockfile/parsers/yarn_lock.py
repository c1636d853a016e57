"""Parser for yarn.lock files (classic v1 and berry)."""

from __future__ import annotations

import re

from licensescan.constants import PACKAGE_MANAGER_YARN, YARN_LOCK
from licensescan.engines.lockfile.models import Dependency
from licensescan.engines.lockfile.registry import register_parser

# Header line, e.g.:
#   lodash@^4.17.21:
#   "@babel/core@^7.0.0", "@babel/core@^7.20.0":
#   "react@npm:^18.2.0":
# Only the first descriptor's name is captured.
_HEADER_RE = re.compile(
    r'^"?(@[^/\s"]+/[^@\s"]+|[^@\s"]+)@([^",]*)"?(?:\s*,.*)?:$'
)

# Indented version line: `  version "4.17.21"` (v1) or `  version: 4.17.21` (berry)
_VERSION_RE = re.compile(r'^\s+version:?\s+"?([^"\s]+)"?\s*$')


class YarnLockParser:
    package_manager = PACKAGE_MANAGER_YARN
    lock_file = YARN_LOCK

    def parse(self, path: str, content: str) -> list[Dependency]:
        deps: list[Dependency] = []
        current_name: str | None = None
        current_version = ""

        for line in content.splitlines():
            if not line.strip() or line.lstrip().startswith("#"):
                continue

            header = _HEADER_RE.match(line)
            if header:
                if current_name is not None:
                    deps.append(Dependency(name=current_name, version=current_version))
                current_name = header.group(1)
                current_version = ""
                continue

            if current_name is not None:
                version = _VERSION_RE.match(line)
                if version:
                    current_version = version.group(1)

        if current_name is not None:
            deps.append(Dependency(name=current_name, version=current_version))

        return deps


register_parser(YarnLockParser())
