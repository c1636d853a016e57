"""Parser for npm package-lock.json files (lockfile v1, v2 and v3)."""

from __future__ import annotations

import json
from typing import Any

from licensescan.constants import NODE_MODULES_DIR, PACKAGE_LOCK_JSON, PACKAGE_MANAGER_NPM
from licensescan.engines.lockfile.models import Dependency
from licensescan.engines.lockfile.registry import register_parser
from licensescan.exceptions import LockFileParseError

_NODE_MODULES_PREFIX = NODE_MODULES_DIR + "/"


def extract_package_name(package_path: str) -> str:
    """Derive a package name from a ``packages`` key.

    ``node_modules/lodash`` -> ``lodash``
    ``node_modules/@types/node/lib/index.d.ts`` -> ``@types/node``
    Keys outside ``node_modules/`` yield ``""``.
    """
    if not package_path.startswith(_NODE_MODULES_PREFIX):
        return ""

    name = package_path[len(_NODE_MODULES_PREFIX):]
    parts = name.split("/")
    if name.startswith("@") and len(parts) >= 2:
        return parts[0] + "/" + parts[1]
    return parts[0]


def _string_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def flatten_legacy_dependencies(deps: dict[str, Any]) -> list[Dependency]:
    """Depth-first flattening of the v1 ``dependencies`` tree.

    Every node at every depth becomes its own entry, parent before children;
    a package nested under several parents is listed once per occurrence.
    """
    result: list[Dependency] = []
    for name, node in deps.items():
        if not isinstance(node, dict):
            continue
        result.append(Dependency(name=name, version=_string_or_none(node.get("version")) or ""))
        nested = node.get("dependencies")
        if isinstance(nested, dict):
            result.extend(flatten_legacy_dependencies(nested))
    return result


class NpmLockParser:
    package_manager = PACKAGE_MANAGER_NPM
    lock_file = PACKAGE_LOCK_JSON

    def parse(self, path: str, content: str) -> list[Dependency]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise LockFileParseError(path, self.package_manager, str(exc)) from exc
        if not isinstance(data, dict):
            raise LockFileParseError(path, self.package_manager, "top-level value is not an object")

        deps: list[Dependency] = []

        packages = data.get("packages")
        if isinstance(packages, dict):
            for package_path, pkg in packages.items():
                # "" is the root project itself
                if package_path == "" or not isinstance(pkg, dict):
                    continue
                name = extract_package_name(package_path)
                if not name:
                    continue
                deps.append(
                    Dependency(
                        name=name,
                        version=_string_or_none(pkg.get("version")) or "",
                        license=_string_or_none(pkg.get("license")),
                    )
                )

        if not deps:
            legacy = data.get("dependencies")
            if isinstance(legacy, dict):
                deps = flatten_legacy_dependencies(legacy)

        return deps


register_parser(NpmLockParser())
