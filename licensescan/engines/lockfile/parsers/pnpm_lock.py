"""Parser for pnpm-lock.yaml files."""

from __future__ import annotations

import re

import yaml

from licensescan.constants import PACKAGE_MANAGER_PNPM, PNPM_LOCK_YAML
from licensescan.engines.lockfile.models import Dependency
from licensescan.engines.lockfile.registry import register_parser
from licensescan.exceptions import LockFileParseError

_SCOPED_KEY_RE = re.compile(r"^(@[^/]+/[^@]+)@(.+)$")
_PLAIN_KEY_RE = re.compile(r"^([^@]+)@(.+)$")


def extract_pnpm_package_info(package_key: str) -> tuple[str, str]:
    """Split a ``packages`` key into ``(name, version)``.

    ``/@babel/core@7.20.0`` -> ``("@babel/core", "7.20.0")``
    ``/lodash@4.17.21`` -> ``("lodash", "4.17.21")``
    Keys that match neither form yield ``("", "")``.
    """
    key = package_key.removeprefix("/")

    if key.startswith("@"):
        m = _SCOPED_KEY_RE.match(key)
        if m:
            return m.group(1), m.group(2)

    m = _PLAIN_KEY_RE.match(key)
    if m:
        return m.group(1), m.group(2)

    return "", ""


class PnpmLockParser:
    package_manager = PACKAGE_MANAGER_PNPM
    lock_file = PNPM_LOCK_YAML

    def parse(self, path: str, content: str) -> list[Dependency]:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise LockFileParseError(path, self.package_manager, str(exc)) from exc

        if data is None:
            return []
        if not isinstance(data, dict):
            raise LockFileParseError(path, self.package_manager, "top-level value is not a mapping")

        packages = data.get("packages")
        if not isinstance(packages, dict):
            return []

        deps: list[Dependency] = []
        for package_key in packages:
            name, version = extract_pnpm_package_info(str(package_key))
            if not name:
                continue
            deps.append(Dependency(name=name, version=version))
        return deps


register_parser(PnpmLockParser())
