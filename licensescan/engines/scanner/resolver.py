"""Install-path resolution for npm, yarn and pnpm layouts."""

from __future__ import annotations

from licensescan.constants import (
    NODE_MODULES_DIR,
    PACKAGE_MANAGER_PNPM,
    PNPM_STORE_DIR,
)
from licensescan.core.filesystem import FileSystem, is_directory, path_exists
from licensescan.engines.lockfile.models import Dependency


def resolve_package_path(
    fs: FileSystem, root: str, package_manager: str, dep: Dependency
) -> str:
    """Return the directory where *dep* is installed under *root*.

    npm and yarn (and anything unrecognised) use the flat
    ``node_modules/<name>`` layout. pnpm is resolved by
    :func:`resolve_pnpm_path`.
    """
    node_modules = fs.join(root, NODE_MODULES_DIR)
    if package_manager == PACKAGE_MANAGER_PNPM:
        return resolve_pnpm_path(fs, node_modules, dep)
    return fs.join(node_modules, dep.name)


def resolve_pnpm_path(fs: FileSystem, node_modules: str, dep: Dependency) -> str:
    """Locate *dep* inside the pnpm virtual store.

    pnpm installs to ``.pnpm/<name>@<version>/node_modules/<name>``, with
    ``@`` of scoped names sometimes written as ``%40``. Lookup order:

    1. exact ``<name>@<version>`` store entry (plain, then encoded name);
    2. any store entry starting with ``<name>@`` (pnpm appends peer
       qualifiers such as ``_react@18.2.0``);
    3. hoisted ``node_modules/<name>``;
    4. the expected store path, even though it does not exist, so the
       caller can report where it looked.
    """
    store = fs.join(node_modules, PNPM_STORE_DIR)
    encoded_name = dep.name.replace("@", "%40")

    for entry in (f"{dep.name}@{dep.version}", f"{encoded_name}@{dep.version}"):
        candidate = fs.join(store, entry, NODE_MODULES_DIR, dep.name)
        if path_exists(fs, candidate):
            return candidate

    # Store entries flatten the scope separator, e.g. "@babel+core@7.20.0".
    prefixes = (
        dep.name + "@",
        encoded_name + "@",
        dep.name.replace("/", "+") + "@",
    )
    try:
        entries = fs.listdir(store)
    except (OSError, ValueError):
        entries = []
    for entry in entries:
        if not entry.startswith(prefixes):
            continue
        entry_path = fs.join(store, entry)
        if not is_directory(fs, entry_path):
            continue
        candidate = fs.join(entry_path, NODE_MODULES_DIR, dep.name)
        if path_exists(fs, candidate):
            return candidate

    hoisted = fs.join(node_modules, dep.name)
    if path_exists(fs, hoisted):
        return hoisted

    return fs.join(store, f"{dep.name}@{dep.version}", NODE_MODULES_DIR, dep.name)
