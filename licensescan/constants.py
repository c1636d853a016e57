"""Shared names: directories, files, source tags and package manager ids."""

NODE_MODULES_DIR = "node_modules"
PNPM_STORE_DIR = ".pnpm"
PACKAGE_JSON_FILE = "package.json"

UNKNOWN_LICENSE = "Unknown"

# Evidence source tags attached to every enriched dependency.
SOURCE_PACKAGE_JSON = "package.json"
SOURCE_LICENSE_FILE = "LICENSE file"
SOURCE_NOT_FOUND = "not found"
SOURCE_DETECTION_FAILED = "detection failed"

PACKAGE_LOCK_JSON = "package-lock.json"
YARN_LOCK = "yarn.lock"
PNPM_LOCK_YAML = "pnpm-lock.yaml"

PACKAGE_MANAGER_NPM = "npm"
PACKAGE_MANAGER_YARN = "yarn"
PACKAGE_MANAGER_PNPM = "pnpm"

# Probed in this order; the first regular file wins.
LICENSE_FILE_VARIANTS: tuple[str, ...] = (
    "LICENSE",
    "LICENSE.txt",
    "LICENSE.md",
    "LICENCE",
    "LICENCE.txt",
    "LICENCE.md",
)
