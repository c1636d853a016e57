"""Shared pytest fixtures for licensescan tests."""

import json

import pytest

from licensescan.testing import MemoryFileSystem

ROOT = "proj"


@pytest.fixture
def memfs():
    return MemoryFileSystem()


@pytest.fixture
def add_package(memfs):
    """Install a fake package under ``proj/node_modules/<name>``.

    ``license`` goes into package.json; ``license_text`` into a LICENSE file.
    """

    def _add(name, *, license=None, license_text=None, license_file="LICENSE", base=None):
        pkg_dir = base or f"{ROOT}/node_modules/{name}"
        memfs.add_dir(pkg_dir)
        if license is not None:
            memfs.add_file(f"{pkg_dir}/package.json", json.dumps({"name": name, "license": license}))
        if license_text is not None:
            memfs.add_file(f"{pkg_dir}/{license_file}", license_text)
        return pkg_dir

    return _add
