"""Determine a package's license from what is on disk."""

from __future__ import annotations

import json

import structlog

from licensescan.constants import (
    LICENSE_FILE_VARIANTS,
    PACKAGE_JSON_FILE,
    SOURCE_LICENSE_FILE,
    SOURCE_NOT_FOUND,
    SOURCE_PACKAGE_JSON,
    UNKNOWN_LICENSE,
)
from licensescan.core.filesystem import FileSystem, LocalFileSystem, is_regular_file, read_bytes
from licensescan.engines.license_detector.models import LicenseInfo
from licensescan.engines.license_detector.normalize import extract_license_field
from licensescan.engines.license_detector.patterns import (
    UNMATCHED_CONFIDENCE,
    match_license_text,
)

log = structlog.get_logger("licensescan.engine")


class LicenseDetector:
    """Two-tier detection: package.json ``license`` first, then LICENSE files.

    Missing or unreadable sources are normal and fall through; the detector
    never raises for file problems and ends at Unknown/0.0/"not found".
    """

    def __init__(self, fs: FileSystem | None = None) -> None:
        self._fs = fs or LocalFileSystem()

    def detect(self, package_dir: str) -> LicenseInfo:
        info = self._from_package_json(package_dir)
        if info is not None:
            return info

        info = self._from_license_file(package_dir)
        if info is not None:
            return info

        return LicenseInfo(license=UNKNOWN_LICENSE, confidence=0.0, source=SOURCE_NOT_FOUND)

    def _from_package_json(self, package_dir: str) -> LicenseInfo | None:
        path = self._fs.join(package_dir, PACKAGE_JSON_FILE)
        try:
            data = json.loads(read_bytes(self._fs, path).decode("utf-8-sig"))
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            log.debug("detector.package_json_unreadable", path=path, error=str(exc))
            return None

        if not isinstance(data, dict):
            return None

        license = extract_license_field(data.get("license"))
        if not license:
            return None
        return LicenseInfo(license=license, confidence=1.0, source=SOURCE_PACKAGE_JSON)

    def _from_license_file(self, package_dir: str) -> LicenseInfo | None:
        for filename in LICENSE_FILE_VARIANTS:
            path = self._fs.join(package_dir, filename)
            if not is_regular_file(self._fs, path):
                continue

            try:
                text = read_bytes(self._fs, path).decode("utf-8", errors="replace")
            except (OSError, ValueError) as exc:
                log.debug("detector.license_file_unreadable", path=path, error=str(exc))
                text = ""

            matched = match_license_text(text)
            if matched is None:
                return LicenseInfo(
                    license=UNKNOWN_LICENSE,
                    confidence=UNMATCHED_CONFIDENCE,
                    source=SOURCE_LICENSE_FILE,
                )
            license, confidence = matched
            return LicenseInfo(license=license, confidence=confidence, source=SOURCE_LICENSE_FILE)

        return None
