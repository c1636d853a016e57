"""LicenseScanner: lock file -> dependency list -> per-package license."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import structlog

from licensescan.constants import SOURCE_DETECTION_FAILED, UNKNOWN_LICENSE
from licensescan.core.config import ScanSettings
from licensescan.core.filesystem import FileSystem, LocalFileSystem
from licensescan.engines.license_detector.detector import LicenseDetector
from licensescan.engines.lockfile import detect_lock_file, parse_lock_file
from licensescan.engines.lockfile.models import Dependency
from licensescan.engines.scanner.models import EnrichedDependency, ScanResult
from licensescan.engines.scanner.resolver import resolve_package_path

log = structlog.get_logger("licensescan.engine")


class LicenseScanner:
    """Drive lock-file detection, parsing and license detection for one project.

    Every collaborator that touches the disk goes through *fs*, so the whole
    pipeline runs against :class:`licensescan.testing.MemoryFileSystem` in tests.
    """

    def __init__(
        self,
        root: str,
        *,
        fs: FileSystem | None = None,
        detector: LicenseDetector | None = None,
        settings: ScanSettings | None = None,
    ) -> None:
        self._root = root
        self._fs = fs or LocalFileSystem()
        self._detector = detector or LicenseDetector(self._fs)
        self._settings = settings or ScanSettings()

    def scan(self) -> ScanResult:
        """Run the full pipeline.

        Raises :class:`~licensescan.exceptions.LockFileNotFoundError` or
        :class:`~licensescan.exceptions.LockFileParseError`; per-package
        detection problems never abort the scan.
        """
        lock_file, package_manager = detect_lock_file(self._fs, self._root)
        log.info("scanner.lock_file_found", path=lock_file, package_manager=package_manager)

        dependencies = parse_lock_file(self._fs, lock_file, package_manager)

        def enrich_one(dep: Dependency) -> EnrichedDependency:
            return self._enrich(package_manager, dep)

        if self._settings.max_workers > 1 and len(dependencies) > 1:
            with ThreadPoolExecutor(max_workers=self._settings.max_workers) as pool:
                # map() yields in submission order, so lock-file order is kept
                enriched = list(pool.map(enrich_one, dependencies))
        else:
            enriched = [enrich_one(dep) for dep in dependencies]

        log.info(
            "scanner.enriched",
            package_manager=package_manager,
            dependency_count=len(enriched),
        )
        return ScanResult(
            root=self._root,
            lock_file=lock_file,
            package_manager=package_manager,
            dependencies=enriched,
        )

    def _enrich(self, package_manager: str, dep: Dependency) -> EnrichedDependency:
        package_path: str | None = None
        try:
            package_path = resolve_package_path(self._fs, self._root, package_manager, dep)
            info = self._detector.detect(package_path)
        except Exception:
            log.warning(
                "scanner.detection_failed",
                package=dep.name,
                version=dep.version,
                path=package_path,
                exc_info=True,
            )
            return EnrichedDependency.from_dependency(
                dep, UNKNOWN_LICENSE, 0.0, SOURCE_DETECTION_FAILED
            )

        log.debug(
            "scanner.detected",
            package=dep.name,
            license=info.license,
            source=info.source,
            confidence=info.confidence,
        )
        return EnrichedDependency.from_dependency(dep, info.license, info.confidence, info.source)


def scan(
    root: str,
    *,
    fs: FileSystem | None = None,
    settings: ScanSettings | None = None,
) -> ScanResult:
    """Scan a local project directory for dependency licenses."""
    return LicenseScanner(root, fs=fs, settings=settings).scan()
