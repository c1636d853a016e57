"""Data models for the scanner engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from licensescan.engines.lockfile.models import Dependency


@dataclass(frozen=True)
class EnrichedDependency:
    """A lock-file dependency with its detected license attached."""

    name: str
    version: str
    license: str
    confidence: float
    source: str

    @classmethod
    def from_dependency(
        cls, dep: Dependency, license: str, confidence: float, source: str
    ) -> EnrichedDependency:
        return cls(
            name=dep.name,
            version=dep.version,
            license=license,
            confidence=confidence,
            source=source,
        )


@dataclass(frozen=True)
class ScanResult:
    """Result of one scan: the lock file used and every enriched dependency."""

    root: str
    lock_file: str
    package_manager: str
    dependencies: list[EnrichedDependency] = field(default_factory=list)
