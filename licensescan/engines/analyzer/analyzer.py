"""License compatibility and risk analysis over a dependency list."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Protocol

from licensescan.constants import UNKNOWN_LICENSE
from licensescan.core.config import DEFAULT_LOW_CONFIDENCE
from licensescan.engines.analyzer.categories import (
    LGPL_LICENSES,
    MPL_LICENSES,
    LicenseCategory,
    RiskLevel,
    lookup_license,
)

CONFLICT_AGPL = "AGPL-3.0 requires source disclosure for network use - ensure compliance"
CONFLICT_GPL2_APACHE = "GPL-2.0 and Apache-2.0 licenses are incompatible"
CONFLICT_GPL2_GPL3 = "GPL-2.0 and GPL-3.0 detected - verify 'or later' clauses for compatibility"

RECOMMEND_CONFLICTS = (
    "⚠️  License conflicts detected - review dependencies for compatibility issues"
)
RECOMMEND_LEGAL_REVIEW = "📋 Consider legal review if distributing proprietary software"
RECOMMEND_CONTACT_MAINTAINERS = (
    "🔍 Check package repositories or contact maintainers for license clarification"
)
RECOMMEND_ALL_CLEAR = (
    "✓ All licenses are permissive and compatible - no compliance issues detected"
)


class LicensedDependency(Protocol):
    """Anything carrying a license id and a detection confidence."""

    name: str
    version: str
    license: str
    confidence: float


@dataclass(frozen=True)
class AnalysisResult:
    risk_level: RiskLevel
    conflicts: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    license_counts: dict[str, int] = field(default_factory=dict)


@dataclass
class _Tally:
    permissive: int = 0
    weak_copyleft: int = 0
    strong_copyleft: int = 0
    unknown: int = 0
    low_confidence: int = 0
    has_lgpl: bool = False
    has_mpl: bool = False


def classify_license(license: str) -> str:
    """Collapse common spellings onto a canonical id by substring checks.

    ``apache`` anywhere wins; ``agpl`` is checked before ``lgpl`` before a
    bare ``gpl`` since each contains the next, and the GPL family version is
    taken from a ``3`` or ``2`` digit. Anything else is returned trimmed.
    Idempotent.
    """
    normalized = license.strip()
    lower = normalized.lower()

    if "apache" in lower:
        return "Apache-2.0"
    if "agpl" in lower:
        return "AGPL-3.0"
    if "lgpl" in lower:
        if "3" in lower:
            return "LGPL-3.0"
        if "2" in lower:
            return "LGPL-2.1"
    if "gpl" in lower:
        if "3" in lower:
            return "GPL-3.0"
        if "2" in lower:
            return "GPL-2.0"
    return normalized


class LicenseAnalyzer:
    """Stateless analyzer; one instance can serve any number of calls."""

    def __init__(self, low_confidence_threshold: float = DEFAULT_LOW_CONFIDENCE) -> None:
        self._low_confidence_threshold = low_confidence_threshold

    def analyze(self, dependencies: Iterable[LicensedDependency]) -> AnalysisResult:
        counts: Counter[str] = Counter()
        tally = _Tally()

        for dep in dependencies:
            license = classify_license(dep.license)
            counts[license] += 1

            known = lookup_license(license)
            if known is None:
                if license != UNKNOWN_LICENSE:
                    tally.unknown += 1
                continue

            if dep.confidence < self._low_confidence_threshold:
                tally.low_confidence += 1

            if known.category is LicenseCategory.PERMISSIVE:
                tally.permissive += 1
            elif known.category is LicenseCategory.WEAK_COPYLEFT:
                tally.weak_copyleft += 1
                tally.has_lgpl = tally.has_lgpl or license in LGPL_LICENSES
                tally.has_mpl = tally.has_mpl or license in MPL_LICENSES
            elif known.category is LicenseCategory.STRONG_COPYLEFT:
                tally.strong_copyleft += 1

        # Packages explicitly detected as "Unknown" take over the tally.
        if counts[UNKNOWN_LICENSE] > 0:
            tally.unknown = counts[UNKNOWN_LICENSE]

        conflicts = detect_conflicts(counts)
        return AnalysisResult(
            risk_level=calculate_risk_level(
                tally.strong_copyleft, tally.weak_copyleft, tally.unknown, tally.low_confidence
            ),
            conflicts=conflicts,
            recommendations=_recommendations(tally, bool(conflicts)),
            license_counts=dict(counts),
        )


def calculate_risk_level(
    strong_copyleft: int, weak_copyleft: int, unknown: int, low_confidence: int
) -> RiskLevel:
    if strong_copyleft > 0 or unknown > 5:
        return RiskLevel.HIGH
    if weak_copyleft > 0 or unknown > 0 or low_confidence > 3:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def detect_conflicts(license_counts: Counter[str] | dict[str, int]) -> list[str]:
    """Flag incompatible combinations; checks are independent and ordered."""
    has_gpl2 = license_counts.get("GPL-2.0", 0) > 0
    has_gpl3 = license_counts.get("GPL-3.0", 0) > 0
    has_agpl = license_counts.get("AGPL-3.0", 0) > 0
    has_apache = (
        license_counts.get("Apache-2.0", 0) > 0 or license_counts.get("Apache 2.0", 0) > 0
    )

    conflicts: list[str] = []
    if has_agpl:
        conflicts.append(CONFLICT_AGPL)
    if has_gpl2 and has_apache:
        conflicts.append(CONFLICT_GPL2_APACHE)
    if has_gpl2 and has_gpl3:
        conflicts.append(CONFLICT_GPL2_GPL3)
    return conflicts


def _recommendations(tally: _Tally, has_conflicts: bool) -> list[str]:
    recs: list[str] = []

    if has_conflicts:
        recs.append(RECOMMEND_CONFLICTS)

    if tally.strong_copyleft > 0:
        recs.append(
            f"⚠️  Found {tally.strong_copyleft} GPL/AGPL dependencies"
            " - ensure compliance with copyleft requirements"
        )
        recs.append(RECOMMEND_LEGAL_REVIEW)

    if tally.weak_copyleft > 0 and (tally.has_lgpl or tally.has_mpl):
        recs.append(
            f"ℹ️  Found {tally.weak_copyleft} LGPL/MPL dependencies"
            " - these allow proprietary use with conditions"
        )

    if tally.unknown > 0:
        recs.append(
            f"⚠️  {tally.unknown} dependencies have unknown licenses - manual review required"
        )
        recs.append(RECOMMEND_CONTACT_MAINTAINERS)

    if tally.low_confidence > 0:
        recs.append(
            f"⚠️  {tally.low_confidence} dependencies have low-confidence license detection"
            " - verify manually"
        )

    if not recs:
        recs.append(RECOMMEND_ALL_CLEAR)

    return recs


def analyze(
    dependencies: Iterable[LicensedDependency],
    *,
    low_confidence_threshold: float = DEFAULT_LOW_CONFIDENCE,
) -> AnalysisResult:
    """Analyze *dependencies* with a throwaway :class:`LicenseAnalyzer`."""
    return LicenseAnalyzer(low_confidence_threshold).analyze(dependencies)
