"""Analyzer engine — aggregate license risk, conflicts and recommendations."""

from licensescan.engines.analyzer.analyzer import (
    AnalysisResult,
    LicenseAnalyzer,
    analyze,
    calculate_risk_level,
    classify_license,
    detect_conflicts,
)
from licensescan.engines.analyzer.categories import (
    KNOWN_LICENSES,
    KnownLicense,
    LicenseCategory,
    RiskLevel,
)

__all__ = [
    "AnalysisResult",
    "KNOWN_LICENSES",
    "KnownLicense",
    "LicenseAnalyzer",
    "LicenseCategory",
    "RiskLevel",
    "analyze",
    "calculate_risk_level",
    "classify_license",
    "detect_conflicts",
]
