"""License detector engine — per-package license, confidence and evidence source."""

from licensescan.engines.license_detector.detector import LicenseDetector
from licensescan.engines.license_detector.models import LicenseInfo
from licensescan.engines.license_detector.normalize import (
    extract_license_field,
    normalize_license,
)
from licensescan.engines.license_detector.patterns import LICENSE_PATTERNS, match_license_text

__all__ = [
    "LICENSE_PATTERNS",
    "LicenseDetector",
    "LicenseInfo",
    "extract_license_field",
    "match_license_text",
    "normalize_license",
]
