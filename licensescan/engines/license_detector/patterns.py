"""Ordered text patterns for recognising a license from a LICENSE file."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class LicensePattern:
    license: str
    pattern: re.Pattern[str]
    confidence: float


# Matched against lower-cased file content; the first hit wins, so the
# GPL-3.0 entry must stay ahead of GPL-2.0 and BSD-3 ahead of BSD-2.
LICENSE_PATTERNS: tuple[LicensePattern, ...] = (
    LicensePattern(
        "MIT",
        re.compile(r"mit\s+license|permission\s+is\s+hereby\s+granted.*free\s+of\s+charge"),
        0.9,
    ),
    LicensePattern(
        "Apache-2.0",
        re.compile(
            r"apache\s+license.*version\s+2\.0"
            r"|licensed\s+under\s+the\s+apache\s+license"
            r"|apache\s+license.*version\s+2.*january.*2004"
        ),
        0.9,
    ),
    LicensePattern(
        "GPL-3.0",
        re.compile(r"gnu\s+general\s+public\s+license.*version\s+3|gplv3|version\s+3.*june\s+2007"),
        0.9,
    ),
    LicensePattern(
        "GPL-2.0",
        re.compile(r"gnu\s+general\s+public\s+license.*version\s+2|gplv2"),
        0.9,
    ),
    LicensePattern(
        "BSD-3-Clause",
        re.compile(r"bsd.*3.*clause|redistribution\s+and\s+use.*binary\s+forms.*conditions"),
        0.8,
    ),
    LicensePattern("BSD-2-Clause", re.compile(r"bsd.*2.*clause"), 0.8),
    LicensePattern(
        "ISC",
        re.compile(r"isc\s+license|permission\s+to\s+use.*copy.*modify.*distribute"),
        0.8,
    ),
)

UNMATCHED_CONFIDENCE = 0.2


def match_license_text(text: str) -> tuple[str, float] | None:
    """Return ``(license, confidence)`` for the first pattern found in *text*."""
    content = text.lower()
    for entry in LICENSE_PATTERNS:
        if entry.pattern.search(content):
            return entry.license, entry.confidence
    return None
