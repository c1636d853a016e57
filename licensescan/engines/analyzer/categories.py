"""Static license category table."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType


class LicenseCategory(enum.Enum):
    PERMISSIVE = "permissive"
    WEAK_COPYLEFT = "weak_copyleft"
    STRONG_COPYLEFT = "strong_copyleft"
    PROPRIETARY = "proprietary"
    UNKNOWN = "unknown"


class RiskLevel(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class KnownLicense:
    name: str
    category: LicenseCategory
    risk: RiskLevel


_C = LicenseCategory
_R = RiskLevel

# Keyed by the id the analyzer sees after classification. "Apache 2.0" is
# kept as an alias so raw spellings still resolve.
_TABLE: tuple[tuple[str, KnownLicense], ...] = (
    ("MIT", KnownLicense("MIT", _C.PERMISSIVE, _R.LOW)),
    ("ISC", KnownLicense("ISC", _C.PERMISSIVE, _R.LOW)),
    ("BSD-2-Clause", KnownLicense("BSD-2-Clause", _C.PERMISSIVE, _R.LOW)),
    ("BSD-3-Clause", KnownLicense("BSD-3-Clause", _C.PERMISSIVE, _R.LOW)),
    ("Apache-2.0", KnownLicense("Apache-2.0", _C.PERMISSIVE, _R.LOW)),
    ("Apache 2.0", KnownLicense("Apache-2.0", _C.PERMISSIVE, _R.LOW)),
    ("MPL-2.0", KnownLicense("MPL-2.0", _C.WEAK_COPYLEFT, _R.MEDIUM)),
    ("LGPL-2.1", KnownLicense("LGPL-2.1", _C.WEAK_COPYLEFT, _R.MEDIUM)),
    ("LGPL-3.0", KnownLicense("LGPL-3.0", _C.WEAK_COPYLEFT, _R.MEDIUM)),
    ("GPL-2.0", KnownLicense("GPL-2.0", _C.STRONG_COPYLEFT, _R.HIGH)),
    ("GPL-3.0", KnownLicense("GPL-3.0", _C.STRONG_COPYLEFT, _R.HIGH)),
    ("AGPL-3.0", KnownLicense("AGPL-3.0", _C.STRONG_COPYLEFT, _R.HIGH)),
    ("UNLICENSED", KnownLicense("UNLICENSED", _C.PROPRIETARY, _R.HIGH)),
)

KNOWN_LICENSES: MappingProxyType[str, KnownLicense] = MappingProxyType(dict(_TABLE))

LGPL_LICENSES = frozenset({"LGPL-2.1", "LGPL-3.0"})
MPL_LICENSES = frozenset({"MPL-2.0"})


def lookup_license(license_id: str) -> KnownLicense | None:
    return KNOWN_LICENSES.get(license_id)
