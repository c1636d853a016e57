"""Declared-license normalization shared by package.json and lock-file values."""

from __future__ import annotations

from typing import Any

# Lower-cased, hyphenated spelling -> canonical id. Checked as an exact match.
_SYNONYMS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("mit",), "MIT"),
    (("apache-2.0", "apache2", "apache-v2"), "Apache-2.0"),
    (("gpl-3.0", "gplv3", "gpl3"), "GPL-3.0"),
    (("gpl-2.0", "gplv2", "gpl2"), "GPL-2.0"),
    (("bsd-3-clause", "bsd3"), "BSD-3-Clause"),
    (("bsd-2-clause", "bsd2"), "BSD-2-Clause"),
    (("isc",), "ISC"),
)

_SYNONYM_LOOKUP: dict[str, str] = {
    spelling: canonical for spellings, canonical in _SYNONYMS for spelling in spellings
}


def normalize_license(license: str) -> str:
    """Trim, hyphenate spaces and map known spellings to their canonical id.

    Unrecognised values come back with only the hyphenation applied;
    blank input gives ``""``. The function is idempotent.
    """
    value = license.strip()
    if not value:
        return ""
    value = value.replace(" ", "-")
    return _SYNONYM_LOOKUP.get(value.lower(), value)


def extract_license_field(field: Any) -> str:
    """Pull a normalized license id out of a package.json ``license`` value.

    Accepts a string, an object with a ``type`` string (the deprecated
    ``{"type": "MIT", "url": ...}`` form) or an array whose first element is
    handled recursively. Anything else yields ``""``.
    """
    if isinstance(field, str):
        return normalize_license(field)
    if isinstance(field, dict):
        license_type = field.get("type")
        if isinstance(license_type, str):
            return normalize_license(license_type)
        return ""
    if isinstance(field, list) and field:
        return extract_license_field(field[0])
    return ""
