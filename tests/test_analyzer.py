"""Tests for license classification, risk levels, conflicts and recommendations."""

from __future__ import annotations

import pytest

from licensescan.engines.analyzer import (
    KNOWN_LICENSES,
    LicenseAnalyzer,
    LicenseCategory,
    RiskLevel,
    analyze,
    calculate_risk_level,
    classify_license,
    detect_conflicts,
)
from licensescan.engines.analyzer.analyzer import (
    CONFLICT_AGPL,
    CONFLICT_GPL2_APACHE,
    CONFLICT_GPL2_GPL3,
    RECOMMEND_ALL_CLEAR,
    RECOMMEND_CONFLICTS,
    RECOMMEND_CONTACT_MAINTAINERS,
    RECOMMEND_LEGAL_REVIEW,
)
from licensescan.engines.scanner import EnrichedDependency


def _dep(license: str, confidence: float = 1.0, name: str = "pkg") -> EnrichedDependency:
    return EnrichedDependency(name, "1.0.0", license, confidence, "package.json")


# ── classify_license ─────────────────────────────────────────────────────


class TestClassifyLicense:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Apache 2.0", "Apache-2.0"),
            ("apache-2.0", "Apache-2.0"),
            ("Apache License, Version 2.0", "Apache-2.0"),
            ("AGPL-3.0-only", "AGPL-3.0"),
            ("LGPL-3.0-or-later", "LGPL-3.0"),
            ("LGPL-2.1", "LGPL-2.1"),
            ("GPL-3.0+", "GPL-3.0"),
            ("GPLv2", "GPL-2.0"),
            ("  MIT  ", "MIT"),
            ("Unknown", "Unknown"),
            ("(MIT OR Apache-2.0)", "Apache-2.0"),
        ],
    )
    def test_classification(self, raw, expected):
        assert classify_license(raw) == expected

    def test_unversioned_gpl_kept(self):
        assert classify_license("GPL") == "GPL"
        assert classify_license("LGPL") == "LGPL"

    @pytest.mark.parametrize(
        "raw", ["Apache 2.0", "AGPL-3.0", "lgpl-2.1", "GPLv3", "MIT", " BSD-3-Clause ", "WTFPL"]
    )
    def test_idempotent(self, raw):
        once = classify_license(raw)
        assert classify_license(once) == once


# ── Category table ───────────────────────────────────────────────────────


class TestKnownLicenses:
    @pytest.mark.parametrize(
        "license,category,risk",
        [
            ("MIT", LicenseCategory.PERMISSIVE, RiskLevel.LOW),
            ("Apache 2.0", LicenseCategory.PERMISSIVE, RiskLevel.LOW),
            ("MPL-2.0", LicenseCategory.WEAK_COPYLEFT, RiskLevel.MEDIUM),
            ("LGPL-3.0", LicenseCategory.WEAK_COPYLEFT, RiskLevel.MEDIUM),
            ("AGPL-3.0", LicenseCategory.STRONG_COPYLEFT, RiskLevel.HIGH),
            ("UNLICENSED", LicenseCategory.PROPRIETARY, RiskLevel.HIGH),
        ],
    )
    def test_entries(self, license, category, risk):
        entry = KNOWN_LICENSES[license]
        assert (entry.category, entry.risk) == (category, risk)

    def test_read_only(self):
        with pytest.raises(TypeError):
            KNOWN_LICENSES["WTFPL"] = KNOWN_LICENSES["MIT"]  # type: ignore[index]


# ── Risk level ───────────────────────────────────────────────────────────


class TestCalculateRiskLevel:
    @pytest.mark.parametrize(
        "strong,weak,unknown,low,expected",
        [
            (0, 0, 0, 0, RiskLevel.LOW),
            (0, 0, 0, 3, RiskLevel.LOW),
            (0, 0, 0, 4, RiskLevel.MEDIUM),
            (0, 1, 0, 0, RiskLevel.MEDIUM),
            (0, 0, 1, 0, RiskLevel.MEDIUM),
            (0, 0, 5, 0, RiskLevel.MEDIUM),
            (0, 0, 6, 0, RiskLevel.HIGH),
            (1, 0, 0, 0, RiskLevel.HIGH),
        ],
    )
    def test_thresholds(self, strong, weak, unknown, low, expected):
        assert calculate_risk_level(strong, weak, unknown, low) is expected


# ── Conflicts ────────────────────────────────────────────────────────────


class TestDetectConflicts:
    def test_none(self):
        assert detect_conflicts({"MIT": 3, "Apache-2.0": 1}) == []

    def test_gpl2_apache(self):
        assert detect_conflicts({"GPL-2.0": 1, "Apache-2.0": 1}) == [CONFLICT_GPL2_APACHE]

    def test_gpl2_apache_alias(self):
        assert detect_conflicts({"GPL-2.0": 1, "Apache 2.0": 1}) == [CONFLICT_GPL2_APACHE]

    def test_all_in_order(self):
        counts = {"GPL-2.0": 1, "GPL-3.0": 1, "AGPL-3.0": 1, "Apache-2.0": 1}
        assert detect_conflicts(counts) == [
            CONFLICT_AGPL,
            CONFLICT_GPL2_APACHE,
            CONFLICT_GPL2_GPL3,
        ]

    def test_zero_counts_ignored(self):
        assert detect_conflicts({"GPL-2.0": 0, "Apache-2.0": 2}) == []


# ── LicenseAnalyzer ──────────────────────────────────────────────────────


class TestLicenseAnalyzer:
    def test_all_permissive(self):
        result = analyze([_dep("MIT"), _dep("ISC"), _dep("Apache 2.0"), _dep("BSD-3-Clause")])

        assert result.risk_level is RiskLevel.LOW
        assert result.conflicts == []
        assert result.recommendations == [RECOMMEND_ALL_CLEAR]

    def test_empty_input(self):
        result = analyze([])

        assert result.risk_level is RiskLevel.LOW
        assert result.license_counts == {}
        assert result.recommendations == [RECOMMEND_ALL_CLEAR]

    def test_strong_copyleft(self):
        result = analyze([_dep("MIT"), _dep("GPL-3.0")])

        assert result.risk_level is RiskLevel.HIGH
        assert result.recommendations == [
            "⚠️  Found 1 GPL/AGPL dependencies - ensure compliance with copyleft requirements",
            RECOMMEND_LEGAL_REVIEW,
        ]

    def test_gpl2_apache_conflict(self):
        result = analyze([_dep("GPL-2.0"), _dep("Apache-2.0")])

        assert result.conflicts == [CONFLICT_GPL2_APACHE]
        assert result.recommendations[0] == RECOMMEND_CONFLICTS
        assert RECOMMEND_ALL_CLEAR not in result.recommendations

    def test_agpl_network_use(self):
        result = analyze([_dep("AGPL-3.0-or-later")])

        assert result.risk_level is RiskLevel.HIGH
        assert result.conflicts == [CONFLICT_AGPL]
        assert "network use" in result.conflicts[0]

    def test_gpl_version_mix(self):
        result = analyze([_dep("GPL-2.0-only"), _dep("GPL-3.0-only")])
        assert CONFLICT_GPL2_GPL3 in result.conflicts

    def test_weak_copyleft(self):
        result = analyze([_dep("LGPL-2.1"), _dep("MPL-2.0"), _dep("MIT")])

        assert result.risk_level is RiskLevel.MEDIUM
        assert result.recommendations == [
            "ℹ️  Found 2 LGPL/MPL dependencies - these allow proprietary use with conditions"
        ]

    def test_unknown_licenses(self):
        result = analyze([_dep("Unknown", 0.0), _dep("Unknown", 0.0), _dep("MIT")])

        assert result.risk_level is RiskLevel.MEDIUM
        assert result.recommendations == [
            "⚠️  2 dependencies have unknown licenses - manual review required",
            RECOMMEND_CONTACT_MAINTAINERS,
        ]

    def test_unrecognised_license_counts_as_unknown(self):
        result = analyze([_dep("WTFPL"), _dep("MIT")])

        assert result.risk_level is RiskLevel.MEDIUM
        assert result.recommendations[0].startswith("⚠️  1 dependencies have unknown licenses")

    def test_explicit_unknown_bucket_replaces_unrecognised_tally(self):
        result = analyze([_dep("WTFPL"), _dep("CC0-1.0"), _dep("Unknown", 0.0)])
        assert result.recommendations[0].startswith("⚠️  1 dependencies have unknown licenses")

    def test_many_unknowns_raise_risk(self):
        result = analyze([_dep("Unknown", 0.0) for _ in range(6)])
        assert result.risk_level is RiskLevel.HIGH

    def test_low_confidence(self):
        deps = [_dep("MIT", 0.2, name=f"p{i}") for i in range(4)]

        result = analyze(deps)

        assert result.risk_level is RiskLevel.MEDIUM
        assert result.recommendations == [
            "⚠️  4 dependencies have low-confidence license detection - verify manually"
        ]

    def test_low_confidence_below_threshold_only(self):
        result = analyze([_dep("MIT", 0.5), _dep("MIT", 0.9)])
        assert result.recommendations == [RECOMMEND_ALL_CLEAR]

    def test_custom_threshold(self):
        result = LicenseAnalyzer(low_confidence_threshold=0.95).analyze([_dep("MIT", 0.9)])
        assert result.recommendations == [
            "⚠️  1 dependencies have low-confidence license detection - verify manually"
        ]

    def test_license_counts_use_classified_ids(self):
        result = analyze([_dep("MIT"), _dep("MIT"), _dep("Apache 2.0"), _dep("GPLv3")])
        assert result.license_counts == {"MIT": 2, "Apache-2.0": 1, "GPL-3.0": 1}

    def test_counts_sum_to_input_length(self):
        deps = [_dep(lic) for lic in ("MIT", "Unknown", "WTFPL", "GPL-2.0", "ISC", "MIT")]
        assert sum(analyze(deps).license_counts.values()) == len(deps)

    def test_adding_copyleft_never_lowers_risk(self):
        order = [RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH]
        base = [_dep("MIT"), _dep("LGPL-3.0")]

        before = analyze(base).risk_level
        after = analyze([*base, _dep("GPL-3.0")]).risk_level

        assert order.index(after) >= order.index(before)

    def test_accepts_generator(self):
        result = analyze(_dep(lic) for lic in ("MIT", "ISC"))
        assert result.license_counts == {"MIT": 1, "ISC": 1}

    def test_mixed_project(self):
        deps = [
            EnrichedDependency("lodash", "4.17.21", "MIT", 1.0, "package.json"),
            EnrichedDependency("some-gpl-lib", "2.0.0", "GPL-3.0", 0.9, "LICENSE file"),
        ]

        result = analyze(deps)

        assert result.risk_level is RiskLevel.HIGH
        assert result.conflicts == []
        assert result.license_counts == {"MIT": 1, "GPL-3.0": 1}
        assert any("1 GPL/AGPL" in rec for rec in result.recommendations)
