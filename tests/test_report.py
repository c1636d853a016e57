"""Tests for report building, JSON serialization and HTML rendering."""

from __future__ import annotations

import json

from licensescan.engines.analyzer import analyze
from licensescan.engines.scanner import EnrichedDependency, ScanResult
from licensescan.report import ReportDependency, build_report, render_html


def _result(*deps: EnrichedDependency) -> ScanResult:
    return ScanResult(
        root="proj",
        lock_file="proj/package-lock.json",
        package_manager="npm",
        dependencies=list(deps),
    )


LODASH = EnrichedDependency("lodash", "4.17.21", "MIT", 1.0, "package.json")
GPL_LIB = EnrichedDependency("some-gpl-lib", "2.0.0", "GPL-3.0", 0.9, "LICENSE file")
MYSTERY = EnrichedDependency("mystery", "0.0.1", "Unknown", 0.0, "not found")


# ── build_report ─────────────────────────────────────────────────────────


class TestBuildReport:
    def test_summary(self):
        result = _result(LODASH, GPL_LIB, MYSTERY)
        report = build_report(result, analyze(result.dependencies))

        assert report.summary.total_dependencies == 3
        assert report.summary.unique_licenses == ["GPL-3.0", "MIT"]
        assert report.summary.risk_level == "high"
        assert report.timestamp is None

    def test_dependencies_keep_order(self):
        result = _result(MYSTERY, LODASH)
        report = build_report(result, analyze(result.dependencies))
        assert [d.name for d in report.dependencies] == ["mystery", "lodash"]

    def test_blank_license_becomes_unknown(self):
        assert ReportDependency(
            name="x", version="1", license="  ", confidence=0.0, source="not found"
        ).license == "Unknown"
        assert ReportDependency(
            name="x", version="1", license=None, confidence=0.0, source="not found"
        ).license == "Unknown"


# ── JSON ─────────────────────────────────────────────────────────────────


class TestToJson:
    def test_camel_case_shape(self):
        result = _result(LODASH)
        data = json.loads(build_report(result, analyze(result.dependencies)).to_json())

        assert data == {
            "summary": {
                "totalDependencies": 1,
                "uniqueLicenses": ["MIT"],
                "riskLevel": "low",
                "conflicts": [],
                "recommendations": [
                    "✓ All licenses are permissive and compatible - no compliance issues detected"
                ],
            },
            "dependencies": [
                {
                    "name": "lodash",
                    "version": "4.17.21",
                    "license": "MIT",
                    "confidence": 1.0,
                    "source": "package.json",
                }
            ],
        }

    def test_without_summary(self):
        result = _result(LODASH)
        data = json.loads(
            build_report(result, analyze(result.dependencies)).to_json(include_summary=False)
        )
        assert list(data) == ["dependencies"]

    def test_timestamp_included_when_set(self):
        result = _result()
        report = build_report(result, analyze([]), timestamp="October 18, 2026 at 10:00:00")
        assert json.loads(report.to_json())["timestamp"] == "October 18, 2026 at 10:00:00"

    def test_non_ascii_recommendations_survive(self):
        result = _result(GPL_LIB)
        data = json.loads(build_report(result, analyze(result.dependencies)).to_json())
        assert data["summary"]["recommendations"][0].startswith("⚠️")


# ── HTML ─────────────────────────────────────────────────────────────────


class TestRenderHtml:
    def test_contains_dependency_table(self):
        result = _result(LODASH, GPL_LIB)
        html = render_html(build_report(result, analyze(result.dependencies), timestamp="now"))

        assert html.startswith("<!DOCTYPE html>")
        assert 'id="dependencyTable"' in html
        assert "<td" in html and "lodash" in html and "some-gpl-lib" in html
        assert "High risk" in html
        assert "Generated now" in html
        assert "90%" in html

    def test_escapes_untrusted_text(self):
        evil = EnrichedDependency("<script>", "1.0.0", 'a"b&c', 1.0, "package.json")
        html = render_html(build_report(_result(evil), analyze([evil])))

        assert "><script></td>" not in html
        assert ">&lt;script&gt;</td>" in html
        assert "a&quot;b&amp;c" in html

    def test_empty_project(self):
        html = render_html(build_report(_result(), analyze([])))

        assert "No dependencies found." in html
        assert "No license conflicts detected." in html
        assert 'id="dependencyTable"' not in html
        assert "<script>" not in html

    def test_rows_sorted_by_name(self):
        deps = [
            EnrichedDependency("zod", "3.0.0", "MIT", 1.0, "package.json"),
            EnrichedDependency("Axios", "1.0.0", "MIT", 1.0, "package.json"),
            EnrichedDependency("lodash", "4.17.21", "MIT", 1.0, "package.json"),
        ]
        html = render_html(build_report(_result(*deps), analyze(deps)))

        assert html.index(">Axios<") < html.index(">lodash<") < html.index(">zod<")

    def test_sortable_headers(self):
        html = render_html(build_report(_result(LODASH), analyze([LODASH])))

        assert 'class="sortable" data-column="0"' in html
        assert 'class="sortable" data-column="3"' in html
        assert "<script>" in html
