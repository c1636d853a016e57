"""Report layer — serializable scan reports (JSON via pydantic, HTML)."""

from licensescan.report.html import render_html
from licensescan.report.schemas import ReportDependency, ReportSummary, ScanReport, build_report

__all__ = ["ReportDependency", "ReportSummary", "ScanReport", "build_report", "render_html"]
