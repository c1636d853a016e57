"""Report schemas: the JSON shape emitted by ``license-scan``."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from licensescan.constants import UNKNOWN_LICENSE
from licensescan.engines.analyzer import AnalysisResult
from licensescan.engines.scanner import ScanResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ReportDependency(_CamelModel):
    name: str
    version: str
    license: str
    confidence: float
    source: str

    @field_validator("license", mode="before")
    @classmethod
    def _blank_is_unknown(cls, v: str | None) -> str:
        if v is None or (isinstance(v, str) and not v.strip()):
            return UNKNOWN_LICENSE
        return v


class ReportSummary(_CamelModel):
    total_dependencies: int
    unique_licenses: list[str]
    risk_level: str
    conflicts: list[str]
    recommendations: list[str]


class ScanReport(_CamelModel):
    summary: ReportSummary
    dependencies: list[ReportDependency]
    timestamp: str | None = None

    def to_json(self, *, include_summary: bool = True) -> str:
        exclude = None if include_summary else {"summary"}
        return self.model_dump_json(by_alias=True, indent=2, exclude_none=True, exclude=exclude)


def build_report(
    result: ScanResult,
    analysis: AnalysisResult,
    timestamp: str | None = None,
) -> ScanReport:
    """Combine a scan and its analysis into one serializable report."""
    dependencies = [ReportDependency.model_validate(dep) for dep in result.dependencies]
    unique = sorted(
        license for license in analysis.license_counts if license != UNKNOWN_LICENSE
    )
    return ScanReport(
        summary=ReportSummary(
            total_dependencies=len(dependencies),
            unique_licenses=unique,
            risk_level=analysis.risk_level.value,
            conflicts=list(analysis.conflicts),
            recommendations=list(analysis.recommendations),
        ),
        dependencies=dependencies,
        timestamp=timestamp,
    )
