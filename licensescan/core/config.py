"""Scan settings read from LICENSESCAN_* environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_LOW_CONFIDENCE = 0.5
DEFAULT_MAX_WORKERS = 1


def _env_float(key: str, default: float) -> float:
    return float(os.environ.get(key, default))


def _env_int(key: str, default: int) -> int:
    return int(os.environ.get(key, default))


@dataclass(frozen=True)
class ScanSettings:
    """Tunables for a scan + analysis run.

    ``max_workers`` of 1 keeps enrichment sequential; larger values enrich
    dependencies on a thread pool while preserving lock-file order.
    """

    low_confidence_threshold: float = DEFAULT_LOW_CONFIDENCE
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self) -> None:
        if not 0.0 <= self.low_confidence_threshold <= 1.0:
            raise ValueError(
                f"low_confidence_threshold must be in [0, 1], got {self.low_confidence_threshold}"
            )
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")


def load_settings(**overrides: float | int | None) -> ScanSettings:
    """Build :class:`ScanSettings` from the environment.

    Keyword *overrides* whose value is not ``None`` replace the env values
    (CLI flags use this).
    """
    values: dict[str, float | int] = {
        "low_confidence_threshold": _env_float(
            "LICENSESCAN_LOW_CONFIDENCE", DEFAULT_LOW_CONFIDENCE
        ),
        "max_workers": _env_int("LICENSESCAN_MAX_WORKERS", DEFAULT_MAX_WORKERS),
    }
    for key, value in overrides.items():
        if key not in values:
            raise TypeError(f"unknown setting: {key}")
        if value is not None:
            values[key] = value
    return ScanSettings(**values)  # type: ignore[arg-type]
