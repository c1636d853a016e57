"""Scanner engine — resolve install paths and enrich every dependency."""

from licensescan.engines.scanner.models import EnrichedDependency, ScanResult
from licensescan.engines.scanner.resolver import resolve_package_path, resolve_pnpm_path
from licensescan.engines.scanner.scanner import LicenseScanner, scan

__all__ = [
    "EnrichedDependency",
    "LicenseScanner",
    "ScanResult",
    "resolve_package_path",
    "resolve_pnpm_path",
    "scan",
]
