"""licensescan: dependency license inventory and risk analysis for JavaScript projects."""

__version__ = "0.1.0"

from licensescan.core.config import ScanSettings, load_settings
from licensescan.core.filesystem import FileStat, FileSystem, LocalFileSystem
from licensescan.engines.analyzer import AnalysisResult, LicenseAnalyzer, RiskLevel, analyze
from licensescan.engines.license_detector import LicenseDetector, LicenseInfo
from licensescan.engines.lockfile import Dependency, detect_lock_file, parse_lock_file
from licensescan.engines.scanner import EnrichedDependency, LicenseScanner, ScanResult, scan
from licensescan.exceptions import (
    LicenseScanError,
    LockFileNotFoundError,
    LockFileParseError,
    UnsupportedPackageManagerError,
)

__all__ = [
    "AnalysisResult",
    "Dependency",
    "EnrichedDependency",
    "FileStat",
    "FileSystem",
    "LicenseAnalyzer",
    "LicenseDetector",
    "LicenseInfo",
    "LicenseScanError",
    "LicenseScanner",
    "LocalFileSystem",
    "LockFileNotFoundError",
    "LockFileParseError",
    "RiskLevel",
    "ScanResult",
    "ScanSettings",
    "UnsupportedPackageManagerError",
    "analyze",
    "detect_lock_file",
    "load_settings",
    "parse_lock_file",
    "scan",
]
