"""Custom exceptions for licensescan."""


class LicenseScanError(Exception):
    """Base exception for all scan errors."""


class LockFileNotFoundError(LicenseScanError):
    """Raised when a project root holds none of the supported lock files."""

    def __init__(self, root: str):
        self.root = root
        super().__init__(f"no lock file found in {root}")


class LockFileParseError(LicenseScanError):
    """Raised when a lock file cannot be read or decoded."""

    def __init__(self, path: str, package_manager: str, reason: str):
        self.path = path
        self.package_manager = package_manager
        super().__init__(f"failed to parse {package_manager} lock file {path}: {reason}")


class UnsupportedPackageManagerError(LicenseScanError):
    """Raised when no parser is registered for a package manager id."""

    def __init__(self, package_manager: str):
        self.package_manager = package_manager
        super().__init__(f"unsupported package manager: {package_manager}")
