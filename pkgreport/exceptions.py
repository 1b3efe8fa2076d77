"""Custom exceptions for pkgreport."""


class PkgReportError(Exception):
    """Base exception for all pkgreport errors."""


class ManifestError(PkgReportError):
    """Raised when the manifest is missing, unreadable, or malformed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load manifest {path}: {reason}")
