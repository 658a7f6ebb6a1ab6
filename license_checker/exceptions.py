"""Custom exceptions for license-checker."""


class LicenseCheckerError(Exception):
    """Base exception for all license-checker errors."""

    pass


class ConfigurationError(LicenseCheckerError):
    """Exception raised when configuration is invalid or output cannot be written."""

    pass
