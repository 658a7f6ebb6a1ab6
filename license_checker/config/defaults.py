"""Default configuration values for license-checker."""

from __future__ import annotations

from license_checker.models.config import LicenseConfig

# Default configuration file names to search for, in precedence order
DEFAULT_CONFIG_NAMES = [".licenserc.json", ".licenserc.yaml", ".licenserc.yml"]

# Licenses considered commercially compatible when no configuration is found
DEFAULT_ALLOWED_LICENSES = (
    "MIT",
    "Apache-2.0",
    "BSD-2-Clause",
    "BSD-3-Clause",
    "ISC",
    "0BSD",
    "CC0-1.0",
    "Python-2.0",
    "Unlicense",
)


def get_default_config() -> LicenseConfig:
    """Get the default configuration.

    Returns:
        LicenseConfig with all defaults (all fields None).
    """
    return LicenseConfig()


def get_default_allowed_licenses() -> list[str]:
    """Get a fresh copy of the built-in allowlist."""
    return list(DEFAULT_ALLOWED_LICENSES)
