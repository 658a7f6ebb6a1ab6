"""Configuration handling for license-checker."""
from __future__ import annotations

from license_checker.config.defaults import (
    DEFAULT_ALLOWED_LICENSES,
    DEFAULT_CONFIG_NAMES,
    get_default_allowed_licenses,
    get_default_config,
)
from license_checker.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
)
from license_checker.models.config import LicenseConfig

__all__ = [
    "DEFAULT_ALLOWED_LICENSES",
    "DEFAULT_CONFIG_NAMES",
    "LicenseConfig",
    "find_config_file",
    "get_default_allowed_licenses",
    "get_default_config",
    "load_config",
    "load_config_file",
]
