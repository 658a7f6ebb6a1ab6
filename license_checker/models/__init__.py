"""Pydantic data models for license-checker."""

from license_checker.models.config import LicenseConfig
from license_checker.models.descriptor import InstalledPackage, WorkspaceManifest
from license_checker.models.options import CheckOptions, Verbosity
from license_checker.models.report import (
    LicenseReport,
    PackageInfo,
    Summary,
    Violation,
)

__all__ = [
    "CheckOptions",
    "InstalledPackage",
    "LicenseConfig",
    "LicenseReport",
    "PackageInfo",
    "Summary",
    "Verbosity",
    "Violation",
    "WorkspaceManifest",
]
