"""License resolvers package."""

from license_checker.resolvers.descriptor import (
    installed_descriptor_path,
    load_installed_package,
    load_workspace_manifest,
    read_descriptor,
)
from license_checker.resolvers.workspace import resolve_licenses

__all__ = [
    "installed_descriptor_path",
    "load_installed_package",
    "load_workspace_manifest",
    "read_descriptor",
    "resolve_licenses",
]
