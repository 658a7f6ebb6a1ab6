"""License resolution for the direct dependencies of one workspace."""

from __future__ import annotations

import logging
from pathlib import Path

from license_checker.models.report import PackageInfo
from license_checker.resolvers.descriptor import (
    load_installed_package,
    load_workspace_manifest,
)

logger = logging.getLogger(__name__)


def resolve_licenses(workspace_dir: Path) -> dict[str, PackageInfo]:
    """Resolve licenses for the production dependencies of a workspace.

    Each dependency is looked up in the workspace's own node_modules, so
    the result reflects whatever the package manager installed there. The
    requested version range is ignored; the key uses the installed version.

    Args:
        workspace_dir: Workspace directory holding a package.json.

    Returns:
        Mapping of `name@version` to PackageInfo, in declaration order.
        Empty if the workspace descriptor is missing or invalid.
        Dependencies that cannot be read are skipped.
    """
    workspace_dir = Path(workspace_dir)
    manifest = load_workspace_manifest(workspace_dir)
    if manifest is None:
        return {}

    licenses: dict[str, PackageInfo] = {}
    for name in manifest.dependencies:
        installed = load_installed_package(workspace_dir, name)
        if installed is None:
            # Optional or platform-specific dependencies may not be installed
            logger.debug("Skipping unresolved dependency %s in %s", name, workspace_dir)
            continue

        licenses[f"{name}@{installed.version}"] = PackageInfo(
            license=installed.license,
            version=installed.version,
        )

    return licenses
