"""Scanner module tying workspace discovery, resolution and evaluation together."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Optional, Union

from license_checker.analysis.policy import evaluate_licenses
from license_checker.config.loader import load_config
from license_checker.discovery import discover_workspaces
from license_checker.models.report import LicenseReport, PackageInfo
from license_checker.resolvers.workspace import resolve_licenses

logger = logging.getLogger(__name__)


def collect_licenses(workspaces: Iterable[Path]) -> dict[str, PackageInfo]:
    """Resolve and merge the licenses of several workspaces.

    A `name@version` resolved by more than one workspace keeps the last
    resolution; identical pairs carry identical data so duplicates collapse.

    Args:
        workspaces: Workspace directories in discovery order.

    Returns:
        Merged mapping of `name@version` to PackageInfo.
    """
    merged: dict[str, PackageInfo] = {}
    for workspace in workspaces:
        merged.update(resolve_licenses(workspace))
    return merged


def check_licenses(
    root: Optional[Path] = None,
    config_path: Optional[Union[str, Path]] = None,
    workspaces: Optional[list[Path]] = None,
) -> LicenseReport:
    """Run a full license check over a project tree.

    Args:
        root: Project root. Defaults to the current working directory.
        config_path: Explicit configuration file. When None, a config file
            is looked up in `root`.
        workspaces: Pre-discovered workspaces. Discovered from `root` when None.

    Returns:
        LicenseReport for the tree. Unreadable directories, descriptors and
        configuration files degrade to "absent" instead of raising.
    """
    root = Path(root) if root is not None else Path.cwd()
    allowed_licenses = load_config(config_path, start_dir=root)

    if workspaces is None:
        workspaces = discover_workspaces(root)

    licenses = collect_licenses(workspaces)
    report = evaluate_licenses(licenses, allowed_licenses)

    logger.info(
        "Checked %d package(s) across %d workspace(s): %d violation(s)",
        report.summary.total,
        len(workspaces),
        report.summary.violations,
    )
    return report
