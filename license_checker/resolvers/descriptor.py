"""Reading package.json descriptors from disk.

Every reader here returns None instead of raising: a descriptor that is
missing, unreadable or malformed is treated as absent.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from license_checker.constants import DESCRIPTOR_NAME, INSTALL_DIR_NAME
from license_checker.models.descriptor import InstalledPackage, WorkspaceManifest

logger = logging.getLogger(__name__)


def read_descriptor(path: Path) -> Optional[dict[str, Any]]:
    """Read and parse a JSON descriptor.

    Args:
        path: Path to a package.json file.

    Returns:
        The parsed JSON object, or None if the file cannot be read,
        is not valid JSON, or is not a JSON object.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read descriptor %s: %s", path, e)
        return None

    try:
        data = json.loads(content)
    except ValueError as e:
        logger.debug("Invalid JSON in descriptor %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        logger.debug("Descriptor %s is not a JSON object", path)
        return None
    return data


def load_workspace_manifest(workspace_dir: Path) -> Optional[WorkspaceManifest]:
    """Load the package.json of a workspace.

    Args:
        workspace_dir: Workspace directory.

    Returns:
        WorkspaceManifest, or None if the descriptor is missing or invalid.
    """
    path = workspace_dir / DESCRIPTOR_NAME
    data = read_descriptor(path)
    if data is None:
        return None

    try:
        return WorkspaceManifest.model_validate(data)
    except ValidationError as e:
        logger.debug("Invalid workspace descriptor %s: %s", path, e)
        return None


def installed_descriptor_path(workspace_dir: Path, name: str) -> Optional[Path]:
    """Locate the real package.json of a dependency installed in a workspace.

    The expected path `<workspace>/node_modules/<name>/package.json` is
    resolved through symlinks, so hoisted or linked installs point at the
    physical copy.

    Args:
        workspace_dir: Workspace directory.
        name: Dependency name (may be scoped, e.g. `@scope/pkg`).

    Returns:
        Canonical path of the descriptor, or None if it cannot be resolved.
    """
    path = workspace_dir / INSTALL_DIR_NAME / name / DESCRIPTOR_NAME
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        logger.debug("Cannot resolve %s: %s", path, e)
        return None


def load_installed_package(
    workspace_dir: Path, name: str
) -> Optional[InstalledPackage]:
    """Load the metadata of a dependency installed in a workspace.

    Args:
        workspace_dir: Workspace directory.
        name: Dependency name.

    Returns:
        InstalledPackage, or None if the dependency cannot be read.
    """
    path = installed_descriptor_path(workspace_dir, name)
    if path is None:
        return None

    data = read_descriptor(path)
    if data is None:
        return None

    try:
        return InstalledPackage.model_validate(data)
    except ValidationError as e:
        logger.debug("Invalid installed descriptor %s: %s", path, e)
        return None
