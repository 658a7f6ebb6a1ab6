"""Workspace discovery for multi-package project trees."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from license_checker.constants import DESCRIPTOR_NAME, EXCLUDED_DIRECTORIES

logger = logging.getLogger(__name__)


def find_descriptor_dirs(
    directory: Path,
    results: Optional[list[Path]] = None,
) -> list[Path]:
    """Recursively find every directory that holds a package.json.

    Entries are visited in name order so the result is deterministic.
    Directories named in EXCLUDED_DIRECTORIES are skipped without being
    descended into, and symlinked directories are not followed. A directory
    that holds a descriptor is still searched for nested workspaces.

    Args:
        directory: Directory to search.
        results: Accumulator used by the recursion.

    Returns:
        Directories containing a package.json, in traversal order.
        An unreadable directory contributes nothing.
    """
    if results is None:
        results = []

    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", directory, e)
        return results

    for entry in entries:
        if entry.name in EXCLUDED_DIRECTORIES:
            continue

        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            logger.debug("Skipping unreadable entry %s: %s", entry.path, e)
            continue

        if is_dir:
            find_descriptor_dirs(Path(entry.path), results)
        elif entry.name == DESCRIPTOR_NAME:
            results.append(Path(directory))

    return results


def discover_workspaces(root: Path) -> list[Path]:
    """Discover all nested workspaces below a project root.

    The root directory itself is never reported, even when it holds a
    package.json: only nested workspaces count.

    Args:
        root: Project root directory.

    Returns:
        Workspace directories in discovery order.
    """
    root = Path(root)
    workspaces = [path for path in find_descriptor_dirs(root) if path != root]
    logger.debug("Discovered %d workspace(s) under %s", len(workspaces), root)
    return workspaces
