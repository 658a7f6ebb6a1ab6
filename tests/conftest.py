"""Shared fixtures for license-checker tests."""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Iterator, Optional

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_json() -> Callable[[Path, Any], Path]:
    """Provide a helper that writes JSON to a path, creating parents."""

    def _write(path: Path, data: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_workspace(
    write_json: Callable[[Path, Any], Path],
) -> Callable[..., Path]:
    """Provide a helper that builds a workspace with installed dependencies.

    `installed` maps dependency name to the descriptor written to
    `<workspace>/node_modules/<name>/package.json`. Every installed name is
    declared as a production dependency unless `dependencies` is given.
    """

    def _make(
        workspace_dir: Path,
        installed: Optional[dict[str, dict[str, Any]]] = None,
        dependencies: Optional[dict[str, str]] = None,
        **manifest: Any,
    ) -> Path:
        installed = installed or {}
        if dependencies is None:
            dependencies = {name: "^1.0.0" for name in installed}
        write_json(
            workspace_dir / "package.json",
            {"dependencies": dependencies, **manifest},
        )
        for name, descriptor in installed.items():
            write_json(
                workspace_dir / "node_modules" / name / "package.json",
                descriptor,
            )
        return workspace_dir

    return _make


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers the CLI attaches to the package logger in verbose mode."""
    logger = logging.getLogger("license_checker")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
