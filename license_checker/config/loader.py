"""Configuration file discovery and loading for license-checker."""
from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from license_checker.config.defaults import (
    DEFAULT_CONFIG_NAMES,
    get_default_allowed_licenses,
    get_default_config,
)
from license_checker.exceptions import ConfigurationError
from license_checker.models.config import LicenseConfig

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in the specified directory.

    Searches for `.licenserc.json` first, then `.licenserc.yaml` and
    `.licenserc.yml`.

    Args:
        start_dir: Directory to search. Defaults to current working directory.

    Returns:
        Path to the configuration file if found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()
    for name in DEFAULT_CONFIG_NAMES:
        config_path = search_dir / name
        if config_path.is_file():
            return config_path
    return None


def _parse_content(path: Path, content: str) -> object:
    """Parse config file content as YAML or JSON depending on the suffix.

    Raises:
        ConfigurationError: If the content has invalid syntax.
    """
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML syntax in '{path}': {e}"
            ) from e

    try:
        return json.loads(content)
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid JSON syntax in '{path}': {e}"
        ) from e


def load_config_file(path: Path) -> LicenseConfig:
    """Load and validate configuration from a JSON or YAML file.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated LicenseConfig instance.

    Raises:
        ConfigurationError: If file cannot be read, has invalid syntax,
            is not a mapping, or fails Pydantic validation.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e

    data = _parse_content(path, content)

    # Handle YAML that parses to None (empty or just comments)
    if data is None:
        return get_default_config()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    try:
        return LicenseConfig.model_validate(data)
    except ValidationError as e:
        error_messages = _format_validation_errors(e)
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {error_messages}"
        ) from e


def _format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into a readable string.

    Args:
        error: The Pydantic ValidationError.

    Returns:
        Formatted error message string.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        msg = err["msg"]
        messages.append(f"{loc}: {msg}")
    return "; ".join(messages)


def load_config(
    config_path: str | Path | None = None,
    start_dir: Path | None = None,
) -> list[str]:
    """Load the allowed license list from file or use defaults.

    If a config_path is provided, loads from that file. Otherwise searches
    start_dir (default: current working directory) for a configuration file.
    A configured `allowedLicenses` list replaces the defaults entirely.

    This function never raises: a missing, unreadable or malformed file,
    or a file without `allowedLicenses`, yields the built-in default list.

    Args:
        config_path: Optional path to configuration file.
        start_dir: Directory to search when config_path is not given.

    Returns:
        List of allowed license identifiers.
    """
    path = Path(config_path) if config_path is not None else find_config_file(start_dir)
    if path is None:
        return get_default_allowed_licenses()

    try:
        config = load_config_file(path)
    except ConfigurationError as e:
        logger.debug("Falling back to default allowed licenses: %s", e)
        return get_default_allowed_licenses()

    if config.allowed_licenses is None:
        return get_default_allowed_licenses()

    logger.debug(
        "Loaded %d allowed license(s) from %s", len(config.allowed_licenses), path
    )
    return list(config.allowed_licenses)
