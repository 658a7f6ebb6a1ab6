"""Configuration Pydantic models for license-checker."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class LicenseConfig(BaseModel):
    """Configuration for license-checker.

    All fields are optional. Keys use the camelCase names found in
    `.licenserc.json`; snake_case names are accepted as well.
    """

    model_config = {"extra": "ignore", "populate_by_name": True}

    allowed_licenses: Optional[List[str]] = Field(
        default=None,
        alias="allowedLicenses",
        description="License identifiers considered compatible. "
        "Replaces the built-in default list when set.",
    )
    excluded_packages: Optional[List[str]] = Field(
        default=None,
        alias="excludedPackages",
        description="Package names reserved for exclusion. Not enforced.",
    )
    notes: Optional[Dict[str, str]] = Field(
        default=None,
        description="Free-form notes keyed by package name. Not enforced.",
    )

    @field_validator("excluded_packages", mode="before")
    @classmethod
    def _drop_malformed_exclusions(cls, value: Any) -> Optional[List[str]]:
        # Inert field: a bad shape must not invalidate allowedLicenses
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return value
        return None

    @field_validator("notes", mode="before")
    @classmethod
    def _drop_malformed_notes(cls, value: Any) -> Optional[Dict[str, str]]:
        if isinstance(value, dict) and all(
            isinstance(key, str) and isinstance(note, str)
            for key, note in value.items()
        ):
            return value
        return None
