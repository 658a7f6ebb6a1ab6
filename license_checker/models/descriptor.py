"""Pydantic models for package.json descriptors."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from license_checker.constants import UNKNOWN


class WorkspaceManifest(BaseModel):
    """The parts of a workspace package.json read by the checker.

    Only production `dependencies` are consumed. `devDependencies` and
    every other key are ignored.
    """

    model_config = {"extra": "ignore"}

    name: Optional[str] = Field(default=None, description="Workspace name")
    dependencies: Dict[str, Any] = Field(
        default_factory=dict,
        description="Production dependency names mapped to version ranges",
    )

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("dependencies", mode="before")
    @classmethod
    def _coerce_dependencies(cls, value: Any) -> Any:
        # `"dependencies": null` is treated like an absent field
        return {} if value is None else value


class InstalledPackage(BaseModel):
    """Metadata of an installed dependency read from its own package.json."""

    model_config = {"extra": "ignore"}

    name: Optional[str] = Field(default=None, description="Package name")
    version: str = Field(default=UNKNOWN, description="Installed version")
    license: str = Field(default=UNKNOWN, description="Declared license")

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: Any) -> str:
        if isinstance(value, str) and value:
            return value
        # A bare number such as `"version": 1` still identifies the install
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value:
            return str(value)
        return UNKNOWN

    @field_validator("license", mode="before")
    @classmethod
    def _coerce_license(cls, value: Any) -> str:
        """Normalize the declared license to a string.

        Accepts the legacy npm object form `{"type": "MIT", "url": ...}`.
        Anything else that is not a non-empty string becomes UNKNOWN.
        """
        if isinstance(value, dict):
            value = value.get("type")
        if isinstance(value, str) and value:
            return value
        return UNKNOWN
