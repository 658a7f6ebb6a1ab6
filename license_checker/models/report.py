"""Report-related Pydantic models."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class PackageInfo(BaseModel):
    """License information for one resolved `name@version`."""

    model_config = {"extra": "forbid", "frozen": True}

    license: str = Field(description="Declared license, or UNKNOWN")
    version: str = Field(description="Installed version, or UNKNOWN")


class Violation(BaseModel):
    """A resolved package whose license failed the compliance check."""

    model_config = {"extra": "forbid", "frozen": True}

    package: str = Field(description="Package key in `name@version` form")
    license: str = Field(description="The offending license")
    version: str = Field(description="Installed version")


class Summary(BaseModel):
    """Counts for a license check run."""

    model_config = {"extra": "forbid", "frozen": True}

    total: int = Field(default=0, description="Total packages checked")
    allowed: int = Field(default=0, description="Packages with allowed licenses")
    violations: int = Field(default=0, description="Packages in violation")


class LicenseReport(BaseModel):
    """Result of a license check run.

    Serialized with `by_alias=True` this is the wire shape
    `{summary, allowedLicenses, licenses, violations}`.
    """

    model_config = {"extra": "forbid", "frozen": True, "populate_by_name": True}

    summary: Summary = Field(default_factory=Summary)
    allowed_licenses: List[str] = Field(
        default_factory=list,
        alias="allowedLicenses",
        description="Allowlist the packages were checked against",
    )
    licenses: Dict[str, PackageInfo] = Field(
        default_factory=dict,
        description="Resolved packages keyed by `name@version`",
    )
    violations: List[Violation] = Field(
        default_factory=list,
        description="Violations in the iteration order of `licenses`",
    )

    @property
    def has_violations(self) -> bool:
        """Check if any package failed the license check.

        Returns:
            True if the violation list is non-empty, False otherwise.
        """
        return len(self.violations) > 0
