"""License policy checking against the allowed licenses list."""
from __future__ import annotations

from collections.abc import Mapping, Sequence

from license_checker.analysis.problematic import is_prohibited_license
from license_checker.constants import UNKNOWN
from license_checker.models.report import (
    LicenseReport,
    PackageInfo,
    Summary,
    Violation,
)


def is_license_allowed(license_id: str, allowed_licenses: Sequence[str]) -> bool:
    """Check a declared license against the allowlist.

    Matching is a case-insensitive substring test, so compound strings such
    as "MIT OR Apache-2.0" pass when any allowed identifier appears in them.
    Prohibited patterns take precedence over the allowlist.

    Args:
        license_id: Declared license string.
        allowed_licenses: Allowed license identifiers.

    Returns:
        True if the license is allowed, False otherwise.
    """
    if not license_id or license_id == UNKNOWN:
        return False

    if is_prohibited_license(license_id):
        return False

    normalized = license_id.upper()
    return any(allowed.upper() in normalized for allowed in allowed_licenses)


def evaluate_licenses(
    licenses: Mapping[str, PackageInfo],
    allowed_licenses: Sequence[str],
) -> LicenseReport:
    """Classify every resolved package and build the report.

    Args:
        licenses: Resolved packages keyed by `name@version`.
        allowed_licenses: Allowed license identifiers.

    Returns:
        LicenseReport with summary counts and violations in the
        iteration order of `licenses`.
    """
    allowed = 0
    violations: list[Violation] = []

    for package, info in licenses.items():
        if is_license_allowed(info.license, allowed_licenses):
            allowed += 1
        else:
            violations.append(
                Violation(
                    package=package,
                    license=info.license or UNKNOWN,
                    version=info.version,
                )
            )

    summary = Summary(
        total=allowed + len(violations),
        allowed=allowed,
        violations=len(violations),
    )
    return LicenseReport(
        summary=summary,
        allowed_licenses=list(allowed_licenses),
        licenses=dict(licenses),
        violations=violations,
    )
