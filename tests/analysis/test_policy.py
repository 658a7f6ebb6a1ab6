"""Tests for license policy checker."""
import pytest

from license_checker.analysis.policy import evaluate_licenses, is_license_allowed
from license_checker.config.defaults import DEFAULT_ALLOWED_LICENSES
from license_checker.models.report import PackageInfo, Violation

ALLOWED = ["MIT", "Apache-2.0", "BSD-2-Clause", "BSD-3-Clause", "ISC"]


class TestIsLicenseAllowed:
    """Tests for is_license_allowed function."""

    @pytest.mark.parametrize(
        "license_id", ["MIT", "Apache-2.0", "BSD-2-Clause", "BSD-3-Clause", "ISC"]
    )
    def test_allowed_licenses(self, license_id: str) -> None:
        """Test that listed licenses are allowed."""
        assert is_license_allowed(license_id, ALLOWED) is True

    def test_case_insensitive(self) -> None:
        """Test that matching ignores case."""
        assert is_license_allowed("mit", ALLOWED) is True
        assert is_license_allowed("apache-2.0", ["Apache-2.0"]) is True

    @pytest.mark.parametrize(
        "license_id", ["GPL-3.0", "GPL-2.0", "LGPL-3.0", "AGPL-3.0", "SSPL-1.0", "BUSL-1.1"]
    )
    def test_prohibited_licenses_rejected(self, license_id: str) -> None:
        """Test that prohibited licenses are rejected."""
        assert is_license_allowed(license_id, ALLOWED) is False

    def test_prohibited_takes_precedence(self) -> None:
        """Test that a prohibited license is rejected even when allowlisted."""
        assert is_license_allowed("GPL-3.0", ["GPL-3.0"]) is False
        assert is_license_allowed("LGPL-2.1", ["LGPL-2.1", "MIT"]) is False

    def test_copyleft_keyword_rejected(self) -> None:
        """Test that any license mentioning copyleft is rejected."""
        assert is_license_allowed("Copyleft License", ALLOWED) is False

    def test_unknown_rejected(self) -> None:
        """Test that the UNKNOWN sentinel is rejected."""
        assert is_license_allowed("UNKNOWN", ALLOWED) is False

    def test_empty_rejected(self) -> None:
        """Test that an empty license is rejected."""
        assert is_license_allowed("", ALLOWED) is False

    def test_unlisted_license_rejected(self) -> None:
        """Test that a license absent from the list is rejected."""
        assert is_license_allowed("MPL-2.0", ALLOWED) is False

    def test_empty_allowlist_rejects_everything(self) -> None:
        """Test that nothing is allowed with an empty list."""
        assert is_license_allowed("MIT", []) is False

    def test_substring_match_for_compound_strings(self) -> None:
        """Test that a compound expression matches when any token is allowed."""
        assert is_license_allowed("MIT OR Apache-2.0", ["Apache-2.0"]) is True
        assert is_license_allowed("(MIT AND Zlib)", ["MIT"]) is True

    def test_substring_match_inside_unrelated_word(self) -> None:
        """Test the permissive substring semantics on unrelated identifiers."""
        # "MIT-0" and "MITNFA" contain "MIT"
        assert is_license_allowed("MIT-0", ["MIT"]) is True
        assert is_license_allowed("MITNFA", ["MIT"]) is True

    def test_default_list(self) -> None:
        """Test every default entry is allowed against the default list."""
        for license_id in DEFAULT_ALLOWED_LICENSES:
            assert is_license_allowed(license_id, DEFAULT_ALLOWED_LICENSES) is True


class TestEvaluateLicenses:
    """Tests for evaluate_licenses function."""

    def test_all_allowed(self) -> None:
        """Test a report with no violations."""
        licenses = {
            "mit-pkg@1.0.0": PackageInfo(license="MIT", version="1.0.0"),
            "isc-pkg@2.0.0": PackageInfo(license="ISC", version="2.0.0"),
        }

        report = evaluate_licenses(licenses, ALLOWED)

        assert report.summary.total == 2
        assert report.summary.allowed == 2
        assert report.summary.violations == 0
        assert report.violations == []
        assert report.has_violations is False

    def test_violation_recorded(self) -> None:
        """Test that a failing package produces a Violation."""
        licenses = {"gpl-pkg@1.0.0": PackageInfo(license="GPL-3.0", version="1.0.0")}

        report = evaluate_licenses(licenses, ALLOWED)

        assert report.summary.total == 1
        assert report.summary.allowed == 0
        assert report.summary.violations == 1
        assert report.violations == [
            Violation(package="gpl-pkg@1.0.0", license="GPL-3.0", version="1.0.0")
        ]

    def test_violations_keep_mapping_order(self) -> None:
        """Test that violations follow the iteration order of the mapping."""
        licenses = {
            "zeta@1.0.0": PackageInfo(license="GPL-3.0", version="1.0.0"),
            "ok@1.0.0": PackageInfo(license="MIT", version="1.0.0"),
            "alpha@2.0.0": PackageInfo(license="UNKNOWN", version="2.0.0"),
            "beta@3.0.0": PackageInfo(license="SSPL-1.0", version="3.0.0"),
        }

        report = evaluate_licenses(licenses, ALLOWED)

        assert [v.package for v in report.violations] == [
            "zeta@1.0.0",
            "alpha@2.0.0",
            "beta@3.0.0",
        ]

    def test_summary_invariant(self) -> None:
        """Test that total equals allowed plus violations and the mapping size."""
        licenses = {
            f"pkg{i}@1.0.0": PackageInfo(license=lic, version="1.0.0")
            for i, lic in enumerate(["MIT", "GPL-3.0", "ISC", "UNKNOWN", "Apache-2.0"])
        }

        report = evaluate_licenses(licenses, ALLOWED)

        assert report.summary.total == report.summary.allowed + report.summary.violations
        assert report.summary.total == len(report.licenses) == 5

    def test_report_carries_inputs(self) -> None:
        """Test that the allowlist and mapping are kept in the report."""
        licenses = {"mit-pkg@1.0.0": PackageInfo(license="MIT", version="1.0.0")}

        report = evaluate_licenses(licenses, ("MIT",))

        assert report.allowed_licenses == ["MIT"]
        assert report.licenses == licenses

    def test_empty_mapping(self) -> None:
        """Test that an empty mapping yields an empty report."""
        report = evaluate_licenses({}, ALLOWED)

        assert report.summary.total == 0
        assert report.violations == []

    def test_idempotent(self) -> None:
        """Test that evaluating twice yields equal reports."""
        licenses = {
            "gpl-pkg@1.0.0": PackageInfo(license="GPL-3.0", version="1.0.0"),
            "mit-pkg@1.0.0": PackageInfo(license="MIT", version="1.0.0"),
        }

        assert evaluate_licenses(licenses, ALLOWED) == evaluate_licenses(licenses, ALLOWED)
