"""Tests for JSON report formatter."""

import json

from license_checker.models.report import (
    LicenseReport,
    PackageInfo,
    Summary,
    Violation,
)
from license_checker.output.report_json import ReportJsonFormatter


def _report() -> LicenseReport:
    return LicenseReport(
        summary=Summary(total=2, allowed=1, violations=1),
        allowed_licenses=["MIT"],
        licenses={
            "mit-pkg@1.0.0": PackageInfo(license="MIT", version="1.0.0"),
            "gpl-pkg@1.0.0": PackageInfo(license="GPL-3.0", version="1.0.0"),
        },
        violations=[Violation(package="gpl-pkg@1.0.0", license="GPL-3.0", version="1.0.0")],
    )


class TestReportJsonFormatter:
    """Tests for ReportJsonFormatter."""

    def test_output_is_valid_json(self) -> None:
        """Test that the output parses as JSON."""
        output = ReportJsonFormatter().format_report(_report())

        assert isinstance(json.loads(output), dict)

    def test_wire_shape(self) -> None:
        """Test that the JSON carries the report fields under wire names."""
        data = json.loads(ReportJsonFormatter().format_report(_report()))

        assert data == {
            "summary": {"total": 2, "allowed": 1, "violations": 1},
            "allowedLicenses": ["MIT"],
            "licenses": {
                "mit-pkg@1.0.0": {"license": "MIT", "version": "1.0.0"},
                "gpl-pkg@1.0.0": {"license": "GPL-3.0", "version": "1.0.0"},
            },
            "violations": [
                {"package": "gpl-pkg@1.0.0", "license": "GPL-3.0", "version": "1.0.0"}
            ],
        }

    def test_two_space_indent(self) -> None:
        """Test that output is pretty-printed."""
        output = ReportJsonFormatter().format_report(_report())

        assert output.startswith('{\n  "summary"')

    def test_deterministic(self) -> None:
        """Test that formatting the same report twice is byte-identical."""
        formatter = ReportJsonFormatter()

        assert formatter.format_report(_report()) == formatter.format_report(_report())

    def test_empty_report(self) -> None:
        """Test formatting a report with no packages."""
        data = json.loads(ReportJsonFormatter().format_report(LicenseReport()))

        assert data["summary"] == {"total": 0, "allowed": 0, "violations": 0}
        assert data["violations"] == []
