"""Markdown output formatter for license reports."""

from datetime import datetime, timezone

from license_checker.constants import FAILURE_REASON, REQUIRED_ACTIONS
from license_checker.models.report import LicenseReport


class ReportMarkdownFormatter:
    """Format license reports as Markdown output.

    Suitable for attaching to pull requests or legal review.
    """

    def format_report(self, report: LicenseReport) -> str:
        """Format a report as Markdown string.

        Args:
            report: The report to format.

        Returns:
            Markdown string representation of the report.
        """
        lines: list[str] = []

        lines.append("# License Compliance Report")
        lines.append("")

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        lines.append(f"*Generated: {timestamp}*")
        lines.append("")

        lines.extend(self._format_status(report))
        lines.append("")

        lines.extend(self._format_summary(report))
        lines.append("")

        if report.has_violations:
            lines.extend(self._format_violations(report))
            lines.append("")

        lines.append("## Allowed Licenses")
        lines.append("")
        for license_id in report.allowed_licenses:
            lines.append(f"- {license_id}")
        lines.append("")

        return "\n".join(lines)

    def _format_status(self, report: LicenseReport) -> list[str]:
        if report.has_violations:
            return ["**Status:** FAILED - License compliance check failed"]
        if report.summary.total == 0:
            return ["**Status:** PASS - No dependencies found"]
        return ["**Status:** PASS - All dependencies have commercially compatible licenses"]

    def _format_summary(self, report: LicenseReport) -> list[str]:
        summary = report.summary
        return [
            "## Summary",
            "",
            "| Metric | Count |",
            "|--------|-------|",
            f"| Total packages | {summary.total} |",
            f"| Compatible | {summary.allowed} |",
            f"| Violations | {summary.violations} |",
        ]

    def _format_violations(self, report: LicenseReport) -> list[str]:
        """Format the violations table with reason and required actions."""
        lines = [
            f"## Violations ({len(report.violations)})",
            "",
            "| Package | Version | License |",
            "|---------|---------|---------|",
        ]
        for violation in report.violations:
            lines.append(
                f"| {_escape_cell(violation.package)} "
                f"| {_escape_cell(violation.version)} "
                f"| {_escape_cell(violation.license)} |"
            )
        lines.append("")
        lines.append(f"**Reason:** {FAILURE_REASON}")
        lines.append("")
        lines.append("**Actions required:**")
        lines.append("")
        for number, action in enumerate(REQUIRED_ACTIONS, start=1):
            lines.append(f"{number}. {action}")
        return lines


def _escape_cell(value: str) -> str:
    # Pipes would split the table cell
    return value.replace("|", "\\|")
