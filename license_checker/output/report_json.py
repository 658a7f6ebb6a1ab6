"""JSON output formatter for license reports."""
import json
from typing import Any

from license_checker.models.report import LicenseReport


class ReportJsonFormatter:
    """Format license reports as JSON output.

    The output is the report's wire shape
    `{summary, allowedLicenses, licenses, violations}` for programmatic
    processing and CI/CD integration. It carries no timestamp, so two runs
    over the same tree produce identical output.
    """

    def format_report(self, report: LicenseReport) -> str:
        """Format a report as JSON string.

        Args:
            report: The report to format.

        Returns:
            JSON string representation of the report.
        """
        return json.dumps(self.build_output(report), indent=2)

    def build_output(self, report: LicenseReport) -> dict[str, Any]:
        """Build the output dictionary structure.

        Args:
            report: The report to convert.

        Returns:
            Dictionary ready for JSON serialization.
        """
        return report.model_dump(mode="json", by_alias=True)
