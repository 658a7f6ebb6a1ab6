"""Output formatters for license-checker."""

from license_checker.output.report_json import ReportJsonFormatter
from license_checker.output.report_markdown import ReportMarkdownFormatter
from license_checker.output.terminal import TerminalFormatter

__all__ = [
    "ReportJsonFormatter",
    "ReportMarkdownFormatter",
    "TerminalFormatter",
]
