"""Terminal output formatter using Rich."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from license_checker.analysis.policy import is_license_allowed
from license_checker.constants import FAILURE_REASON, REQUIRED_ACTIONS
from license_checker.models.options import Verbosity
from license_checker.models.report import LicenseReport


class TerminalFormatter:
    """Format license reports for terminal display using Rich.

    The summary goes to the main console. The failure section goes to the
    error console so CI logs surface it on stderr.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the formatter with Rich consoles.

        Args:
            console: Console for regular output. A new Console is created
                if not provided.
            error_console: Console for the failure section. Defaults to
                `console`.
            verbosity: Output verbosity level.
        """
        self._console = console if console is not None else Console()
        self._error_console = (
            error_console if error_console is not None else self._console
        )
        self._verbosity = verbosity

    def format_report(
        self,
        report: LicenseReport,
        workspaces: Sequence[Path] = (),
        root: Optional[Path] = None,
    ) -> None:
        """Display a license report.

        Args:
            report: The report to display.
            workspaces: Discovered workspaces, listed in verbose mode.
            root: Project root used to shorten workspace paths.
        """
        if self._verbosity == Verbosity.QUIET:
            # Quiet mode stays silent unless something failed
            if report.has_violations:
                self._print_failure(report)
            return

        if self._verbosity == Verbosity.VERBOSE:
            self._print_workspaces(workspaces, root)

        self._print_summary(report)

        if self._verbosity == Verbosity.VERBOSE and report.licenses:
            self._print_packages(report)

        if report.has_violations:
            self._print_failure(report)
        else:
            self._console.print(
                "[green]All dependencies have commercially compatible licenses![/green]"
            )

    def _print_workspaces(
        self, workspaces: Sequence[Path], root: Optional[Path]
    ) -> None:
        """Print the discovered workspaces relative to the root."""
        self._console.print(f"[bold]Found {len(workspaces)} workspace(s):[/bold]")
        for workspace in workspaces:
            self._console.print(f"  - {escape(_relative(workspace, root))}")
        self._console.print("")

    def _print_summary(self, report: LicenseReport) -> None:
        """Print allowed licenses and summary counts.

        Args:
            report: The report to summarize.
        """
        summary = report.summary
        self._console.print(
            "Checking dependency licenses for commercial compatibility...\n"
        )
        self._console.print(
            f"[bold]Allowed licenses:[/bold] {escape(', '.join(report.allowed_licenses))}"
        )
        self._console.print(f"[bold]Total packages:[/bold] {summary.total}")
        self._console.print(f"[bold]Compatible:[/bold] {summary.allowed}")
        self._console.print(f"[bold]Violations:[/bold] {summary.violations}\n")

    def _print_packages(self, report: LicenseReport) -> None:
        """Print every resolved package as a table.

        Args:
            report: The report whose packages are listed.
        """
        table = Table(title="Resolved Packages")

        table.add_column("Package", style="cyan", no_wrap=True)
        table.add_column("Version", style="magenta")
        table.add_column("License", style="green")
        table.add_column("Status")

        for package, info in report.licenses.items():
            if is_license_allowed(info.license, report.allowed_licenses):
                status = "[green]allowed[/green]"
            else:
                status = "[red]violation[/red]"
            table.add_row(
                escape(package), escape(info.version), escape(info.license), status
            )

        self._console.print(table)
        self._console.print("")

    def _print_failure(self, report: LicenseReport) -> None:
        """Print the failure section listing every violation.

        Args:
            report: The report with violations.
        """
        lines = [
            f"Found {len(report.violations)} package(s) with non-compliant licenses:",
            "",
        ]
        for violation in report.violations:
            lines.append(f"  [red]x[/red] {escape(violation.package)}")
            lines.append(f"     Version: {escape(violation.version)}")
            lines.append(f"     License: [yellow]{escape(violation.license)}[/yellow]")
            lines.append("")

        lines.append("[bold]REASON FOR FAILURE:[/bold]")
        lines.append(f"   {FAILURE_REASON}")
        lines.append("")
        lines.append("[bold]ALLOWED LICENSES:[/bold]")
        lines.append(f"   {escape(', '.join(report.allowed_licenses))}")
        lines.append("")
        lines.append("[bold]ACTIONS REQUIRED:[/bold]")
        for number, action in enumerate(REQUIRED_ACTIONS, start=1):
            lines.append(f"   {number}. {action}")

        panel = Panel(
            "\n".join(lines),
            title="[bold red]LICENSE COMPLIANCE CHECK FAILED[/bold red]",
            border_style="red",
        )
        self._error_console.print(panel)
        self._error_console.print(
            "[bold red]BUILD FAILED - License compliance check failed[/bold red]"
        )


def _relative(path: Path, root: Optional[Path]) -> str:
    """Return `path` relative to `root` when possible."""
    if root is not None:
        try:
            return str(Path(path).relative_to(root))
        except ValueError:
            pass
    return str(path)
