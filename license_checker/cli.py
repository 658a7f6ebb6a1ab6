"""CLI entry point for license-checker."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal, cast

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from license_checker import __version__
from license_checker.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_VIOLATIONS
from license_checker.discovery import discover_workspaces
from license_checker.exceptions import ConfigurationError, LicenseCheckerError
from license_checker.models.options import CheckOptions, Verbosity
from license_checker.models.report import LicenseReport
from license_checker.output.report_json import ReportJsonFormatter
from license_checker.output.report_markdown import ReportMarkdownFormatter
from license_checker.output.terminal import TerminalFormatter
from license_checker.scanner import check_licenses

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """License Checker - Check monorepo dependencies for license compliance.

    Discovers every workspace in a JavaScript project tree, resolves the
    licenses of their installed production dependencies, and flags any
    license outside the allowlist or matching a copyleft pattern.

    \b
    Examples:
        license-checker check
        license-checker check --format json
        license-checker check --root path/to/monorepo
    """
    pass


@main.command()
@click.option(
    "--root",
    "root_path",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Project root to scan (default: current directory).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "markdown", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for the report (default: terminal).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write report to file instead of stdout.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="List discovered workspaces and every resolved package.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Only print output when violations are found.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file (default: .licenserc.json in root).",
)
def check(
    root_path: str | None,
    output_format: str,
    output_path: str | None,
    verbose_flag: bool,
    quiet_flag: bool,
    config_path: str | None,
) -> None:
    """Check dependency licenses for commercial compatibility.

    Exits with 0 when every dependency is compliant, 1 when violations
    are found, and 2 when the check itself fails.

    \b
    Examples:
        license-checker check
        license-checker check --format json
        license-checker check --format markdown --output licenses.md
        license-checker check --verbose
        license-checker check --quiet
        license-checker check --config .licenserc.json
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    format_value = cast(Literal["terminal", "markdown", "json"], output_format.lower())
    options = CheckOptions(format=format_value, verbosity=verbosity)

    if verbosity == Verbosity.VERBOSE:
        _configure_logging()

    root = Path(root_path) if root_path is not None else Path.cwd()

    try:
        workspaces = discover_workspaces(root)
        report = check_licenses(root, config_path=config_path, workspaces=workspaces)
        _display_report(report, options, output_path, workspaces, root)

        if report.has_violations:
            sys.exit(EXIT_VIOLATIONS)
        sys.exit(EXIT_SUCCESS)

    except LicenseCheckerError as e:
        _display_error(e, options.format)
        sys.exit(EXIT_ERROR)


def _configure_logging() -> None:
    """Send package debug logs to stderr through Rich."""
    logger = logging.getLogger("license_checker")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=_error_console, show_path=False))


def _write_output_to_file(content: str, path: str) -> None:
    """Write report content to file.

    Args:
        content: The report content to write.
        path: The file path to write to.

    Raises:
        ConfigurationError: If file cannot be written.
    """
    file_path = Path(path)

    try:
        if file_path.exists():
            _error_console.print(
                f"[yellow]Warning: Overwriting existing file: {escape(path)}[/yellow]"
            )

        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot write to file '{path}': {e}") from e

    _error_console.print(f"[green]Report written to {escape(path)}[/green]")


def _display_report(
    report: LicenseReport,
    options: CheckOptions,
    output_path: str | None,
    workspaces: list[Path],
    root: Path,
) -> None:
    """Display the report in the specified format.

    Args:
        report: The report to display.
        options: Check options including format and verbosity.
        output_path: Optional file path to write output to.
        workspaces: Discovered workspaces, listed in verbose terminal output.
        root: Project root.
    """
    if options.format == "json":
        content = ReportJsonFormatter().format_report(report)
    elif options.format == "markdown":
        content = ReportMarkdownFormatter().format_report(report)
    else:  # terminal
        if output_path:
            # Terminal format to file uses markdown instead
            content = ReportMarkdownFormatter().format_report(report)
        else:
            TerminalFormatter(
                console=_console,
                error_console=_error_console,
                verbosity=options.verbosity,
            ).format_report(report, workspaces=workspaces, root=root)
            return

    if output_path:
        _write_output_to_file(content, output_path)
    else:
        click.echo(content)


def _display_error(error: LicenseCheckerError, format_type: str) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
        format_type: Output format type for styling.
    """
    error_type = type(error).__name__
    message = f"Error: {error_type}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{escape(message)}[/red bold]")
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()
