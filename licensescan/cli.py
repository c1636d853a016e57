"""CLI entry point: license-scan.

Usage:
    license-scan                          # scan the current directory, JSON to stdout
    license-scan /path/to/project
    license-scan /path/to/project --format html -o report.html
    license-scan -v /path/to/project      # debug logs on stderr
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import click
import structlog

from licensescan.core.config import load_settings
from licensescan.core.logging import setup_logging
from licensescan.engines.analyzer import LicenseAnalyzer
from licensescan.engines.scanner import LicenseScanner
from licensescan.exceptions import LicenseScanError
from licensescan.report import build_report, render_html

log = structlog.get_logger("licensescan.cli")


def _timestamp(now: datetime) -> str:
    return f"{now:%B} {now.day}, {now:%Y at %H:%M:%S}"


@click.command()
@click.argument("project_path", default=".", type=click.Path(file_okay=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "html"], case_sensitive=False),
    default="json",
    show_default=True,
    help="Output format",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the report to this file instead of stdout",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.option("--max-workers", type=click.IntRange(min=1), default=None, help="Enrichment threads")
@click.option("--prod-only", is_flag=True, help="Accepted for compatibility; lock files are not filtered")
@click.option("--no-summary", is_flag=True, help="Omit the summary block from JSON output")
def main(
    project_path: str,
    output_format: str,
    output: str | None,
    verbose: bool,
    max_workers: int | None,
    prod_only: bool,
    no_summary: bool,
) -> None:
    """Inventory a JavaScript project's dependency licenses and assess legal risk."""
    setup_logging("DEBUG" if verbose else None)

    try:
        settings = load_settings(max_workers=max_workers)
    except ValueError as e:
        click.echo(f"Error: invalid settings: {e}", err=True)
        sys.exit(1)

    if prod_only:
        log.debug("cli.prod_only_ignored")

    try:
        result = LicenseScanner(project_path, settings=settings).scan()
    except LicenseScanError as e:
        click.echo(f"Error scanning project: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Found {result.package_manager} lock file: {result.lock_file}", err=True)

    analysis = LicenseAnalyzer(settings.low_confidence_threshold).analyze(result.dependencies)

    if output_format.lower() == "html":
        report = build_report(result, analysis, timestamp=_timestamp(datetime.now()))
        rendered = render_html(report)
        written = f"HTML report written to {output}"
    else:
        report = build_report(result, analysis)
        rendered = report.to_json(include_summary=not no_summary) + "\n"
        written = f"Results written to {output}"

    if output is None:
        click.echo(rendered, nl=False)
        return

    try:
        Path(output).write_text(rendered, encoding="utf-8")
    except OSError as e:
        click.echo(f"Error writing report: {e}", err=True)
        sys.exit(1)
    click.echo(written)
