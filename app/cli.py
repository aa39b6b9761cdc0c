"""
Command line interface for the Baseline compatibility checker.
"""

import asyncio
import json
import sys

import click
from rich.console import Console
from rich.table import Table

from baseline_checker import BaselineCheckerError, Severity
from baseline_checker.features import risk_level, status_label
from baseline_checker.scanner import ProjectScanner

from .services.linter import build_linter
from .startup import configure_logging

console = Console()

_SEVERITY_RANK = {Severity.WARNING.value: 0, Severity.ERROR.value: 1}


@click.group()
@click.option("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
def cli(log_level):
    """Baseline compatibility checks for CSS, JavaScript and HTML."""
    configure_logging(log_level.upper() if log_level else None)


@cli.command(name="scan")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--target", "target", default=None, help="Target Baseline year (default: BASELINE_TARGET or 2024)")
@click.option("--fail-on", "fail_on", type=click.Choice(["error", "warning"]), default="error",
              show_default=True, help="Lowest severity that counts as critical")
@click.option("--source", type=click.Choice(["bundled", "webstatus"]), default=None,
              help="Feature data source (default: BASELINE_FEATURE_SOURCE or bundled)")
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
def scan(paths, target, fail_on, source, output_json):
    """Scan files or folders and fail on critical Baseline issues.

    Examples:
        baseline-check scan src/
        baseline-check scan src/ --target 2023 --fail-on warning
        baseline-check scan styles.css --json
    """
    scanner = ProjectScanner(build_linter(target, source))
    try:
        result = asyncio.run(scanner.scan(paths))
    except BaselineCheckerError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(2)

    threshold = _SEVERITY_RANK[fail_on]
    critical = [d for d in result.diagnostics if _SEVERITY_RANK[d.severity.value] >= threshold]

    if output_json:
        output = {
            "baseline_target": scanner.linter.target_baseline,
            "files": {path: r.to_dict() for path, r in result.files.items()},
            "report": result.report.to_dict(),
            "critical": len(critical),
        }
        click.echo(json.dumps(output, indent=2))
    else:
        _print_results(result, scanner.linter.target_baseline)
        if critical:
            console.print(f"\n[bold red]x {len(critical)} critical Baseline issue(s) found.[/bold red]")
        else:
            console.print("\n[green]+ Baseline check passed.[/green]")
    sys.exit(1 if critical else 0)


def _print_results(result, target):
    diagnostics = result.diagnostics
    if diagnostics:
        table = Table(title=f"Baseline {target} issues")
        table.add_column("Severity")
        table.add_column("Location")
        table.add_column("Feature")
        table.add_column("Status")
        table.add_column("Suggestion")
        for d in diagnostics:
            color = "red" if d.severity is Severity.ERROR else "yellow"
            where = f"{d.location.file or '-'}:{d.location.line or '-'}"
            table.add_row(
                f"[{color}]{d.severity.value}[/{color}]",
                where,
                d.feature_name,
                d.status,
                d.suggestions[0] if d.suggestions else "",
            )
        console.print(table)
    else:
        console.print("[green]No Baseline issues found.[/green]")

    report = result.report
    console.print(
        f"\nCompliance: [bold]{report.compliance:.1f}%[/bold] "
        f"({report.total_issues} issue(s), {report.critical_issues} error(s))"
    )
    for name, cat in report.categories.items():
        if cat.total:
            console.print(f"  {name}: {cat.issues}/{cat.total} file(s) with issues")


@cli.command(name="feature")
@click.argument("identifier")
@click.option("--source", type=click.Choice(["bundled", "webstatus"]), default=None)
@click.option("--json", "output_json", is_flag=True, help="Output result as JSON")
def feature(identifier, source, output_json):
    """Show the Baseline status of one feature."""
    linter = build_linter(source=source)
    try:
        asyncio.run(linter.initialize())
    except BaselineCheckerError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(2)
    result = linter.get_feature_status(identifier)
    if output_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return
    if result.record is None:
        console.print(f"[yellow]{result.reason}[/yellow]")
        for s in result.suggestions:
            console.print(f"  • {s}")
        return
    record = result.record
    console.print(f"[bold]{record.name}[/bold] ({record.id})")
    console.print(f"  Status: {status_label(record.status)} (risk: {risk_level(record.status)})")
    if record.available_since:
        console.print(f"  Since: {record.available_since}")
    for alt in record.alternatives:
        console.print(f"  Alternative: {alt}")
    for polyfill in record.polyfills:
        console.print(f"  Polyfill: {polyfill}")


@cli.command(name="stats")
@click.option("--source", type=click.Choice(["bundled", "webstatus"]), default=None)
def stats(source):
    """Show registry statistics."""
    linter = build_linter(source=source)
    try:
        asyncio.run(linter.initialize())
    except BaselineCheckerError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(2)
    table = Table(title="Feature registry")
    table.add_column("Status")
    table.add_column("Count", justify="right")
    for name, count in linter.registry.statistics().items():
        table.add_row(name, str(count))
    console.print(table)


def main():
    cli()


if __name__ == "__main__":
    main()
