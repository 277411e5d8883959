"""Human-readable rendering of lint reports."""
from typing import List, Optional

from rich.markup import escape

from .models import LintReport, RuleResult

INPUT_SIGN = "⧗"
ERROR_SIGN = "✖"
WARNING_SIGN = "⚠"
SUCCESS_SIGN = "✔"
HELP_SIGN = "ⓘ"

def _problem_line(result: RuleResult, sign: str, color: str) -> str:
    return f"[{color}]{sign}[/{color}]   {escape(result.message)} [dim]{escape(f'[{result.name}]')}[/dim]"

def format_report(report: LintReport, verbose: bool = False, help_url: Optional[str] = None) -> List[str]:
    """Format a report as rich-markup lines.

    Valid reports without warnings produce no output unless ``verbose`` is set.
    """
    if report.valid and not report.warnings and not verbose:
        return []

    header = report.input.split("\n", 1)[0]
    lines = [f"[dim]{INPUT_SIGN}   input:[/dim] [bold]{escape(header)}[/bold]"]
    lines.extend(_problem_line(error, ERROR_SIGN, "red") for error in report.errors)
    lines.extend(_problem_line(warning, WARNING_SIGN, "yellow") for warning in report.warnings)

    if report.errors:
        sign, color = ERROR_SIGN, "red"
    elif report.warnings:
        sign, color = WARNING_SIGN, "yellow"
    else:
        sign, color = SUCCESS_SIGN, "green"
    lines.append("")
    lines.append(
        f"[{color}]{sign}   found {len(report.errors)} problems, {len(report.warnings)} warnings[/{color}]"
    )

    if help_url and report.problem_count:
        lines.append(f"[dim]{HELP_SIGN}   Get help: {escape(help_url)}[/dim]")
    return lines

def format_plain(report: LintReport) -> List[str]:
    """Format a report without markup, one problem per line."""
    header = report.input.split("\n", 1)[0]
    status = "valid" if report.valid else "invalid"
    lines = [f"{status}: {header} ({len(report.errors)} errors, {len(report.warnings)} warnings)"]
    lines.extend(f"  error [{error.name}] {error.message}" for error in report.errors)
    lines.extend(f"  warning [{warning.name}] {warning.message}" for warning in report.warnings)
    return lines
