"""Formatting of lint reports for terminal output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from .config import RuleLevel

if TYPE_CHECKING:
	from collections.abc import Sequence

	from .linter import LintReport

INPUT_SIGN = "⧗"
ERROR_SIGN = "✖"
WARNING_SIGN = "⚠"
SUCCESS_SIGN = "✔"
HELP_SIGN = "ⓘ"

_STYLES = {
	ERROR_SIGN: "bold red",
	WARNING_SIGN: "bold yellow",
	SUCCESS_SIGN: "bold green",
	INPUT_SIGN: "dim",
	HELP_SIGN: "cyan",
}


def _line(sign: str, message: str) -> Text:
	text = Text()
	text.append(sign, style=_STYLES.get(sign))
	text.append(f"   {message}")
	return text


def format_report(report: LintReport, help_url: str | None = None, verbose: bool = False) -> list[Text]:
	"""
	Format a single lint report.

	Valid reports produce no lines unless verbose is set.

	Args:
	    report: Report to format
	    help_url: Help URL appended to failing reports
	    verbose: Also format reports without problems

	Returns:
	    List of rich Text lines

	"""
	if not report.problems and not verbose:
		return []

	header = report.input.split("\n", 1)[0] if report.input else ""
	lines = [_line(INPUT_SIGN, f"input: {header}")]

	if report.ignored:
		lines.append(_line(SUCCESS_SIGN, "ignored"))
		return lines

	for problem in report.problems:
		sign = ERROR_SIGN if problem.level is RuleLevel.ERROR else WARNING_SIGN
		lines.append(_line(sign, str(problem)))

	sign = ERROR_SIGN if report.errors else WARNING_SIGN if report.warnings else SUCCESS_SIGN
	lines.append(Text())
	lines.append(_line(sign, f"found {len(report.errors)} problems, {len(report.warnings)} warnings"))

	if help_url and report.problems:
		lines.append(_line(HELP_SIGN, f"Get help: {help_url}"))

	return lines


def format_reports(reports: Sequence[LintReport], help_url: str | None = None, verbose: bool = False) -> str:
	"""Format several reports as plain text, separated by blank lines."""
	blocks = []
	for report in reports:
		lines = format_report(report, help_url=help_url, verbose=verbose)
		if lines:
			blocks.append("\n".join(line.plain for line in lines))
	return "\n\n".join(blocks)
