"""Tests for lint report formatting."""

from __future__ import annotations

import pytest

from commitlint.config import DEFAULT_CONFIG, HELP_URL
from commitlint.linter import CommitLintConfig, CommitLinter
from commitlint.linter.formatter import format_report, format_reports


@pytest.fixture
def linter() -> CommitLinter:
	"""Linter using the repository defaults."""
	return CommitLinter(config=CommitLintConfig.from_dict(DEFAULT_CONFIG["lint"]))


@pytest.mark.unit
class TestFormatReport:
	"""Formatting of single reports."""

	def test_failing_report(self, linter: CommitLinter) -> None:
		"""Errors are listed with the rule name, a summary and the help URL."""
		report = linter.check("foo(core): add foo")

		lines = [line.plain for line in format_report(report, help_url=HELP_URL)]

		assert lines == [
			"⧗   input: foo(core): add foo",
			"✖   type must be one of [feat, fix, refactor, chore, test, doc, release, revert] [type-enum]",
			"",
			"✖   found 1 problems, 0 warnings",
			f"ⓘ   Get help: {HELP_URL}",
		]

	def test_valid_report_is_silent(self, linter: CommitLinter) -> None:
		"""Valid reports print nothing unless verbose."""
		report = linter.check("feat(core): add foo")

		assert format_report(report, help_url=HELP_URL) == []

	def test_valid_report_verbose(self, linter: CommitLinter) -> None:
		"""Verbose output confirms valid messages without the help URL."""
		report = linter.check("feat(core): add foo")

		lines = [line.plain for line in format_report(report, help_url=HELP_URL, verbose=True)]

		assert lines[-1] == "✔   found 0 problems, 0 warnings"
		assert not any("Get help" in line for line in lines)

	def test_warning_report(self, linter: CommitLinter) -> None:
		"""Warnings use the warning sign."""
		report = linter.check("fix(core): handle null\nbody")

		lines = [line.plain for line in format_report(report)]

		assert "⚠   body must have leading blank line [body-leading-blank]" in lines
		assert lines[-1] == "⚠   found 0 problems, 1 warnings"

	def test_format_reports_joins_blocks(self, linter: CommitLinter) -> None:
		"""Only reports with output are joined."""
		reports = linter.lint_many(["feat(core): add foo", "feat(ui): add foo", "foo: add foo"])

		text = format_reports(reports, help_url=HELP_URL)

		assert "input: feat(core): add foo" not in text
		assert "[scope-enum]" in text
		assert "[type-enum]" in text
		assert text.count("Get help") == 2
