"""Commit linter that evaluates a lint configuration against commit messages."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from commitlint.utils.config_loader import ConfigError, ConfigLoader

from .config import CommitLintConfig, Rule, RuleLevel
from .constants import DEFAULT_IGNORE_PATTERNS
from .parser import CommitMessage, parse_commit_message
from .validators import RULES

if TYPE_CHECKING:
	from collections.abc import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LintProblem:
	"""A single rule violation."""

	rule: str
	level: RuleLevel
	message: str

	def __str__(self) -> str:
		"""Render the problem the way it is shown to users."""
		return f"{self.message} [{self.rule}]"


@dataclass
class LintReport:
	"""Outcome of linting a single commit message."""

	input: str
	errors: list[LintProblem] = field(default_factory=list)
	warnings: list[LintProblem] = field(default_factory=list)
	ignored: bool = False

	@property
	def valid(self) -> bool:
		"""A report is valid when no error-level rule failed."""
		return not self.errors

	@property
	def problems(self) -> list[LintProblem]:
		"""Errors followed by warnings."""
		return [*self.errors, *self.warnings]


class CommitLinter:
	"""
	Lints commit messages against a CommitLintConfig.

	The configuration comes from, in order of preference, an explicit
	CommitLintConfig, a config file path, a ConfigLoader, or the shared
	ConfigLoader instance.

	"""

	def __init__(
		self,
		allowed_types: list[str] | None = None,
		config: CommitLintConfig | None = None,
		config_path: str | None = None,
		config_loader: ConfigLoader | None = None,
	) -> None:
		"""
		Initialize the linter.

		Args:
		    allowed_types: Override list of allowed commit types
		    config: Pre-configured CommitLintConfig object
		    config_path: Path to a configuration file
		    config_loader: ConfigLoader instance for configuration

		Raises:
		    ConfigError: If the configuration is invalid

		"""
		if config is None:
			if config_loader is None:
				config_loader = ConfigLoader(config_path) if config_path else ConfigLoader.get_instance()
			config = CommitLintConfig.from_dict(config_loader.get_lint_config())

		if allowed_types is not None:
			rules = {**config.rules, "type-enum": [RuleLevel.ERROR, "always", list(allowed_types)]}
			config = replace(config, rules=rules)

		self.config = config
		self._ignore_patterns = [re.compile(pattern) for pattern in config.ignores]

	@property
	def help_url(self) -> str | None:
		"""Help URL shown alongside failures."""
		return self.config.help_url

	def is_ignored(self, message: str) -> bool:
		"""Check whether a message is exempt from linting."""
		patterns: Iterable[re.Pattern[str]] = self._ignore_patterns
		if self.config.default_ignores:
			patterns = [*DEFAULT_IGNORE_PATTERNS, *self._ignore_patterns]
		return any(pattern.search(message) for pattern in patterns)

	def check(self, message: str) -> LintReport:
		"""
		Lint a commit message and return a detailed report.

		Rule descriptors are resolved on every call, so rules declared as
		functions are evaluated against the current configuration each time.

		Args:
		    message: The raw commit message

		Returns:
		    LintReport: Errors and warnings found in the message

		Raises:
		    ConfigError: If a rule descriptor or value is invalid

		"""
		commit = parse_commit_message(message)
		report = LintReport(input=commit.raw)

		if self.is_ignored(commit.raw):
			logger.debug("Commit message is ignored: %s", commit.header)
			report.ignored = True
			return report

		if commit.is_empty:
			report.errors.append(LintProblem("message-empty", RuleLevel.ERROR, "commit message may not be empty"))
			return report

		for rule in self.config.resolve().values():
			if not rule.enabled:
				continue
			problem = self._apply_rule(rule, commit)
			if problem is None:
				continue
			if problem.level is RuleLevel.ERROR:
				report.errors.append(problem)
			else:
				report.warnings.append(problem)

		logger.debug(
			"Linted '%s': %d errors, %d warnings", commit.header, len(report.errors), len(report.warnings)
		)
		return report

	def _apply_rule(self, rule: Rule, commit: CommitMessage) -> LintProblem | None:
		func = RULES.get(rule.name)
		if func is None:
			logger.warning("Unknown rule '%s' is skipped", rule.name)
			return None

		try:
			valid, message = func(commit, rule.condition, rule.value)
		except (TypeError, ValueError) as e:
			msg = f"Invalid value for rule '{rule.name}': {rule.value!r} ({e})"
			raise ConfigError(msg) from e

		if valid:
			return None
		return LintProblem(rule.name, rule.level, message)

	def lint(self, message: str) -> tuple[bool, list[str]]:
		"""
		Lint a commit message.

		Args:
		    message: The commit message to lint

		Returns:
		    Tuple of (is_valid, list of problem messages)

		"""
		report = self.check(message)
		return report.valid, [str(problem) for problem in report.problems]

	def lint_many(self, messages: Iterable[str]) -> list[LintReport]:
		"""Lint several messages, one report per message."""
		return [self.check(message) for message in messages]
