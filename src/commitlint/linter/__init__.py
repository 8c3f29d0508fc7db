"""
Commit linter package for validating git commit messages according to conventional commits.

This package provides modules for parsing, validating, and configuring
commit message linting.

"""

from pathlib import Path

from commitlint.utils.config_loader import ConfigLoader

from .config import CommitLintConfig, Rule, RuleCondition, RuleLevel
from .constants import DEFAULT_TYPES
from .linter import CommitLinter, LintProblem, LintReport
from .parser import CommitMessage, parse_commit_message

__all__ = [
	"DEFAULT_TYPES",
	"CommitLintConfig",
	"CommitLinter",
	"CommitMessage",
	"LintProblem",
	"LintReport",
	"Rule",
	"RuleCondition",
	"RuleLevel",
	"create_linter",
	"parse_commit_message",
]


def create_linter(
	allowed_types: list[str] | None = None,
	config: CommitLintConfig | None = None,
	config_path: str | None = None,
	config_loader: ConfigLoader | None = None,
	repo_root: Path | None = None,
) -> CommitLinter:
	"""
	Create a CommitLinter with the configuration sources wired up.

	Args:
	    allowed_types: Override list of allowed commit types
	    config: Pre-configured CommitLintConfig object
	    config_path: Path to a configuration file
	    config_loader: ConfigLoader instance for configuration
	    repo_root: Repository root path, used to find .commitlint.yml

	Returns:
	    CommitLinter: Configured commit linter instance

	"""
	# Create a ConfigLoader if not provided, but repo_root is
	if config_loader is None and config_path is None and repo_root is not None:
		config_loader = ConfigLoader(repo_root=repo_root)

	return CommitLinter(
		allowed_types=allowed_types,
		config=config,
		config_path=config_path,
		config_loader=config_loader,
	)
