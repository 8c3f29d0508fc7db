"""Command for printing the resolved lint configuration."""

from pathlib import Path
from typing import Annotated

import typer

ConfigOpt = Annotated[
	Path | None,
	typer.Option("--config", "-c", help="Path to a .commitlint.yml configuration file."),
]


def register_command(app: typer.Typer) -> None:
	"""Register the print-config command with the CLI app."""

	@app.command(name="print-config")
	def print_config_command(config_file: ConfigOpt = None) -> None:
		"""Print the lint configuration with presets and rule functions resolved."""
		_print_config_impl(config_file)


def _print_config_impl(config_file: Path | None) -> None:
	"""Actual implementation of the print-config command."""
	import yaml

	from commitlint.git import find_repo_root
	from commitlint.linter import CommitLintConfig
	from commitlint.utils.cli_utils import exit_with_error
	from commitlint.utils.config_loader import ConfigError, ConfigLoader

	try:
		loader = ConfigLoader.get_instance(
			str(config_file) if config_file else None, reload=True, repo_root=find_repo_root()
		)
		lint_config = CommitLintConfig.from_dict(loader.get_lint_config())
		rules = lint_config.resolve()
	except ConfigError as e:
		exit_with_error("Invalid commitlint configuration.", exception=e)

	document = {
		"extends": lint_config.extends,
		"rules": {name: list(rules[name].as_tuple()) for name in sorted(rules)},
		"help_url": lint_config.help_url,
		"default_ignores": lint_config.default_ignores,
		"ignores": lint_config.ignores,
	}
	typer.echo(yaml.safe_dump(document, sort_keys=False, default_flow_style=None))
