"""Command-line interface package for commitlint."""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from commitlint import __version__
from commitlint.utils.log_setup import setup_logging

from .config_cmd import register_command as register_config_command
from .lint_cmd import register_command as register_lint_command

logger = logging.getLogger(__name__)

app = typer.Typer(
	help=f"commitlint - Lint commit messages against the repository conventions\n\nVersion: {__version__}",
	no_args_is_help=True,
	context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"commitlint version: {__version__}")
		raise typer.Exit


@app.callback(invoke_without_command=True)
def global_options(
	ctx: typer.Context,
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	log_file: Annotated[
		Path | None,
		typer.Option("--log-file", help="Also write logs to this file."),
	] = None,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options and logging setup."""
	ctx.meta["is_verbose"] = is_verbose
	setup_logging(is_verbose=is_verbose, log_file_path=log_file)


register_lint_command(app)
register_config_command(app)


def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
