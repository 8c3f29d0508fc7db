"""Command for linting commit messages."""

import logging
from pathlib import Path
from typing import Annotated

import typer

logger = logging.getLogger(__name__)

# --- Command Argument Annotations ---

MessageArg = Annotated[
	str | None,
	typer.Argument(help="Commit message to lint. Read from stdin when no other source is given."),
]

EditFlag = Annotated[
	bool, typer.Option("--edit", "-e", help="Lint the message of the commit being created (COMMIT_EDITMSG).")
]

EditFileOpt = Annotated[
	Path | None,
	typer.Option("--edit-file", help="Lint the message in this file, as passed to a commit-msg hook."),
]

FromOpt = Annotated[str | None, typer.Option("--from", help="Lower end of the commit range to lint (exclusive).")]

ToOpt = Annotated[str | None, typer.Option("--to", help="Upper end of the commit range to lint.")]

LastFlag = Annotated[bool, typer.Option("--last", help="Lint the message of the last commit.")]

ConfigOpt = Annotated[
	Path | None,
	typer.Option("--config", "-c", help="Path to a .commitlint.yml configuration file."),
]

StrictFlag = Annotated[bool, typer.Option("--strict", help="Exit with code 2 when only warnings are found.")]

QuietFlag = Annotated[bool, typer.Option("--quiet", "-q", help="Do not print the report.")]

# --- Registration Function ---


def register_command(app: typer.Typer) -> None:
	"""Register the lint command with the CLI app."""

	@app.command(name="lint")
	def lint_command(
		ctx: typer.Context,
		message: MessageArg = None,
		edit: EditFlag = False,
		edit_file: EditFileOpt = None,
		from_ref: FromOpt = None,
		to_ref: ToOpt = None,
		last: LastFlag = False,
		config_file: ConfigOpt = None,
		strict: StrictFlag = False,
		quiet: QuietFlag = False,
	) -> None:
		"""
		Lint one or more commit messages.

		Exits with 0 when all messages pass, 1 when any error-level rule
		fails and 2 in strict mode when only warnings were found.

		"""
		_lint_command_impl(
			message=message,
			edit=edit,
			edit_file=edit_file,
			from_ref=from_ref,
			to_ref=to_ref,
			last=last,
			config_file=config_file,
			strict=strict,
			quiet=quiet,
			is_verbose=bool(ctx.meta.get("is_verbose", False)),
		)


# --- Implementation Function ---


def _collect_messages(
	message: str | None,
	edit: bool,
	edit_file: Path | None,
	from_ref: str | None,
	to_ref: str | None,
	last: bool,
	default_edit_file: str | None,
	default_to: str,
) -> list[str]:
	"""Gather the messages to lint from the argument, git or stdin."""
	from commitlint.git import GitCommitSource, read_message_file

	if message is not None:
		return [message]

	if edit_file:
		return [read_message_file(edit_file)]

	if edit:
		return [GitCommitSource().read_edit_message(default_edit_file)]

	if from_ref or to_ref:
		source = GitCommitSource()
		return source.get_commit_messages(from_ref, to_ref or default_to)

	if last:
		return [GitCommitSource().get_last_commit_message()]

	stdin = typer.get_text_stream("stdin")
	if stdin.isatty():
		return []
	return [stdin.read()]


def _lint_command_impl(
	message: str | None,
	edit: bool,
	edit_file: Path | None,
	from_ref: str | None,
	to_ref: str | None,
	last: bool,
	config_file: Path | None,
	strict: bool,
	quiet: bool,
	is_verbose: bool,
) -> None:
	"""Actual implementation of the lint command."""
	from rich.console import Console

	from commitlint.git import GitError, find_repo_root
	from commitlint.linter import CommitLinter, CommitLintConfig
	from commitlint.linter.constants import EXIT_ERRORS, EXIT_WARNINGS_STRICT
	from commitlint.linter.formatter import format_report
	from commitlint.utils.cli_utils import exit_with_error, handle_keyboard_interrupt, show_warning
	from commitlint.utils.config_loader import ConfigError, ConfigLoader

	console = Console(soft_wrap=True)

	try:
		config = ConfigLoader.get_instance(
			str(config_file) if config_file else None, reload=True, repo_root=find_repo_root()
		)
		if strict:
			config.set("output.strict", True)
		output_config = config.get_output_config()
		linter = CommitLinter(config=CommitLintConfig.from_dict(config.get_lint_config()))

		messages = _collect_messages(
			message=message,
			edit=edit,
			edit_file=edit_file,
			from_ref=from_ref,
			to_ref=to_ref,
			last=last,
			default_edit_file=config.get("git.edit_file"),
			default_to=config.get("git.default_to", "HEAD"),
		)
		if not messages and (from_ref or to_ref):
			show_warning(f"No commits found between '{from_ref or 'root'}' and '{to_ref or 'HEAD'}'.")
			return
		if not messages:
			exit_with_error("No commit message to lint. Pass a message, --edit, --from/--to, --last or pipe one in.")

		reports = linter.lint_many(messages)
	except KeyboardInterrupt:
		handle_keyboard_interrupt()
	except ConfigError as e:
		exit_with_error("Invalid commitlint configuration.", exception=e)
	except GitError as e:
		exit_with_error("Could not read commit messages from git.", exception=e)

	show_valid = is_verbose or bool(output_config.get("verbose", False))
	if not quiet:
		for report in reports:
			for line in format_report(report, help_url=linter.help_url, verbose=show_valid):
				console.print(line)

	has_errors = any(not report.valid for report in reports)
	has_warnings = any(report.warnings for report in reports)
	logger.debug("Linted %d messages (errors: %s, warnings: %s)", len(reports), has_errors, has_warnings)

	if has_errors:
		raise typer.Exit(EXIT_ERRORS)
	if has_warnings and output_config.get("strict", False):
		raise typer.Exit(EXIT_WARNINGS_STRICT)
