"""Parser for conventional commit messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .constants import BREAKING_CHANGE_TOKENS, COMMENT_CHAR, FOOTER_PATTERN, HEADER_PATTERN

logger = logging.getLogger(__name__)


@dataclass
class CommitMessage:
	"""A commit message split into its conventional commit parts."""

	raw: str
	header: str = ""
	type: str | None = None
	scope: str | None = None
	subject: str | None = None
	body: str | None = None
	footer: str | None = None
	breaking: bool = False
	notes: list[tuple[str, str]] = field(default_factory=list)
	body_leading_blank: bool = True
	footer_leading_blank: bool = True

	@property
	def is_empty(self) -> bool:
		"""Whether the message has no content at all."""
		return not self.header.strip()

	@property
	def body_lines(self) -> list[str]:
		"""Lines of the body, empty when there is none."""
		return self.body.splitlines() if self.body else []

	@property
	def footer_lines(self) -> list[str]:
		"""Lines of the footer, empty when there is none."""
		return self.footer.splitlines() if self.footer else []


def strip_comments(message: str) -> str:
	"""
	Drop git comment lines and trailing blank lines from a message.

	Everything below git's scissors line is removed as well.

	"""
	lines = []
	for line in message.replace("\r\n", "\n").split("\n"):
		if line.startswith(f"{COMMENT_CHAR} ------------------------ >8"):
			break
		if line.startswith(COMMENT_CHAR):
			continue
		lines.append(line.rstrip("\r"))

	while lines and not lines[-1].strip():
		lines.pop()
	while lines and not lines[0].strip():
		lines.pop(0)
	return "\n".join(lines)


def _split_footer(lines: list[str]) -> tuple[list[str], list[str]]:
	"""
	Split the lines after the header into body and footer lines.

	The footer starts at the first line matching a footer token that begins a
	paragraph (or directly follows the header).

	"""
	for index, line in enumerate(lines):
		previous_blank = index == 0 or not lines[index - 1].strip()
		if previous_blank and FOOTER_PATTERN.match(line):
			return lines[:index], lines[index:]
	return lines, []


def parse_commit_message(message: str) -> CommitMessage:
	"""
	Parse a raw commit message.

	Args:
	    message: The raw commit message, possibly with git comments

	Returns:
	    CommitMessage: The parsed message. Header parts are None when the
	    header does not follow the conventional commit format.

	"""
	text = strip_comments(message)
	commit = CommitMessage(raw=text)
	if not text:
		return commit

	lines = text.split("\n")
	commit.header = lines[0]

	match = HEADER_PATTERN.match(commit.header.strip())
	if match:
		commit.type = match.group("type") or None
		scope = match.group("scope")
		commit.scope = scope if scope else None
		commit.subject = match.group("subject") or None
		commit.breaking = bool(match.group("breaking"))
	else:
		logger.debug("Header does not follow the conventional format: %s", commit.header)

	rest = lines[1:]
	if not rest:
		return commit

	body_lines, footer_lines = _split_footer(rest)

	if body_lines:
		commit.body_leading_blank = not body_lines[0].strip()
		body = "\n".join(body_lines).strip("\n")
		commit.body = body or None

	if footer_lines:
		preceding = body_lines if body_lines else []
		commit.footer_leading_blank = bool(preceding) and not preceding[-1].strip()
		commit.footer = "\n".join(footer_lines)
		for line in footer_lines:
			footer_match = FOOTER_PATTERN.match(line)
			if footer_match:
				token = footer_match.group("token")
				commit.notes.append((token, footer_match.group("value")))
				if token in BREAKING_CHANGE_TOKENS:
					commit.breaking = True

	return commit
