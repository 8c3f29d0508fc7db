"""Git utilities for reading commit messages with pygit2."""

from __future__ import annotations

import logging
from pathlib import Path

from pygit2 import Commit, discover_repository
from pygit2 import GitError as Pygit2GitError
from pygit2.enums import SortMode
from pygit2.repository import Repository

logger = logging.getLogger(__name__)

DEFAULT_EDIT_FILE = "COMMIT_EDITMSG"


class GitError(Exception):
	"""Custom exception for Git-related errors."""


def read_message_file(path: str | Path) -> str:
	"""
	Read a commit message file.

	Raises:
	    GitError: If the file cannot be read

	"""
	path = Path(path)
	try:
		return path.read_text(encoding="utf-8")
	except OSError as e:
		msg = f"Could not read commit message file {path}: {e}"
		logger.exception(msg)
		raise GitError(msg) from e


def find_repo_root(path: Path | None = None) -> Path | None:
	"""
	Find the working tree root of the repository containing a path.

	Args:
	    path: Any path, defaults to the current directory

	Returns:
	    The working tree root, or None outside a repository or in a bare one

	"""
	git_dir = discover_repository(str(path or Path.cwd()))
	if git_dir is None:
		return None
	workdir = Repository(git_dir).workdir
	return Path(workdir) if workdir else None


class GitCommitSource:
	"""Reads commit messages from a Git repository using pygit2."""

	def __init__(self, path: Path | None = None) -> None:
		"""
		Open the repository containing the given path.

		Args:
		    path: Any path inside the repository, defaults to the current directory

		Raises:
		    GitError: If the path is not inside a Git repository

		"""
		git_dir = discover_repository(str(path or Path.cwd()))
		if git_dir is None:
			msg = f"Not a git repository: {path or Path.cwd()}"
			logger.error(msg)
			raise GitError(msg)
		self.repo = Repository(git_dir)

	@property
	def git_dir(self) -> Path:
		"""Path of the .git directory."""
		return Path(self.repo.path)

	def read_edit_message(self, edit_file: str | Path | None = None) -> str:
		"""
		Read the message of a commit being created.

		Args:
		    edit_file: Message file. Defaults to COMMIT_EDITMSG in the git
		        directory. Any other relative path that does not exist from the
		        current directory is resolved against the git directory.

		Returns:
		    The file content

		Raises:
		    GitError: If the file cannot be read

		"""
		if edit_file is None or str(edit_file) == DEFAULT_EDIT_FILE:
			return read_message_file(self.git_dir / DEFAULT_EDIT_FILE)

		path = Path(edit_file)
		if not path.is_absolute() and not path.exists():
			path = self.git_dir / path
		return read_message_file(path)

	def _resolve_commit(self, ref: str) -> Commit:
		try:
			return self.repo.revparse_single(ref).peel(Commit)
		except (KeyError, ValueError, Pygit2GitError) as e:
			msg = f"Could not resolve '{ref}' to a commit"
			logger.exception(msg)
			raise GitError(msg) from e

	def get_commit_messages(self, from_ref: str | None = None, to_ref: str = "HEAD") -> list[str]:
		"""
		Get full commit messages in the range from_ref..to_ref.

		Commits reachable from to_ref but not from from_ref are returned,
		oldest first. Without from_ref the whole history of to_ref is returned.

		Raises:
		    GitError: If a reference cannot be resolved

		"""
		head = self._resolve_commit(to_ref)
		walker = self.repo.walk(head.id, SortMode.TOPOLOGICAL | SortMode.REVERSE)
		if from_ref:
			walker.hide(self._resolve_commit(from_ref).id)

		messages = [commit.message for commit in walker]
		logger.info("Found %d commits between '%s' and '%s'", len(messages), from_ref or "root", to_ref)
		return messages

	def get_last_commit_message(self) -> str:
		"""
		Get the message of the commit HEAD points to.

		Raises:
		    GitError: If HEAD does not point to a commit

		"""
		if self.repo.head_is_unborn:
			msg = "Repository has no commits yet"
			raise GitError(msg)
		return self._resolve_commit("HEAD").message
