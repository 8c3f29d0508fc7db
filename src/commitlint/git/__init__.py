"""Git access for reading commit messages to lint."""

from .utils import GitCommitSource, GitError, find_repo_root, read_message_file

__all__ = ["GitCommitSource", "GitError", "find_repo_root", "read_message_file"]
