"""Git utilities for AI-Git."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# A short-status line needs the two flag characters, a space and a path
MIN_STATUS_LINE_LENGTH = 3

# git log --pretty field separator
LOG_FIELD_SEPARATOR = "|"
LOG_FIELD_COUNT = 4


@dataclass
class CommitInfo:
	"""A single entry of the commit log."""

	hash: str
	message: str
	author: str
	time: str


class GitError(Exception):
	"""Custom exception for Git-related errors."""

	def __init__(self, message: str, returncode: int | None = None, stderr: str = "") -> None:
		"""
		Initialize the error.

		Args:
		    message: Human readable description
		    returncode: Exit code of the failed git process, if any
		    stderr: Captured standard error of the failed git process

		"""
		super().__init__(message)
		self.returncode = returncode
		self.stderr = stderr


def run_git_command(command: list[str], cwd: Path | None = None) -> str:
	"""
	Run a Git command and return its output.

	Args:
	    command: Git command to run
	    cwd: Working directory (optional)

	Returns:
	    Command output as string

	Raises:
	    GitError: If the command fails

	"""
	logger.debug("Running: %s", " ".join(command))
	try:
		result = subprocess.run(  # noqa: S603
			command,
			cwd=cwd,
			capture_output=True,
			text=True,
			check=True,
		)
	except subprocess.CalledProcessError as e:
		stderr = (e.stderr or "").strip()
		error_msg = f"Git command failed: {' '.join(command)} (exit status {e.returncode})"
		if stderr:
			error_msg += f"\nError: {stderr}"
		logger.debug(error_msg)
		raise GitError(error_msg, returncode=e.returncode, stderr=stderr) from e
	except OSError as e:
		error_msg = f"Could not run git: {e}"
		raise GitError(error_msg) from e
	else:
		return result.stdout


def is_repo(path: Path | None = None) -> bool:
	"""Return True when ``path`` (or the cwd) is inside a git work tree."""
	try:
		run_git_command(["git", "rev-parse", "--is-inside-work-tree"], path)
	except GitError:
		return False
	return True


def get_repo_root(path: Path | None = None) -> Path:
	"""
	Get the root directory of the Git repository.

	Args:
	    path: Optional path to start searching from

	Returns:
	    Path to repository root

	Raises:
	    GitError: If not in a Git repository

	"""
	try:
		result = run_git_command(["git", "rev-parse", "--show-toplevel"], path)
		return Path(result.strip())
	except GitError as e:
		msg = "Not in a Git repository"
		raise GitError(msg, returncode=e.returncode, stderr=e.stderr) from e


def get_status() -> str:
	"""Return the long-form ``git status`` output."""
	return run_git_command(["git", "status"])


def get_status_short() -> str:
	"""Return ``git status --short`` output."""
	return run_git_command(["git", "status", "--short"])


def get_staged_diff() -> str:
	"""Return the textual diff between the index and HEAD."""
	return run_git_command(["git", "diff", "--staged"])


def stage_file(path: str) -> None:
	"""Stage a single path."""
	run_git_command(["git", "add", path])
	logger.debug("Staged %s", path)


def stage_files(files: list[str]) -> None:
	"""
	Stage each path in turn.

	Args:
	    files: Paths to stage

	Raises:
	    GitError: On the first path git refuses; earlier paths stay staged

	"""
	for path in files:
		stage_file(path)


def create_commit(message: str) -> None:
	"""Create a commit with the given message."""
	run_git_command(["git", "commit", "-m", message])
	logger.info("Created commit with message: %s", message.splitlines()[0] if message else "")


def push() -> None:
	"""Push the current branch to its remote."""
	run_git_command(["git", "push"])


def pull() -> None:
	"""Fetch and merge remote changes."""
	run_git_command(["git", "pull"])


def get_branches() -> tuple[list[str], str]:
	"""
	List local branches.

	Returns:
	    Tuple of (all branch names, current branch name). The current branch
	    is an empty string when HEAD is detached from any listed branch.

	"""
	output = run_git_command(["git", "branch"])
	branches: list[str] = []
	current = ""
	for line in output.splitlines():
		name = line.strip()
		if not name:
			continue
		if name.startswith("* "):
			name = name[2:]
			current = name
		branches.append(name)
	return branches, current


def checkout(ref: str) -> None:
	"""Check out a branch or other ref."""
	run_git_command(["git", "checkout", ref])


def create_branch(name: str) -> None:
	"""Create a branch and switch to it."""
	run_git_command(["git", "checkout", "-b", name])


def delete_branch(name: str) -> None:
	"""Force-delete a local branch."""
	run_git_command(["git", "branch", "-D", name])


def get_log(limit: int = 10) -> list[CommitInfo]:
	"""
	Return the most recent commits.

	Args:
	    limit: Maximum number of commits to return

	Returns:
	    Commits, newest first. Lines that do not split into all four fields are skipped.

	"""
	output = run_git_command(["git", "log", f"-n{limit}", "--pretty=format:%h|%s|%an|%ar"])
	commits = []
	for line in output.splitlines():
		parts = line.split(LOG_FIELD_SEPARATOR)
		if len(parts) < LOG_FIELD_COUNT:
			continue
		# Subjects may contain the separator; author and time never do
		commits.append(
			CommitInfo(
				hash=parts[0],
				message=LOG_FIELD_SEPARATOR.join(parts[1:-2]),
				author=parts[-2],
				time=parts[-1],
			)
		)
	return commits


def checkout_commit(commit_hash: str) -> None:
	"""
	Check out a specific commit (detached HEAD).

	Raises:
	    GitError: With git's stderr attached, e.g. for a dirty working tree

	"""
	run_git_command(["git", "checkout", commit_hash])


def parse_status_files(status: str) -> list[str]:
	"""
	Extract file paths from ``git status --short`` output.

	Args:
	    status: Short-status text, one entry per line

	Returns:
	    Paths in the order git listed them

	"""
	files = []
	for line in status.split("\n"):
		trimmed = line.strip()
		if not trimmed:
			continue
		if len(trimmed) > MIN_STATUS_LINE_LENGTH:
			files.append(line[2:].strip())
	return files
