"""Git utilities for AI-Git."""

from aigit.git.utils import CommitInfo, GitError, parse_status_files, run_git_command

__all__ = [
	"CommitInfo",
	"GitError",
	"parse_status_files",
	"run_git_command",
]
