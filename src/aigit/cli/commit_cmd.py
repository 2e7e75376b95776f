"""Commands for generating commit messages from the staged diff."""

from __future__ import annotations

import logging

import typer

from aigit.config import ConfigError, ConfigLoader, load_repo_config
from aigit.git.commit import CommitCommand
from aigit.git.utils import GitError, get_repo_root
from aigit.llm import ProviderError
from aigit.utils.cli_utils import exit_with_error, handle_keyboard_interrupt, show_title, show_warning

logger = logging.getLogger(__name__)


def register_command(app: typer.Typer) -> None:
	"""Register the commit and sync commands with the CLI app."""

	@app.command(name="commit")
	def commit_command() -> None:
		"""Generate a commit message with AI, review it and commit."""
		_run_commit(push_after=False)

	@app.command(name="sync")
	def sync_command() -> None:
		"""Commit with an AI message, then offer to push."""
		_run_commit(push_after=True)


def _run_commit(push_after: bool) -> None:
	"""Load configuration once and drive the commit workflow."""
	show_title("AI Commit")
	try:
		repo_root = get_repo_root()
		config = ConfigLoader().load()
		try:
			repo_config = load_repo_config(repo_root)
		except ConfigError as e:
			logger.debug("Ignoring repository configuration", exc_info=True)
			show_warning(f"{e}\nUsing the global configuration only.")
			repo_config = None

		workflow = CommitCommand(config=config, repo_config=repo_config)
		state = workflow.sync() if push_after else workflow.run()
		logger.debug("Commit workflow finished in state %s", state.value)
	except KeyboardInterrupt:
		handle_keyboard_interrupt()
	except ConfigError as e:
		exit_with_error(str(e))
	except ProviderError as e:
		exit_with_error(f"Error generating message: {e}")
	except GitError as e:
		exit_with_error("Git operation failed.", exception=e)
