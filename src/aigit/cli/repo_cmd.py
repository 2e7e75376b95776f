"""Plain git commands: status, add, push and pull."""

from __future__ import annotations

import logging
from typing import Annotated

import typer

from aigit.git.commit import CommitUI
from aigit.git.utils import (
	GitError,
	get_status,
	get_status_short,
	parse_status_files,
	pull,
	push,
	stage_file,
	stage_files,
)
from aigit.utils.cli_utils import (
	exit_with_error,
	handle_keyboard_interrupt,
	run_with_spinner,
	show_success,
	show_title,
)

logger = logging.getLogger(__name__)

PathArg = Annotated[
	str | None,
	typer.Argument(help="Path to stage. Omit to pick files interactively."),
]


def register_command(app: typer.Typer) -> None:
	"""Register the status, add, push and pull commands with the CLI app."""

	@app.command(name="status")
	def status_command() -> None:
		"""Show repository status."""
		try:
			typer.echo(get_status(), nl=False)
		except GitError as e:
			exit_with_error("Could not read repository status.", exception=e)

	@app.command(name="add")
	def add_command(path: PathArg = None) -> None:
		"""Stage changes (run without a path for interactive mode)."""
		try:
			if path:
				stage_file(path)
				show_success(f"Added {path}")
				return
			_interactive_add()
		except KeyboardInterrupt:
			handle_keyboard_interrupt()
		except GitError as e:
			exit_with_error("Error staging files.", exception=e)

	@app.command(name="push")
	def push_command() -> None:
		"""Push commits to remote."""
		try:
			run_with_spinner("Pushing changes...", push)
		except KeyboardInterrupt:
			handle_keyboard_interrupt()
		except GitError as e:
			exit_with_error("Push failed.", exception=e)
		show_success("Pushed successfully.")

	@app.command(name="pull")
	def pull_command() -> None:
		"""Fetch and merge remote changes."""
		try:
			run_with_spinner("Pulling changes...", pull)
		except KeyboardInterrupt:
			handle_keyboard_interrupt()
		except GitError as e:
			exit_with_error("Pull failed.", exception=e)
		show_success("Pulled successfully.")


def _interactive_add() -> None:
	"""Pick changed files from a multi-select and stage them."""
	show_title("Interactive Stage")
	files = parse_status_files(get_status_short())
	if not files:
		show_success("No changed files to stage.")
		return

	ui = CommitUI()
	selected = ui.select_files(files)
	if not selected:
		ui.show_info("No files selected.")
		return

	run_with_spinner("Staging files...", stage_files, selected)
	logger.debug("Staged %d file(s)", len(selected))
	show_success("Files staged successfully.")
