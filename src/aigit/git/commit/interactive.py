"""Interactive commit interface for AI-Git."""

from __future__ import annotations

import logging
from enum import Enum

import questionary
from rich.console import Console, Group
from rich.markup import escape
from rich.padding import Padding
from rich.panel import Panel
from rich.text import Text

from .message import CommitMessage

logger = logging.getLogger(__name__)

# Width of the message preview, excluding border and padding
PREVIEW_WIDTH = 70


class ReviewAction(str, Enum):
	"""Choices offered while reviewing a generated message."""

	COMMIT = "commit"
	EDIT = "edit"
	CANCEL = "cancel"


class CommitUI:
	"""Interactive UI for the commit process."""

	def __init__(self, console: Console | None = None) -> None:
		"""Initialize the commit UI."""
		self.console = console or Console()

	def select_files(self, files: list[str], title: str = "Select files to stage:") -> list[str]:
		"""
		Ask the user which changed files to stage.

		Args:
		    files: Candidate paths
		    title: Prompt text

		Returns:
		    The chosen paths; empty when nothing was picked or the prompt was interrupted

		"""
		selected = questionary.checkbox(title, choices=files).ask()
		return list(selected or [])

	def display_message(self, message: CommitMessage) -> None:
		"""Show the current title and description."""
		body = Group(
			Text("Title:", style="bold magenta"),
			Padding(Text(message.title), (0, 0, 0, 2)),
			Text(""),
			Text("Description:", style="bold magenta"),
			Padding(Text(message.description), (0, 0, 0, 2)),
		)
		self.console.print(Panel(body, width=PREVIEW_WIDTH + 4, padding=(0, 1)))

	def get_user_action(self) -> ReviewAction:
		"""
		Get the user's choice for the displayed message.

		Returns:
		    ReviewAction; an interrupted prompt counts as CANCEL

		"""
		result = questionary.select(
			"Action",
			choices=[
				questionary.Choice("Commit", value=ReviewAction.COMMIT.value),
				questionary.Choice("Edit", value=ReviewAction.EDIT.value),
				questionary.Choice("Cancel", value=ReviewAction.CANCEL.value),
			],
			default=ReviewAction.COMMIT.value,
			use_arrow_keys=True,
		).ask()

		logger.debug("Review action: %s", result)
		if result is None:
			return ReviewAction.CANCEL
		return ReviewAction(result)

	def edit_message(self, message: CommitMessage) -> CommitMessage | None:
		"""
		Let the user edit title and description.

		Args:
		    message: Message to start from

		Returns:
		    The edited message, or None if the form was interrupted

		"""
		title = questionary.text("Title", default=message.title).ask()
		if title is None:
			return None
		description = questionary.text("Description", default=message.description).ask()
		if description is None:
			return None
		return CommitMessage(title=title, description=description)

	def confirm_push(self) -> bool:
		"""Ask whether to push after a successful commit."""
		return bool(questionary.confirm("Push changes?", default=False).ask())

	def show_success(self, message: str) -> None:
		"""
		Show a success message.

		Args:
		    message: Message to display

		"""
		self.console.print(f"[bold green]✓[/] {escape(message)}")

	def show_error(self, message: str) -> None:
		"""
		Show an error message.

		Args:
		    message: Error message to display

		"""
		self.console.print(f"[bold red]✗[/] {escape(message)}")

	def show_info(self, message: str) -> None:
		"""Show a neutral status line."""
		self.console.print(f"[yellow]{escape(message)}[/yellow]")
