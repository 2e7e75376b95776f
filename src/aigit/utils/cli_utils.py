"""Utility functions for CLI operations in AI-Git."""

from __future__ import annotations

import contextlib
import logging
import os
import threading
from typing import TYPE_CHECKING, Any, NoReturn, Self, TypeVar

import typer
from rich.markup import escape
from rich.panel import Panel

from aigit.utils.log_setup import console, display_error_summary, display_warning_summary

if TYPE_CHECKING:
	from collections.abc import Callable, Iterator

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Seconds between checks on a background task
POLL_INTERVAL = 0.1


# Singleton class to track spinner state
class SpinnerState:
	"""Singleton class to track spinner state."""

	_instance = None
	is_active = False

	def __new__(cls) -> Self:
		"""
		Create or return the singleton instance.

		Returns:
		    The singleton instance of SpinnerState

		"""
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance


@contextlib.contextmanager
def loading_spinner(message: str = "Processing...") -> Iterator[None]:
	"""
	Display a loading spinner while executing a task.

	Args:
	    message: Message to display alongside the spinner

	Yields:
	    None

	"""
	# In test environments, don't display a spinner
	if os.environ.get("PYTEST_CURRENT_TEST") or os.environ.get("CI"):
		yield
		return

	spinner_state = SpinnerState()
	if spinner_state.is_active:
		yield
		return

	try:
		spinner_state.is_active = True
		with console.status(message, spinner="dots"):
			yield
	finally:
		spinner_state.is_active = False


def run_with_spinner(message: str, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:  # noqa: ANN401
	"""
	Run a blocking call on a background thread while a spinner is shown.

	The main thread only polls the worker, so Ctrl-C stops the wait right away.
	The worker itself is abandoned rather than cancelled; it is a daemon thread
	and does not keep the process alive.

	Args:
	    message: Message to display alongside the spinner
	    func: Blocking callable
	    *args: Positional arguments for ``func``
	    **kwargs: Keyword arguments for ``func``

	Returns:
	    Whatever ``func`` returned

	Raises:
	    BaseException: Whatever ``func`` raised, including ``SystemExit``, re-raised on the calling thread

	"""
	outcome: dict[str, Any] = {}

	def worker() -> None:
		try:
			outcome["result"] = func(*args, **kwargs)
		except BaseException as e:  # noqa: BLE001
			outcome["error"] = e

	thread = threading.Thread(target=worker, name="aigit-worker", daemon=True)
	with loading_spinner(message):
		thread.start()
		while thread.is_alive():
			thread.join(POLL_INTERVAL)

	if "error" in outcome:
		raise outcome["error"]
	return outcome["result"]


def show_title(title: str) -> None:
	"""Print a command banner."""
	console.print(Panel.fit(f"[bold]{escape(title)}[/bold]", border_style="magenta"))


def show_success(message: str) -> None:
	"""Print a success line."""
	console.print(f"[green]✓[/green] {escape(message)}")


def show_error(message: str, exception: Exception | None = None) -> None:
	"""
	Display an error summary with standardized formatting.

	Args:
	        message: The error message to display
	        exception: Optional exception that caused the error

	"""
	error_text = message
	if exception:
		error_text += f"\n\nDetails: {exception!s}"
		logger.debug("Error occurred", exc_info=exception)

	display_error_summary(error_text)


def show_warning(message: str) -> None:
	"""
	Display a warning summary with standardized formatting.

	Args:
	        message: The warning message to display

	"""
	display_warning_summary(message)


def exit_with_error(message: str, exit_code: int = 1, exception: Exception | None = None) -> NoReturn:
	"""
	Display an error message and exit.

	Args:
	        message: Error message to display
	        exit_code: Exit code to use
	        exception: Optional exception that caused the error

	"""
	show_error(message, exception)
	raise typer.Exit(exit_code) from exception


def handle_keyboard_interrupt() -> NoReturn:
	"""Handles KeyboardInterrupt by printing a message and exiting cleanly."""
	console.print("\n[yellow]Operation cancelled by user.[/yellow]")
	raise typer.Exit(130)  # Standard exit code for SIGINT
