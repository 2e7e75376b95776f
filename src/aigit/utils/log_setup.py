"""
Logging setup for AI-Git.

This module configures logging for the CLI and renders the error and
warning summaries shown to the user.

"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule
from rich.text import Text

# Initialize console for rich output
console = Console()

# Third-party loggers that are only interesting when debugging
NOISY_LOGGERS = ("urllib3", "requests")

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s"


def _file_handler(log_file_path: Path) -> logging.FileHandler:
	"""Open ``log_file_path`` for appending, creating its directory first."""
	log_file_path.parent.mkdir(parents=True, exist_ok=True)
	handler = logging.FileHandler(log_file_path, mode="a", encoding="utf-8")
	handler.setLevel(logging.DEBUG)
	handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
	return handler


def setup_logging(is_verbose: bool = False, log_file_path: Path | str | None = None) -> None:
	"""
	Configure the root logger for one CLI run.

	The console shows warnings and above, or everything when verbose. A log
	file, when given, always receives debug output. Calling this again
	replaces the handlers from the previous call.

	Args:
	    is_verbose: Show debug output on the console
	    log_file_path: Optional file to append a full debug log to

	"""
	console_level = logging.DEBUG if is_verbose else logging.WARNING
	handlers: list[logging.Handler] = [
		RichHandler(
			level=console_level,
			console=console,
			rich_tracebacks=True,
			show_path=is_verbose,
		)
	]

	file_error: OSError | None = None
	if log_file_path:
		try:
			handlers.append(_file_handler(Path(log_file_path)))
		except OSError as e:
			file_error = e

	root_level = logging.DEBUG if len(handlers) > 1 else console_level
	logging.basicConfig(level=root_level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True)

	for name in NOISY_LOGGERS:
		logging.getLogger(name).setLevel(logging.DEBUG if is_verbose else logging.ERROR)

	if file_error is not None:
		display_warning_summary(f"Could not write the log file {log_file_path}: {file_error}")
	elif log_file_path:
		logging.getLogger(__name__).debug("Logging to file: %s", log_file_path)


def log_environment_info() -> None:
	"""Log information about the execution environment."""
	import platform

	from aigit import __version__

	logger = logging.getLogger(__name__)
	logger.info("AI-Git version: %s", __version__)
	logger.info("Python version: %s", platform.python_version())
	logger.info("Platform: %s", platform.platform())


def _display_summary(message: str, title: str, style: str) -> None:
	console.print()
	console.print(Rule(Text(title, style=f"bold {style}"), style=style))
	console.print(f"\n{message}\n", markup=False)
	console.print(Rule(style=style))
	console.print()


def display_error_summary(error_message: str) -> None:
	"""
	Display an error summary with a divider and a title.

	Args:
	        error_message: The error message to display

	"""
	_display_summary(error_message, "Error Summary", "red")


def display_warning_summary(warning_message: str) -> None:
	"""Display a warning summary with a divider and a title."""
	_display_summary(warning_message, "Warning Summary", "yellow")
