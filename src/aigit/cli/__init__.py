"""Command-line interface package for AI-Git."""

from __future__ import annotations

import datetime
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from aigit import __version__
from aigit.utils.log_setup import log_environment_info, setup_logging

from .commit_cmd import register_command as register_commit_command
from .config_cmd import register_command as register_config_command
from .doctor_cmd import register_command as register_doctor_command
from .init_cmd import register_command as register_init_command
from .repo_cmd import register_command as register_repo_command

logger = logging.getLogger(__name__)

# Initialize the main CLI app
app = typer.Typer(
	help=f"AI-Git - the git workflow with AI-written commit messages\n\nVersion: {__version__}",
	no_args_is_help=True,
	context_settings={"help_option_names": ["-h", "--help"]},
)

# --- Global Options Callback ---


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"ai-git version {__version__}")
		raise typer.Exit


@app.callback()
def global_options(
	ctx: typer.Context,
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	is_output_log: Annotated[
		bool,
		typer.Option(
			"--save-log",
			help="Enable logging to a file. Logs to logs/ai-git_{datetime}.log.",
		),
	] = False,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options and logging setup."""
	ctx.meta["is_verbose"] = is_verbose
	ctx.meta["is_output_log"] = is_output_log

	log_file_path_to_use: Path | None = None
	if is_output_log:
		current_time = datetime.datetime.now(tz=datetime.UTC).strftime("%Y-%m-%d_%H-%M-%S")
		log_file_path_to_use = Path("logs") / f"ai-git_{current_time}.log"

	setup_logging(is_verbose=is_verbose, log_file_path=log_file_path_to_use)
	if is_verbose:
		log_environment_info()


@app.command(name="version")
def version_command() -> None:
	"""Show version info."""
	typer.echo(f"ai-git version {__version__}")


# --- Register commands ---

register_init_command(app)
register_repo_command(app)
register_commit_command(app)
register_config_command(app)
register_doctor_command(app)


# --- Main Entry Point ---
def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
