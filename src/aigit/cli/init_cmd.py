"""Implementation of the init command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import typer
import yaml

from aigit.config import ConfigError, ConfigLoader
from aigit.config.defaults import (
	DEFAULT_COMMIT_STYLE,
	DEFAULT_LANGUAGE,
	FALLBACK_PROVIDER,
	REPO_CONFIG_FILE_NAME,
)
from aigit.git.utils import GitError, get_repo_root
from aigit.utils.cli_utils import exit_with_error, handle_keyboard_interrupt, run_with_spinner, show_success

if TYPE_CHECKING:
	from pathlib import Path

logger = logging.getLogger(__name__)


class InitError(Exception):
	"""Raised when the repository cannot be initialized."""


def _default_provider() -> str:
	"""Provider to enable for the repository; a broken global config is not fatal here."""
	try:
		config = ConfigLoader().load()
	except ConfigError as e:
		logger.debug("Ignoring unreadable global configuration during init: %s", e)
		return FALLBACK_PROVIDER
	return config.default_provider or FALLBACK_PROVIDER


def initialize_repository() -> tuple[Path, bool]:
	"""
	Write ``.ai-git.yaml`` at the repository root unless it already exists.

	Returns:
	    The file path and whether it was created

	Raises:
	    InitError: If not inside a git repository or the file cannot be written

	"""
	try:
		root = get_repo_root()
	except GitError as e:
		msg = "not a git repository"
		raise InitError(msg) from e

	path = root / REPO_CONFIG_FILE_NAME
	if path.exists():
		logger.debug("%s already exists, leaving it untouched", path)
		return path, False

	content = {
		"enabled_provider": _default_provider(),
		"commit_style": DEFAULT_COMMIT_STYLE,
		"language": DEFAULT_LANGUAGE,
	}
	try:
		with path.open("w", encoding="utf-8") as f:
			yaml.safe_dump(content, f, sort_keys=False)
	except OSError as e:
		msg = f"could not write {path}: {e}"
		raise InitError(msg) from e

	logger.debug("Created %s", path)
	return path, True


def register_command(app: typer.Typer) -> None:
	"""Register the init command with the CLI app."""

	@app.command(name="init")
	def init_command() -> None:
		"""Create a .ai-git.yaml file for this repository."""
		try:
			_, created = run_with_spinner("Initializing AI-Git...", initialize_repository)
		except KeyboardInterrupt:
			handle_keyboard_interrupt()
		except InitError as e:
			exit_with_error(f"Init failed: {e}")

		if created:
			show_success("Repository initialized.")
		else:
			show_success(f"Repository already initialized ({REPO_CONFIG_FILE_NAME} exists).")
