"""Implementation of the doctor command."""

from __future__ import annotations

import logging

import typer
from rich.markup import escape

from aigit.config import ConfigError, ConfigLoader
from aigit.git.utils import is_repo
from aigit.llm import KEYLESS_PROVIDERS
from aigit.utils.cli_utils import show_title
from aigit.utils.log_setup import console

logger = logging.getLogger(__name__)


def _check(label: str, success: bool, message: str) -> None:
	icon = "[green]✓[/green]" if success else "[red]✗[/red]"
	console.print(f" {icon} {label}: {escape(message)}")


def run_checks() -> None:
	"""
	Print one pass/fail line per setup check.

	Later checks are skipped once an earlier one they depend on fails.

	"""
	in_repo = is_repo()
	_check("Git Repo", in_repo, "Found" if in_repo else "Not found")

	try:
		config = ConfigLoader().load()
	except ConfigError as e:
		logger.debug("Doctor could not load configuration", exc_info=e)
		_check("Config", False, str(e))
		return
	_check("Config", True, "Loaded")

	provider = config.default_provider
	if not provider:
		_check("Provider", False, "No default set")
		return
	_check("Provider", True, provider)

	settings = config.providers.get(provider)
	if settings is None:
		_check("Setup", False, "Provider config missing")
	elif not settings.api_key and provider not in KEYLESS_PROVIDERS:
		_check("Auth", False, "API Key missing")
	else:
		_check("Auth", True, "API Key set")


def register_command(app: typer.Typer) -> None:
	"""Register the doctor command with the CLI app."""

	@app.command(name="doctor")
	def doctor_command() -> None:
		"""Validate setup."""
		show_title("AI-Git Doctor")
		run_checks()
