"""Implementation of the config command: interactive form and set-* sub-commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated

import questionary
import typer

from aigit.config import ConfigError, ConfigLoader, ProviderConfig
from aigit.llm import KEYLESS_PROVIDERS, PROVIDER_LABELS, PROVIDER_NAMES
from aigit.utils.cli_utils import (
	exit_with_error,
	handle_keyboard_interrupt,
	show_success,
	show_title,
	show_warning,
)

if TYPE_CHECKING:
	from aigit.config import AppConfig

logger = logging.getLogger(__name__)

OTHER_MODEL = "__other__"

# Sub-command name -> number of positional arguments it takes
LEGACY_ACTIONS = {
	"set-provider": 1,
	"set-key": 2,
	"set-model": 2,
}

LEGACY_USAGE = (
	"Usage: ai-git config set-provider <name> | set-key <name> <key> | set-model <name> <model>"
)

ActionArg = Annotated[
	str | None,
	typer.Argument(help="Sub-command: set-provider, set-key or set-model. Omit for the interactive form."),
]
ArgsArg = Annotated[
	list[str] | None,
	typer.Argument(help="Arguments for the sub-command."),
]


class FormAborted(Exception):
	"""Raised when the user dismisses a prompt in the configuration form."""


def _ask(question: questionary.Question) -> str:
	answer = question.ask()
	if answer is None:
		raise FormAborted
	return answer


def _ask_model(settings: ProviderConfig) -> str:
	"""Offer the known models when there are any, falling back to free text."""
	if not settings.custom_models:
		return _ask(questionary.text("Default Model", default=settings.default_model))

	models = list(settings.custom_models)
	if settings.default_model and settings.default_model not in models:
		models.insert(0, settings.default_model)
	choices = [questionary.Choice(model, value=model) for model in models]
	choices.append(questionary.Choice("Other...", value=OTHER_MODEL))

	default = settings.default_model if settings.default_model in models else None
	model = _ask(questionary.select("Default Model", choices=choices, default=default))
	if model == OTHER_MODEL:
		return _ask(questionary.text("Model name"))
	return model


def run_form(config: AppConfig) -> AppConfig:
	"""
	Ask for the default provider and its credentials.

	Args:
	    config: Current configuration, used for prompt defaults

	Returns:
	    The updated configuration

	Raises:
	    FormAborted: If any prompt was dismissed

	"""
	choices = [questionary.Choice(PROVIDER_LABELS[name], value=name) for name in PROVIDER_NAMES]
	default = config.default_provider if config.default_provider in PROVIDER_NAMES else None
	provider = _ask(questionary.select("Default Provider", choices=choices, default=default))

	settings = config.providers.get(provider, ProviderConfig()).model_copy(deep=True)
	if provider not in KEYLESS_PROVIDERS:
		settings.api_key = _ask(questionary.password("API Key", default=settings.api_key))
	settings.default_model = _ask_model(settings)

	config.default_provider = provider
	config.providers[provider] = settings
	return config


def apply_legacy_action(config: AppConfig, action: str, args: list[str]) -> AppConfig:
	"""
	Apply one set-* sub-command to the configuration.

	Args:
	    config: Configuration to update
	    action: Sub-command name
	    args: Its positional arguments

	Returns:
	    The updated configuration

	Raises:
	    typer.BadParameter: If the sub-command is unknown or its arguments are missing

	"""
	expected = LEGACY_ACTIONS.get(action)
	if expected is None:
		msg = f"Unknown config action '{action}'. {LEGACY_USAGE}"
		raise typer.BadParameter(msg)
	if len(args) < expected:
		msg = f"'{action}' needs {expected} argument(s). {LEGACY_USAGE}"
		raise typer.BadParameter(msg)

	name = args[0]
	if name not in PROVIDER_NAMES:
		show_warning(f"'{name}' is not a known provider ({', '.join(PROVIDER_NAMES)}).")

	if action == "set-provider":
		config.default_provider = name
		return config

	settings = config.providers.get(name, ProviderConfig())
	if action == "set-key":
		settings.api_key = args[1]
	else:
		settings.default_model = args[1]
	config.providers[name] = settings
	return config


def register_command(app: typer.Typer) -> None:
	"""Register the config command with the CLI app."""

	@app.command(name="config")
	def config_command(action: ActionArg = None, args: ArgsArg = None) -> None:
		"""Configure the AI provider, API key and default model."""
		loader = ConfigLoader()
		try:
			config = loader.load()
		except ConfigError as e:
			exit_with_error("Failed to load config.", exception=e)

		try:
			if action is None:
				show_title("Configuration")
				config = run_form(config)
			else:
				config = apply_legacy_action(config, action, args or [])
		except KeyboardInterrupt:
			handle_keyboard_interrupt()
		except FormAborted:
			logger.debug("Configuration form dismissed")
			show_warning("Configuration not changed.")
			return
		except typer.BadParameter as e:
			exit_with_error(str(e), exit_code=2)

		try:
			path = loader.save(config)
		except ConfigError as e:
			exit_with_error("Error saving configuration.", exception=e)
		logger.debug("Configuration written to %s", path)
		show_success("Configuration saved successfully.")
