"""Maps a configured provider name to a ready-to-use provider."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .anthropic_provider import AnthropicProvider
from .gemini_provider import GeminiProvider
from .ollama_provider import OllamaProvider
from .openai_provider import OpenAIProvider

if TYPE_CHECKING:
	from aigit.config.schema import ProviderConfig

	from .base import Provider

logger = logging.getLogger(__name__)

# Display order used by the config form
PROVIDER_NAMES = ("openai", "gemini", "anthropic", "ollama")
PROVIDER_LABELS = {
	OpenAIProvider.name: OpenAIProvider.label,
	GeminiProvider.name: GeminiProvider.label,
	AnthropicProvider.name: AnthropicProvider.label,
	OllamaProvider.name: OllamaProvider.label,
}

# Providers that run locally and need no API key
KEYLESS_PROVIDERS = frozenset({OllamaProvider.name})


def get_provider(
	name: str,
	provider_config: ProviderConfig,
	model: str,
	system_prompt: str,
	commit_prompt_template: str,
) -> Provider | None:
	"""
	Build the provider registered under ``name``.

	Args:
	    name: Provider name from the configuration
	    provider_config: Stored credentials and settings for that provider
	    model: Model to use, already resolved against any repository override
	    system_prompt: System prompt text
	    commit_prompt_template: Template with ``{diff}`` and ``{context}`` placeholders, or two positional ``%s``

	Returns:
	    A provider instance, or None if the name is not a known provider

	"""
	if name == OpenAIProvider.name:
		return OpenAIProvider(
			api_key=provider_config.api_key,
			model=model,
			system_prompt=system_prompt,
			commit_prompt=commit_prompt_template,
			timeout=provider_config.timeout,
		)
	if name == GeminiProvider.name:
		return GeminiProvider(
			api_key=provider_config.api_key,
			model=model,
			system_prompt=system_prompt,
			commit_prompt=commit_prompt_template,
			timeout=provider_config.timeout,
		)
	if name == OllamaProvider.name:
		return OllamaProvider(
			model=model,
			base_url=provider_config.base_url,
			system_prompt=system_prompt,
			commit_prompt=commit_prompt_template,
			timeout=provider_config.timeout,
		)
	if name == AnthropicProvider.name:
		return AnthropicProvider(
			api_key=provider_config.api_key,
			model=model,
			system_prompt=system_prompt,
			commit_prompt=commit_prompt_template,
			timeout=provider_config.timeout,
		)

	logger.debug("Unknown provider name: %r", name)
	return None
