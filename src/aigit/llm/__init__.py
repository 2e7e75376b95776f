"""LLM providers for commit message generation."""

from .anthropic_provider import AnthropicProvider
from .base import Provider
from .errors import ProviderError
from .gemini_provider import GeminiProvider
from .ollama_provider import OllamaProvider
from .openai_provider import OpenAIProvider
from .selector import KEYLESS_PROVIDERS, PROVIDER_LABELS, PROVIDER_NAMES, get_provider

__all__ = [
	"KEYLESS_PROVIDERS",
	"PROVIDER_LABELS",
	"PROVIDER_NAMES",
	"AnthropicProvider",
	"GeminiProvider",
	"OllamaProvider",
	"OpenAIProvider",
	"Provider",
	"ProviderError",
	"get_provider",
]
