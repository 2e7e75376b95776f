"""Local Ollama provider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from aigit.config.defaults import DEFAULT_COMMIT_PROMPT_TEMPLATE, DEFAULT_SYSTEM_PROMPT

from .base import decode_error_envelope, decode_response, is_success, post_json, raw_error
from .errors import ProviderError
from .prompts import build_prompt, truncate_diff

OLLAMA_DEFAULT_BASE_URL = "http://localhost:11434"
OLLAMA_GENERATE_PATH = "/api/generate"


@dataclass
class OllamaProvider:
	"""Generates commit messages with a local Ollama server. No API key is needed."""

	name: ClassVar[str] = "ollama"
	label: ClassVar[str] = "Ollama"

	model: str
	base_url: str | None = None
	system_prompt: str = ""
	commit_prompt: str = ""
	timeout: float | None = None

	@property
	def url(self) -> str:
		"""Generate endpoint on the configured (or default) server."""
		base = (self.base_url or OLLAMA_DEFAULT_BASE_URL).rstrip("/")
		return base + OLLAMA_GENERATE_PATH

	def generate(self, diff: str, context: str) -> str:
		"""
		Draft a commit message for a diff.

		Raises:
		    ProviderError: If the server reports an error, even inside a 200 response

		"""
		diff = truncate_diff(diff)
		payload = {
			"model": self.model,
			"prompt": build_prompt(self.commit_prompt or DEFAULT_COMMIT_PROMPT_TEMPLATE, diff, context),
			"system": self.system_prompt or DEFAULT_SYSTEM_PROMPT,
			"stream": False,
		}
		response = post_json(self.url, payload, label=self.label, timeout=self.timeout)

		if not is_success(response):
			envelope = decode_error_envelope(response) or {}
			if envelope.get("error"):
				raise ProviderError(str(envelope["error"]), provider=self.label)
			raise raw_error(response, self.label)

		data = decode_response(response, self.label)
		if data.get("error"):
			raise ProviderError(str(data["error"]), provider=self.label)

		text = data.get("response")
		if text:
			return str(text)

		msg = f"no response from {self.label}"
		raise ProviderError(msg)
