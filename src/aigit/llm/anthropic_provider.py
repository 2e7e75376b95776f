"""Anthropic messages provider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from aigit.config.defaults import DEFAULT_SYSTEM_PROMPT

from .base import decode_error_envelope, decode_response, first_item, is_success, post_json, raw_error
from .errors import ProviderError
from .prompts import SHORT_COMMIT_PROMPT_TEMPLATE, build_prompt, truncate_diff

ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"
MAX_TOKENS = 1024


@dataclass
class AnthropicProvider:
	"""Generates commit messages through the Anthropic messages API."""

	name: ClassVar[str] = "anthropic"
	label: ClassVar[str] = "Anthropic"

	api_key: str
	model: str
	system_prompt: str = ""
	commit_prompt: str = ""
	timeout: float | None = None

	def generate(self, diff: str, context: str) -> str:
		"""
		Draft a commit message for a diff.

		Raises:
		    ProviderError: If the API call fails or returns no content blocks

		"""
		diff = truncate_diff(diff)
		user_prompt = build_prompt(self.commit_prompt or SHORT_COMMIT_PROMPT_TEMPLATE, diff, context)

		payload = {
			"model": self.model,
			"system": self.system_prompt or DEFAULT_SYSTEM_PROMPT,
			"max_tokens": MAX_TOKENS,
			"messages": [{"role": "user", "content": user_prompt}],
		}
		response = post_json(
			ANTHROPIC_MESSAGES_URL,
			payload,
			label=self.label,
			headers={"x-api-key": self.api_key, "anthropic-version": ANTHROPIC_VERSION},
			timeout=self.timeout,
		)

		if not is_success(response):
			envelope = decode_error_envelope(response) or {}
			error = envelope.get("error")
			if isinstance(error, dict) and error.get("message"):
				raise ProviderError(str(error["message"]), subtype=str(error.get("type") or ""), provider=self.label)
			raise raw_error(response, self.label)

		data = decode_response(response, self.label)
		block = first_item(data.get("content"))
		if isinstance(block, dict) and block.get("text"):
			return str(block["text"])

		msg = f"no response from {self.label}"
		raise ProviderError(msg)
