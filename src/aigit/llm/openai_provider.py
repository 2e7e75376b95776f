"""OpenAI chat completions provider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from aigit.config.defaults import DEFAULT_SYSTEM_PROMPT

from .base import decode_error_envelope, decode_response, first_item, is_success, post_json, raw_error
from .errors import ProviderError
from .prompts import SHORT_COMMIT_PROMPT_TEMPLATE, build_prompt, truncate_diff

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"


@dataclass
class OpenAIProvider:
	"""Generates commit messages through the OpenAI chat completions API."""

	name: ClassVar[str] = "openai"
	label: ClassVar[str] = "OpenAI"

	api_key: str
	model: str
	system_prompt: str = ""
	commit_prompt: str = ""
	timeout: float | None = None

	def generate(self, diff: str, context: str) -> str:
		"""
		Draft a commit message for a diff.

		Args:
		    diff: Staged diff
		    context: Extra context for the model, may be empty

		Returns:
		    The raw message text from the first choice

		Raises:
		    ProviderError: If the API call fails or returns no choices

		"""
		diff = truncate_diff(diff)
		system_prompt = self.system_prompt or DEFAULT_SYSTEM_PROMPT
		user_prompt = build_prompt(self.commit_prompt or SHORT_COMMIT_PROMPT_TEMPLATE, diff, context)

		payload = {
			"model": self.model,
			"messages": [
				{"role": "system", "content": system_prompt},
				{"role": "user", "content": user_prompt},
			],
		}
		response = post_json(
			OPENAI_CHAT_URL,
			payload,
			label=self.label,
			headers={"Authorization": f"Bearer {self.api_key}"},
			timeout=self.timeout,
		)

		if not is_success(response):
			envelope = decode_error_envelope(response) or {}
			error = envelope.get("error")
			if isinstance(error, dict) and error.get("message"):
				raise ProviderError(str(error["message"]), subtype=str(error.get("type") or ""), provider=self.label)
			raise raw_error(response, self.label)

		data = decode_response(response, self.label)
		choice = first_item(data.get("choices"))
		message = choice.get("message") if isinstance(choice, dict) else None
		if isinstance(message, dict) and message.get("content"):
			return str(message["content"])

		msg = f"no response from {self.label}"
		raise ProviderError(msg)
