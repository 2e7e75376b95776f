"""Google Gemini generateContent provider."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from aigit.config.defaults import DEFAULT_COMMIT_PROMPT_TEMPLATE

from .base import decode_error_envelope, decode_response, first_item, is_success, post_json, raw_error
from .errors import ProviderError
from .prompts import build_prompt, truncate_diff

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


@dataclass
class GeminiProvider:
	"""
	Generates commit messages through the Gemini generateContent API.

	The API key travels in the ``key`` query parameter. There is no separate
	system role in this call, so the system prompt is prepended to the user
	prompt.
	"""

	name: ClassVar[str] = "gemini"
	label: ClassVar[str] = "Gemini"

	api_key: str
	model: str
	system_prompt: str = ""
	commit_prompt: str = ""
	timeout: float | None = None

	@property
	def url(self) -> str:
		"""Endpoint for the configured model."""
		return f"{GEMINI_BASE_URL}/{self.model}:generateContent"

	def generate(self, diff: str, context: str) -> str:
		"""
		Draft a commit message for a diff.

		Raises:
		    ProviderError: If the API call fails or returns no candidates

		"""
		diff = truncate_diff(diff)
		template = self.commit_prompt or DEFAULT_COMMIT_PROMPT_TEMPLATE
		if self.system_prompt:
			template = f"{self.system_prompt}\n\n{template}"

		payload = {"contents": [{"parts": [{"text": build_prompt(template, diff, context)}]}]}
		response = post_json(
			self.url,
			payload,
			label=self.label,
			params={"key": self.api_key},
			timeout=self.timeout,
		)

		if not is_success(response):
			envelope = decode_error_envelope(response) or {}
			error = envelope.get("error")
			if isinstance(error, dict) and error.get("message"):
				raise ProviderError(str(error["message"]), subtype=str(error.get("status") or ""), provider=self.label)
			raise raw_error(response, self.label)

		data = decode_response(response, self.label)
		candidate = first_item(data.get("candidates"))
		if isinstance(candidate, dict):
			content = candidate.get("content") or {}
			part = first_item(content.get("parts") if isinstance(content, dict) else None)
			if isinstance(part, dict) and part.get("text"):
				return str(part["text"])

		msg = f"no response from {self.label}"
		raise ProviderError(msg)
