"""Error classes for LLM providers."""

from __future__ import annotations


class ProviderError(Exception):
	"""Raised when a provider cannot produce a commit message."""

	def __init__(self, message: str, subtype: str = "", provider: str = "") -> None:
		"""
		Initialize the error.

		Args:
		    message: Message decoded from the provider's error envelope, or the raw response body
		    subtype: Provider error type or status, when the envelope carries one
		    provider: Display name of the provider that failed

		"""
		super().__init__(message)
		self.message = message
		self.subtype = subtype
		self.provider = provider

	def __str__(self) -> str:
		"""Render the error the way it is shown to the user."""
		text = f"{self.provider} API error: {self.message}" if self.provider else self.message
		if self.subtype:
			text += f" ({self.subtype})"
		return text
