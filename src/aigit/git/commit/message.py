"""The two-part commit message edited during review."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CommitMessage:
	"""A commit title line plus a free-text description."""

	title: str
	description: str = ""

	@classmethod
	def parse(cls, raw: str) -> CommitMessage:
		"""
		Split a generated message on its first line break.

		Args:
		    raw: Text returned by the provider

		Returns:
		    The message with both parts trimmed of surrounding whitespace

		"""
		title, _, description = raw.partition("\n")
		return cls(title=title.strip(), description=description.strip())

	def render(self) -> str:
		"""Join title and description with a blank line, as passed to ``git commit -m``."""
		return f"{self.title}\n\n{self.description}"
