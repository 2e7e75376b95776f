"""Prompt building for commit message generation."""

from __future__ import annotations

import re

from aigit.config.defaults import CONTEXT_PLACEHOLDER, DIFF_PLACEHOLDER, POSITIONAL_PLACEHOLDER

# Diffs beyond this many characters are cut before they are sent
MAX_DIFF_CHARS = 15000
TRUNCATION_MARKER = "\n... [Diff truncated] ..."

# Fallback for the chat-style providers when no template is configured
SHORT_COMMIT_PROMPT_TEMPLATE = "Generate a git commit message for these changes:\n\n{diff}\n\n{context}"

_NAMED_PATTERN = re.compile("|".join(re.escape(p) for p in (DIFF_PLACEHOLDER, CONTEXT_PLACEHOLDER)))
# "%%" is a literal percent sign in positional templates
_POSITIONAL_PATTERN = re.compile(r"%%|" + re.escape(POSITIONAL_PLACEHOLDER))


def truncate_diff(diff: str) -> str:
	"""Cut an oversized diff to ``MAX_DIFF_CHARS`` and mark it as truncated."""
	if len(diff) > MAX_DIFF_CHARS:
		return diff[:MAX_DIFF_CHARS] + TRUNCATION_MARKER
	return diff


def build_prompt(template: str, diff: str, context: str) -> str:
	"""
	Fill the diff and context placeholders of a prompt template.

	Templates with ``{diff}`` or ``{context}`` are filled by name. Otherwise the
	first two ``%s`` markers receive the diff and then the context; any further
	markers are left as they are. Either way substitution is a single pass, so
	placeholders inside the substituted diff are never expanded.

	Args:
	    template: Prompt template
	    diff: Diff text, already truncated
	    context: Extra context for the model, may be empty

	Returns:
	    The prompt to send

	"""
	if _NAMED_PATTERN.search(template):
		values = {DIFF_PLACEHOLDER: diff, CONTEXT_PLACEHOLDER: context}
		return _NAMED_PATTERN.sub(lambda match: values[match.group(0)], template)

	positional = iter((diff, context))

	def fill(match: re.Match[str]) -> str:
		if match.group(0) == "%%":
			return "%"
		return next(positional, match.group(0))

	return _POSITIONAL_PATTERN.sub(fill, template)
