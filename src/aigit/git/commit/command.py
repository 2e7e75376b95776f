"""Main commit command implementation for AI-Git."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from aigit.config import ConfigError
from aigit.git.utils import (
	GitError,
	create_commit,
	get_staged_diff,
	get_status_short,
	parse_status_files,
	push,
	stage_files,
)
from aigit.llm import get_provider
from aigit.utils.cli_utils import run_with_spinner

from .interactive import CommitUI, ReviewAction
from .message import CommitMessage

if TYPE_CHECKING:
	from aigit.config import AppConfig, ProviderConfig, RepoConfig
	from aigit.llm import Provider

logger = logging.getLogger(__name__)


class CommitState(str, Enum):
	"""Steps of the commit workflow. The last three are terminal."""

	CHECK_STAGED = "check_staged"
	STAGE_INTERACTIVE = "stage_interactive"
	GENERATING = "generating"
	REVIEWING = "reviewing"
	COMMITTED = "committed"
	CANCELLED = "cancelled"
	NOTHING_TO_COMMIT = "nothing_to_commit"


@dataclass
class ResolvedProvider:
	"""Provider name, stored settings and model after applying repository overrides."""

	name: str
	settings: ProviderConfig
	model: str


def resolve_provider(config: AppConfig, repo_config: RepoConfig | None = None) -> ResolvedProvider:
	"""
	Work out which provider and model to use.

	Repository overrides win over the global configuration whenever they are set.

	Args:
	    config: Global configuration
	    repo_config: Repository-local overrides, if the repository has any

	Returns:
	    The effective provider settings

	Raises:
	    ConfigError: If no provider is selected or the selected one has no stored settings

	"""
	name = config.default_provider
	if repo_config and repo_config.enabled_provider:
		name = repo_config.enabled_provider
	if not name:
		msg = "No AI provider configured. Run 'ai-git config' to choose one."
		raise ConfigError(msg)

	settings = config.providers.get(name)
	if settings is None:
		msg = f"Provider '{name}' is not configured. Run 'ai-git config' to set it up."
		raise ConfigError(msg)

	model = settings.default_model
	if repo_config and repo_config.model_override:
		model = repo_config.model_override

	return ResolvedProvider(name=name, settings=settings, model=model)


class CommitCommand:
	"""Handles the commit command workflow."""

	def __init__(self, config: AppConfig, repo_config: RepoConfig | None = None, ui: CommitUI | None = None) -> None:
		"""
		Initialize the commit command.

		Args:
		    config: Global configuration, loaded once by the caller
		    repo_config: Repository-local overrides
		    ui: Interactive UI to use

		"""
		self.config = config
		self.repo_config = repo_config
		self.ui = ui or CommitUI()
		self.state = CommitState.CHECK_STAGED

	def _enter(self, state: CommitState) -> None:
		logger.debug("Commit workflow: %s -> %s", self.state.value, state.value)
		self.state = state

	def run(self) -> CommitState:
		"""
		Walk the workflow from the staged-diff check to a terminal state.

		Files staged along the way stay staged if a later step fails.

		Returns:
		    COMMITTED, CANCELLED or NOTHING_TO_COMMIT

		Raises:
		    GitError: If a git command fails
		    ConfigError: If no usable provider is configured
		    ProviderError: If message generation fails

		"""
		self._enter(CommitState.CHECK_STAGED)
		diff = get_staged_diff()

		if not diff.strip():
			self._enter(CommitState.STAGE_INTERACTIVE)
			staged = self._stage_interactive()
			if staged is None:
				return self.state
			diff = staged

		self._enter(CommitState.GENERATING)
		message = self._generate(diff)

		self._enter(CommitState.REVIEWING)
		reviewed = self._review(message)
		if reviewed is None:
			self._enter(CommitState.CANCELLED)
			self.ui.show_info("Commit cancelled.")
			return self.state

		create_commit(reviewed.render())
		self._enter(CommitState.COMMITTED)
		self.ui.show_success("Committed successfully.")
		return self.state

	def sync(self) -> CommitState:
		"""
		Commit, then offer to push.

		A failed push is reported but leaves the new commit in place.

		Returns:
		    The terminal state of the commit workflow

		"""
		state = self.run()
		if state != CommitState.COMMITTED:
			return state

		if self.ui.confirm_push():
			try:
				run_with_spinner("Pushing changes...", push)
			except GitError as e:
				self.ui.show_error(f"Push failed: {e}")
			else:
				self.ui.show_success("Pushed successfully.")
		return state

	def _stage_interactive(self) -> str | None:
		"""
		Offer the changed files for staging when nothing is staged yet.

		Returns:
		    The new staged diff, or None after moving to a terminal state

		"""
		files = parse_status_files(get_status_short())
		if not files:
			self._enter(CommitState.NOTHING_TO_COMMIT)
			self.ui.show_error("No changes to commit.")
			return None

		selected = self.ui.select_files(files, "No staged changes detected. Select files to stage:")
		if not selected:
			self._enter(CommitState.CANCELLED)
			self.ui.show_info("Aborted.")
			return None

		run_with_spinner("Staging files...", stage_files, selected)
		return get_staged_diff()

	def _build_provider(self) -> Provider:
		resolved = resolve_provider(self.config, self.repo_config)
		provider = get_provider(
			resolved.name,
			resolved.settings,
			resolved.model,
			self.config.system_prompt,
			self.config.commit_prompt_template,
		)
		if provider is None:
			msg = f"Unknown AI provider '{resolved.name}'."
			raise ConfigError(msg)
		logger.debug("Using provider %s with model %s", resolved.name, resolved.model)
		return provider

	def _generate(self, diff: str) -> CommitMessage:
		provider = self._build_provider()
		raw = run_with_spinner("AI is thinking...", provider.generate, diff, "")
		return CommitMessage.parse(raw)

	def _review(self, message: CommitMessage) -> CommitMessage | None:
		"""
		Loop until the user commits or cancels. A dismissed edit form cancels.

		Returns:
		    The approved message, or None if the user cancelled

		"""
		while True:
			self.ui.display_message(message)
			action = self.ui.get_user_action()
			if action == ReviewAction.COMMIT:
				return message
			if action == ReviewAction.CANCEL:
				return None
			edited = self.ui.edit_message(message)
			if edited is None:
				return None
			message = edited
