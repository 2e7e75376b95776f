"""Tests for the commit workflow."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aigit.config import AppConfig, ConfigError, ProviderConfig, RepoConfig
from aigit.git.commit import CommitCommand, CommitMessage, CommitState, ReviewAction, resolve_provider
from aigit.git.utils import GitError
from aigit.llm import ProviderError

if TYPE_CHECKING:
	from collections.abc import Iterator

GENERATED = "feat: add sys import\n\nNeeded for argv handling."


@pytest.fixture
def mock_git() -> Iterator[dict[str, Mock]]:
	"""Patch every git helper the workflow calls."""
	with (
		patch("aigit.git.commit.command.get_staged_diff") as mock_diff,
		patch("aigit.git.commit.command.get_status_short") as mock_status,
		patch("aigit.git.commit.command.stage_files") as mock_stage,
		patch("aigit.git.commit.command.create_commit") as mock_commit,
		patch("aigit.git.commit.command.push") as mock_push,
	):
		yield {
			"diff": mock_diff,
			"status": mock_status,
			"stage": mock_stage,
			"commit": mock_commit,
			"push": mock_push,
		}


@pytest.fixture
def mock_provider() -> Iterator[Mock]:
	"""Patch the selector so generation returns a fixed message."""
	with patch("aigit.git.commit.command.get_provider") as mock_get:
		provider = Mock()
		provider.generate.return_value = GENERATED
		mock_get.return_value = provider
		yield provider


@pytest.mark.unit
class TestResolveProvider:
	"""Test cases for resolve_provider."""

	def test_global_settings(self, sample_config: AppConfig) -> None:
		"""Without overrides the global default provider and its model are used."""
		resolved = resolve_provider(sample_config)

		assert resolved.name == "openai"
		assert resolved.model == "gpt-4o"
		assert resolved.settings.api_key == "sk-test"

	def test_repository_overrides(self, sample_config: AppConfig) -> None:
		"""Repository values win when set."""
		repo_config = RepoConfig(enabled_provider="ollama", model_override="codellama")

		resolved = resolve_provider(sample_config, repo_config)

		assert resolved.name == "ollama"
		assert resolved.model == "codellama"

	def test_blank_override_is_ignored(self, sample_config: AppConfig) -> None:
		"""Empty repository values do not override anything."""
		resolved = resolve_provider(sample_config, RepoConfig(commit_style="conventional"))
		assert resolved.name == "openai"

	def test_no_provider_selected(self) -> None:
		"""A fresh configuration cannot generate."""
		with pytest.raises(ConfigError, match="No AI provider configured"):
			resolve_provider(AppConfig())

	def test_provider_without_settings(self) -> None:
		"""Selecting a provider that has no stored entry is an error."""
		with pytest.raises(ConfigError, match="Provider 'gemini' is not configured"):
			resolve_provider(AppConfig(default_provider="gemini"))


@pytest.mark.unit
class TestCommitCommand:
	"""Test cases for CommitCommand."""

	def test_staged_diff_commit(
		self,
		sample_config: AppConfig,
		sample_diff: str,
		mock_git: dict[str, Mock],
		mock_provider: Mock,
		mock_ui: Mock,
	) -> None:
		"""With changes already staged the user goes straight to review."""
		mock_git["diff"].return_value = sample_diff
		mock_ui.get_user_action.return_value = ReviewAction.COMMIT

		state = CommitCommand(sample_config, ui=mock_ui).run()

		assert state == CommitState.COMMITTED
		mock_ui.select_files.assert_not_called()
		mock_provider.generate.assert_called_once_with(sample_diff, "")
		mock_ui.display_message.assert_called_once_with(
			CommitMessage("feat: add sys import", "Needed for argv handling.")
		)
		mock_git["commit"].assert_called_once_with("feat: add sys import\n\nNeeded for argv handling.")
		mock_ui.show_success.assert_called_once_with("Committed successfully.")

	def test_interactive_staging_then_commit(
		self,
		sample_config: AppConfig,
		sample_diff: str,
		mock_git: dict[str, Mock],
		mock_provider: Mock,
		mock_ui: Mock,
	) -> None:
		"""Nothing staged: the picked files are staged and the fresh diff is used."""
		mock_git["diff"].side_effect = ["", sample_diff]
		mock_git["status"].return_value = " M app.py\n?? notes.txt\n"
		mock_ui.select_files.return_value = ["app.py", "notes.txt"]
		mock_ui.get_user_action.return_value = ReviewAction.COMMIT

		state = CommitCommand(sample_config, ui=mock_ui).run()

		assert state == CommitState.COMMITTED
		assert mock_ui.select_files.call_args[0][0] == ["app.py", "notes.txt"]
		mock_git["stage"].assert_called_once_with(["app.py", "notes.txt"])
		mock_provider.generate.assert_called_once_with(sample_diff, "")
		mock_git["commit"].assert_called_once()

	def test_nothing_to_commit(
		self,
		sample_config: AppConfig,
		mock_git: dict[str, Mock],
		mock_provider: Mock,
		mock_ui: Mock,
	) -> None:
		"""A clean tree ends without prompting."""
		mock_git["diff"].return_value = "  \n"
		mock_git["status"].return_value = ""

		state = CommitCommand(sample_config, ui=mock_ui).run()

		assert state == CommitState.NOTHING_TO_COMMIT
		mock_ui.show_error.assert_called_once_with("No changes to commit.")
		mock_ui.select_files.assert_not_called()
		mock_provider.generate.assert_not_called()

	def test_no_files_selected(
		self,
		sample_config: AppConfig,
		mock_git: dict[str, Mock],
		mock_provider: Mock,
		mock_ui: Mock,
	) -> None:
		"""Picking nothing aborts before generation."""
		mock_git["diff"].return_value = ""
		mock_git["status"].return_value = " M app.py\n"
		mock_ui.select_files.return_value = []

		state = CommitCommand(sample_config, ui=mock_ui).run()

		assert state == CommitState.CANCELLED
		mock_ui.show_info.assert_called_once_with("Aborted.")
		mock_git["stage"].assert_not_called()
		mock_provider.generate.assert_not_called()

	def test_staging_failure_propagates(
		self,
		sample_config: AppConfig,
		mock_git: dict[str, Mock],
		mock_provider: Mock,
		mock_ui: Mock,
	) -> None:
		"""A refused path aborts the run."""
		mock_git["diff"].return_value = ""
		mock_git["status"].return_value = " M app.py\n"
		mock_ui.select_files.return_value = ["app.py"]
		mock_git["stage"].side_effect = GitError("pathspec 'app.py' did not match")

		with pytest.raises(GitError):
			CommitCommand(sample_config, ui=mock_ui).run()
		mock_provider.generate.assert_not_called()

	def test_missing_provider_fails_before_any_request(
		self,
		sample_diff: str,
		mock_git: dict[str, Mock],
		mock_ui: Mock,
	) -> None:
		"""Configuration problems are found before any HTTP call."""
		mock_git["diff"].return_value = sample_diff

		with patch("aigit.llm.base.requests.post") as mock_post:
			with pytest.raises(ConfigError):
				CommitCommand(AppConfig(), ui=mock_ui).run()
			mock_post.assert_not_called()
		mock_git["commit"].assert_not_called()

	def test_unknown_provider_name(
		self,
		sample_diff: str,
		mock_git: dict[str, Mock],
		mock_ui: Mock,
	) -> None:
		"""A stored provider the selector does not know is a configuration error."""
		mock_git["diff"].return_value = sample_diff
		config = AppConfig(default_provider="mistral", providers={"mistral": ProviderConfig(api_key="k")})

		with pytest.raises(ConfigError, match="Unknown AI provider 'mistral'"):
			CommitCommand(config, ui=mock_ui).run()

	def test_rate_limited_provider_does_not_commit(
		self,
		sample_config: AppConfig,
		sample_diff: str,
		mock_git: dict[str, Mock],
		mock_ui: Mock,
	) -> None:
		"""A provider error ends the run with nothing committed."""
		mock_git["diff"].return_value = sample_diff
		response = Mock(status_code=429, text="")
		response.json.return_value = {"error": {"message": "Rate limit exceeded", "type": "rate_limit_error"}}

		with patch("aigit.llm.base.requests.post", return_value=response):
			with pytest.raises(ProviderError, match="Rate limit exceeded"):
				CommitCommand(sample_config, ui=mock_ui).run()

		mock_ui.display_message.assert_not_called()
		mock_git["commit"].assert_not_called()

	def test_edit_twice_then_commit(
		self,
		sample_config: AppConfig,
		sample_diff: str,
		mock_git: dict[str, Mock],
		mock_provider: Mock,
		mock_ui: Mock,
	) -> None:
		"""Each edit is shown again and the last one is committed."""
		mock_git["diff"].return_value = sample_diff
		mock_ui.get_user_action.side_effect = [ReviewAction.EDIT, ReviewAction.EDIT, ReviewAction.COMMIT]
		mock_ui.edit_message.side_effect = [
			CommitMessage("feat: first edit", "body one"),
			CommitMessage("feat: second edit", "body two"),
		]

		state = CommitCommand(sample_config, ui=mock_ui).run()

		assert state == CommitState.COMMITTED
		assert mock_ui.display_message.call_count == 3
		assert mock_ui.edit_message.call_args[0][0] == CommitMessage("feat: first edit", "body one")
		mock_git["commit"].assert_called_once_with("feat: second edit\n\nbody two")

	def test_cancel_review(
		self,
		sample_config: AppConfig,
		sample_diff: str,
		mock_git: dict[str, Mock],
		mock_provider: Mock,
		mock_ui: Mock,
	) -> None:
		"""Cancelling leaves the repository untouched."""
		mock_git["diff"].return_value = sample_diff
		mock_ui.get_user_action.return_value = ReviewAction.CANCEL

		state = CommitCommand(sample_config, ui=mock_ui).run()

		assert state == CommitState.CANCELLED
		mock_git["commit"].assert_not_called()

	def test_dismissed_edit_cancels(
		self,
		sample_config: AppConfig,
		sample_diff: str,
		mock_git: dict[str, Mock],
		mock_provider: Mock,
		mock_ui: Mock,
	) -> None:
		"""Interrupting the edit form ends the run quietly."""
		mock_git["diff"].return_value = sample_diff
		mock_ui.get_user_action.return_value = ReviewAction.EDIT
		mock_ui.edit_message.return_value = None

		state = CommitCommand(sample_config, ui=mock_ui).run()

		assert state == CommitState.CANCELLED
		mock_git["commit"].assert_not_called()

	def test_repository_override_reaches_selector(
		self,
		sample_config: AppConfig,
		sample_diff: str,
		mock_git: dict[str, Mock],
		mock_ui: Mock,
	) -> None:
		"""The repository's provider and model are used for generation."""
		mock_git["diff"].return_value = sample_diff
		mock_ui.get_user_action.return_value = ReviewAction.CANCEL
		repo_config = RepoConfig(enabled_provider="anthropic", model_override="claude-3-haiku")

		with patch("aigit.git.commit.command.get_provider") as mock_get:
			mock_get.return_value.generate.return_value = GENERATED
			CommitCommand(sample_config, repo_config=repo_config, ui=mock_ui).run()

		name, settings, model, system_prompt, template = mock_get.call_args[0]
		assert name == "anthropic"
		assert settings.api_key == "a-test"
		assert model == "claude-3-haiku"
		assert system_prompt == sample_config.system_prompt
		assert template == sample_config.commit_prompt_template


@pytest.mark.unit
class TestSync:
	"""Test cases for CommitCommand.sync."""

	def test_push_after_commit(
		self,
		sample_config: AppConfig,
		sample_diff: str,
		mock_git: dict[str, Mock],
		mock_provider: Mock,
		mock_ui: Mock,
	) -> None:
		"""Confirming pushes the new commit."""
		mock_git["diff"].return_value = sample_diff
		mock_ui.get_user_action.return_value = ReviewAction.COMMIT
		mock_ui.confirm_push.return_value = True

		assert CommitCommand(sample_config, ui=mock_ui).sync() == CommitState.COMMITTED

		mock_git["push"].assert_called_once()
		mock_ui.show_success.assert_called_with("Pushed successfully.")

	def test_declined_push(
		self,
		sample_config: AppConfig,
		sample_diff: str,
		mock_git: dict[str, Mock],
		mock_provider: Mock,
		mock_ui: Mock,
	) -> None:
		"""Declining keeps the commit local."""
		mock_git["diff"].return_value = sample_diff
		mock_ui.get_user_action.return_value = ReviewAction.COMMIT
		mock_ui.confirm_push.return_value = False

		CommitCommand(sample_config, ui=mock_ui).sync()

		mock_git["push"].assert_not_called()

	def test_push_failure_keeps_commit(
		self,
		sample_config: AppConfig,
		sample_diff: str,
		mock_git: dict[str, Mock],
		mock_provider: Mock,
		mock_ui: Mock,
	) -> None:
		"""A rejected push is reported and the commit stays."""
		mock_git["diff"].return_value = sample_diff
		mock_ui.get_user_action.return_value = ReviewAction.COMMIT
		mock_ui.confirm_push.return_value = True
		mock_git["push"].side_effect = GitError("rejected: non-fast-forward")

		state = CommitCommand(sample_config, ui=mock_ui).sync()

		assert state == CommitState.COMMITTED
		mock_git["commit"].assert_called_once()
		assert "Push failed" in mock_ui.show_error.call_args[0][0]

	def test_no_push_prompt_when_cancelled(
		self,
		sample_config: AppConfig,
		sample_diff: str,
		mock_git: dict[str, Mock],
		mock_provider: Mock,
		mock_ui: Mock,
	) -> None:
		"""Nothing committed means nothing to push."""
		mock_git["diff"].return_value = sample_diff
		mock_ui.get_user_action.return_value = ReviewAction.CANCEL

		assert CommitCommand(sample_config, ui=mock_ui).sync() == CommitState.CANCELLED
		mock_ui.confirm_push.assert_not_called()
