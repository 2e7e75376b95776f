"""Pydantic schemas for the AI-Git configuration files."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from aigit.config.defaults import (
	CONTEXT_PLACEHOLDER,
	DEFAULT_COMMIT_PROMPT_TEMPLATE,
	DEFAULT_SYSTEM_PROMPT,
	DIFF_PLACEHOLDER,
	POSITIONAL_PLACEHOLDER,
)


class _YamlSchema(BaseModel):
	"""Base schema that treats YAML nulls as missing keys."""

	# YAML reads bare values like `model_override: 4` as numbers
	model_config = ConfigDict(coerce_numbers_to_str=True)

	@model_validator(mode="before")
	@classmethod
	def _drop_nulls(cls, data: Any) -> Any:  # noqa: ANN401
		if isinstance(data, dict):
			return {key: value for key, value in data.items() if value is not None}
		return data


class ProviderConfig(_YamlSchema):
	"""Credentials and model settings for one provider."""

	api_key: str = ""
	default_model: str = ""
	custom_models: list[str] = Field(default_factory=list)
	base_url: str | None = None
	# Seconds; None waits for the provider indefinitely
	timeout: float | None = None


class OutputConfig(_YamlSchema):
	"""Output preferences."""

	language: str = ""
	style: str = ""


class AppConfig(_YamlSchema):
	"""The global configuration record."""

	default_provider: str = ""
	providers: dict[str, ProviderConfig] = Field(default_factory=dict)
	output: OutputConfig = Field(default_factory=OutputConfig)
	system_prompt: str = DEFAULT_SYSTEM_PROMPT
	commit_prompt_template: str = DEFAULT_COMMIT_PROMPT_TEMPLATE

	@field_validator("system_prompt")
	@classmethod
	def _default_system_prompt(cls, value: str) -> str:
		return value or DEFAULT_SYSTEM_PROMPT

	@field_validator("commit_prompt_template")
	@classmethod
	def _default_commit_prompt(cls, value: str) -> str:
		template = value or DEFAULT_COMMIT_PROMPT_TEMPLATE
		# Named placeholders switch off positional filling
		positional = CONTEXT_PLACEHOLDER not in template and POSITIONAL_PLACEHOLDER in template
		if DIFF_PLACEHOLDER not in template and not positional:
			msg = f"commit_prompt_template must contain {DIFF_PLACEHOLDER} or {POSITIONAL_PLACEHOLDER} for the diff"
			raise ValueError(msg)
		return template

	def to_yaml_dict(self) -> dict[str, Any]:
		"""
		Convert to a plain dict for writing, omitting empty optional provider fields.

		Returns:
		    A dict safe to pass to ``yaml.safe_dump``

		"""
		data = self.model_dump()
		for provider in data["providers"].values():
			if not provider["custom_models"]:
				del provider["custom_models"]
			for key in ("base_url", "timeout"):
				if provider[key] is None:
					del provider[key]
		return data


class RepoConfig(_YamlSchema):
	"""Repository-local overrides read from ``.ai-git.yaml``."""

	enabled_provider: str = ""
	model_override: str = ""
	commit_style: str = ""
	language: str = ""
