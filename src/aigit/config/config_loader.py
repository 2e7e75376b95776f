"""
Configuration loader for AI-Git.

This module loads and saves the global configuration file and reads the
optional repository-local override file.

"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from xdg.BaseDirectory import xdg_config_home

from aigit.config.defaults import CONFIG_DIR_NAME, CONFIG_ENV_VAR, CONFIG_FILE_NAME, REPO_CONFIG_FILE_NAME
from aigit.config.schema import AppConfig, RepoConfig

logger = logging.getLogger(__name__)

CONFIG_FILE_MODE = 0o600


class ConfigError(Exception):
	"""Exception raised for configuration errors."""


class ConfigParsingError(ConfigError):
	"""Exception raised when configuration file cannot be parsed."""


def get_config_path() -> Path:
	"""
	Resolve the global configuration file path.

	``$AI_GIT_CONFIG`` wins when set; otherwise the file lives under
	``$XDG_CONFIG_HOME/ai-git/config.yaml``.

	Returns:
	    Path to the configuration file (it may not exist yet)

	"""
	override = os.environ.get(CONFIG_ENV_VAR)
	if override:
		return Path(override).expanduser()
	return Path(xdg_config_home) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _read_yaml(path: Path) -> dict[str, Any]:
	"""
	Read a YAML mapping from disk.

	Raises:
	    ConfigError: If the file cannot be read
	    ConfigParsingError: If the content is not a YAML mapping

	"""
	try:
		with path.open(encoding="utf-8") as f:
			data = yaml.safe_load(f)
	except yaml.YAMLError as e:
		msg = f"Error parsing configuration file {path}: {e}"
		raise ConfigParsingError(msg) from e
	except OSError as e:
		msg = f"Error reading configuration file {path}: {e}"
		raise ConfigError(msg) from e

	if data is None:
		return {}
	if not isinstance(data, dict):
		msg = f"Configuration file {path} must contain a mapping, got {type(data).__name__}"
		raise ConfigParsingError(msg)
	return data


class ConfigLoader:
	"""
	Loads and saves the global AI-Git configuration.

	The loader is created once per command invocation and the resulting
	``AppConfig`` is passed explicitly to whatever needs it.

	"""

	def __init__(self, config_file: Path | None = None) -> None:
		"""
		Initialize the configuration loader.

		Args:
		    config_file: Path to configuration file (optional)

		"""
		self.config_file = config_file or get_config_path()

	def load(self) -> AppConfig:
		"""
		Load the configuration, falling back to defaults when the file is missing.

		Returns:
		    AppConfig: Loaded configuration

		Raises:
		    ConfigError: If the file exists but cannot be read or validated

		"""
		if not self.config_file.exists():
			logger.debug("No configuration file at %s, using defaults", self.config_file)
			return AppConfig()

		data = _read_yaml(self.config_file)
		try:
			config = AppConfig.model_validate(data)
		except ValidationError as e:
			msg = f"Invalid configuration in {self.config_file}: {e}"
			raise ConfigParsingError(msg) from e

		logger.debug("Loaded configuration from %s", self.config_file)
		return config

	def save(self, config: AppConfig) -> Path:
		"""
		Write the whole configuration back to disk, readable by the owner only.

		Args:
		    config: Configuration to persist

		Returns:
		    Path the configuration was written to

		Raises:
		    ConfigError: If the file cannot be written

		"""
		content = yaml.safe_dump(config.to_yaml_dict(), sort_keys=False, allow_unicode=True)
		try:
			self.config_file.parent.mkdir(parents=True, exist_ok=True)
			fd = os.open(self.config_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, CONFIG_FILE_MODE)
			with os.fdopen(fd, "w", encoding="utf-8") as f:
				f.write(content)
			# os.open only applies the mode to new files
			self.config_file.chmod(CONFIG_FILE_MODE)
		except OSError as e:
			msg = f"Error writing configuration file {self.config_file}: {e}"
			raise ConfigError(msg) from e

		logger.debug("Saved configuration to %s", self.config_file)
		return self.config_file


def load_repo_config(repo_root: Path) -> RepoConfig | None:
	"""
	Read the repository-local override file.

	Args:
	    repo_root: Root directory of the repository

	Returns:
	    The overrides, or None when the repository has no ``.ai-git.yaml``

	Raises:
	    ConfigError: If the file exists but cannot be read or validated

	"""
	path = repo_root / REPO_CONFIG_FILE_NAME
	if not path.exists():
		return None

	data = _read_yaml(path)
	try:
		return RepoConfig.model_validate(data)
	except ValidationError as e:
		msg = f"Invalid repository configuration in {path}: {e}"
		raise ConfigParsingError(msg) from e
