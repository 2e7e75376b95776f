"""Configuration for AI-Git."""

from aigit.config.config_loader import (
	ConfigError,
	ConfigLoader,
	ConfigParsingError,
	get_config_path,
	load_repo_config,
)
from aigit.config.schema import AppConfig, OutputConfig, ProviderConfig, RepoConfig

__all__ = [
	"AppConfig",
	"ConfigError",
	"ConfigLoader",
	"ConfigParsingError",
	"OutputConfig",
	"ProviderConfig",
	"RepoConfig",
	"get_config_path",
	"load_repo_config",
]
