"""Global test fixtures and configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock

import pytest

from aigit.config import AppConfig, OutputConfig, ProviderConfig
from aigit.git.commit import CommitUI

if TYPE_CHECKING:
	from pathlib import Path


SAMPLE_DIFF = """diff --git a/app.py b/app.py
index 1234567..abcdefg 100644
--- a/app.py
+++ b/app.py
@@ -1,3 +1,4 @@
 import os
+import sys

 def main():
"""


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
	"""Point the global configuration at a file inside the test's temp dir."""
	path = tmp_path / "config" / "ai-git" / "config.yaml"
	monkeypatch.setenv("AI_GIT_CONFIG", str(path))
	return path


@pytest.fixture
def sample_config() -> AppConfig:
	"""A configuration with OpenAI selected and every provider filled in."""
	return AppConfig(
		default_provider="openai",
		providers={
			"openai": ProviderConfig(api_key="sk-test", default_model="gpt-4o"),
			"gemini": ProviderConfig(api_key="g-test", default_model="gemini-1.5-flash"),
			"anthropic": ProviderConfig(api_key="a-test", default_model="claude-3-5-sonnet-latest"),
			"ollama": ProviderConfig(default_model="llama3", base_url="http://localhost:11434"),
		},
		output=OutputConfig(language="english", style="conventional"),
	)


@pytest.fixture
def sample_diff() -> str:
	"""A small staged diff."""
	return SAMPLE_DIFF


@pytest.fixture
def mock_ui() -> Mock:
	"""A CommitUI double whose prompts are driven by the test."""
	return Mock(spec=CommitUI)
