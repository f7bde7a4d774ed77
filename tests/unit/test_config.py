"""Tests for toolkit config — env-driven settings."""

from __future__ import annotations

from pathlib import Path

from esmc_toolkit.config import ToolkitConfig


class TestToolkitConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ESMC_ENVIRONMENT", raising=False)
        config = ToolkitConfig(_env_file=None)
        assert config.environment == "development"
        assert config.log_level == "INFO"
        assert config.api_url == "https://esmc-sdk.com/api"
        assert config.license_filename == ".esmc-license.json"

    def test_default_credentials_path(self):
        config = ToolkitConfig(_env_file=None)
        assert config.credentials_path == Path.home() / ".esmc" / "credentials.json"

    def test_is_production_when_set(self):
        assert ToolkitConfig(environment="production").is_production is True
        assert ToolkitConfig(environment="staging").is_production is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ESMC_API_URL", "https://staging.test/api")
        monkeypatch.setenv("ESMC_REQUEST_TIMEOUT_SECONDS", "1.5")
        config = ToolkitConfig(_env_file=None)
        assert config.api_url == "https://staging.test/api"
        assert config.request_timeout_seconds == 1.5
