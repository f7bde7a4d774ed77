"""Toolkit configuration — env-driven, one singleton.

Reads from a .env file and ESMC_* environment variables via pydantic-settings.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class ToolkitConfig(BaseSettings):
    """Runtime configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export ESMC_ENVIRONMENT=production
        export ESMC_LOG_LEVEL=DEBUG
        export ESMC_PACKAGE_SIGNATURE_KEY=...

    Or via .env file::

        ESMC_API_URL=https://staging.esmc-sdk.com/api
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ESMC_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Runtime environment
    environment: str = "development"
    log_level: str = "INFO"
    debug: bool = False
    dev_mode: bool = False

    # Remote endpoints
    api_url: str = "https://esmc-sdk.com/api"
    request_timeout_seconds: float = 5.0

    # Credential and license storage
    credentials_path: Path = Path.home() / ".esmc" / "credentials.json"
    license_dir: Path | None = None  # auto-detected from the project root when unset
    license_filename: str = ".esmc-license.json"
    license_version: str = "3.65.0"

    # Package integrity
    package_signature_key: str = ""

    # Hardware fingerprint. Never trusted, only compared against the real one.
    hardware_id: str = ""

    @property
    def is_production(self) -> bool:
        """Whether running in production mode."""
        return self.environment == "production"


# Module-level singleton — import as `from esmc_toolkit.config import config`
config = ToolkitConfig()
