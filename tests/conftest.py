"""Shared test fixtures for the ESMC toolkit."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import httpx
import pytest

from esmc_toolkit.auth.credentials import CredentialStore
from esmc_toolkit.auth.license_manager import LicenseManager
from esmc_toolkit.config import ToolkitConfig
from esmc_toolkit.models.license import Credentials
from esmc_toolkit.models.tiers import Tier

# Fixed key so tests never depend on the host fingerprint.
TEST_KEY = bytes(range(32))


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


@pytest.fixture
def config(tmp_dir: Path) -> ToolkitConfig:
    """Development config pointing all storage at the temp directory."""
    return ToolkitConfig(
        environment="development",
        api_url="https://api.test",
        credentials_path=tmp_dir / "home" / ".esmc" / "credentials.json",
        license_dir=tmp_dir / "project" / ".claude",
        package_signature_key="",
        hardware_id="",
    )


@pytest.fixture
def credential_store(config: ToolkitConfig) -> CredentialStore:
    """Provide a CredentialStore with a fixed encryption key."""
    return CredentialStore(config.credentials_path, key=TEST_KEY)


@pytest.fixture
def license_manager(config: ToolkitConfig) -> LicenseManager:
    """Provide a LicenseManager writing into the temp project."""
    return LicenseManager(config.license_dir, config)


# ---------------------------------------------------------------------------
# Factories — shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_credentials() -> Callable[..., Credentials]:
    """Factory fixture: build Credentials with sensible defaults."""

    def _factory(
        email: str = "ada@example.com",
        tier: Tier = Tier.PRO,
        expires_in: timedelta | None = timedelta(days=30),
        **overrides: Any,
    ) -> Credentials:
        defaults: dict[str, Any] = {
            "token": "tok-123",
            "email": email,
            "name": "Ada",
            "user_id": "user-1",
            "tier": tier,
            "expires_at": (
                datetime.now(timezone.utc) + expires_in if expires_in is not None else None
            ),
        }
        defaults.update(overrides)
        return Credentials(**defaults)

    return _factory


@pytest.fixture
def make_http_client() -> Callable[..., httpx.Client]:
    """Factory fixture: an httpx.Client answering every request with *handler*.

    ``handler`` may be a callable taking the request, or a
    ``(status_code, json_body)`` tuple.  Requests are recorded on
    ``client.requests``.
    """

    def _factory(handler: Any) -> httpx.Client:
        seen: list[httpx.Request] = []

        def _respond(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if callable(handler):
                return handler(request)
            status, body = handler
            return httpx.Response(status, json=body)

        client = httpx.Client(transport=httpx.MockTransport(_respond))
        client.requests = seen  # type: ignore[attr-defined]
        return client

    return _factory


@pytest.fixture
def package_root(tmp_dir: Path) -> Path:
    """A small package tree with component files to checksum."""
    root = tmp_dir / "pkg"
    components = root / ".claude" / "ESMC-Chaos" / "components"
    components.mkdir(parents=True)
    (components / "colonel.js").write_text("module.exports = {};\n", encoding="utf-8")
    (components / "intel.js").write_text("// intelligence\n", encoding="utf-8")
    (root / "README.md").write_text("# ESMC\n", encoding="utf-8")
    return root
