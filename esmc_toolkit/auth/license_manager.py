"""Plaintext license file — write after login, read for tier checks.

The license lives at a fixed location, ``{project_root}/.claude/.esmc-license.json``,
so start-up checks can find it without decryption.  Tamper protection comes
from the server-issued blessing token and rotating checksum it carries, not
from encrypting the file.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError

from esmc_toolkit.config import ToolkitConfig
from esmc_toolkit.models.license import (
    BlessingToken,
    LicenseData,
    LicenseValidation,
    ServerChecksum,
)
from esmc_toolkit.models.tiers import Tier

logger = logging.getLogger(__name__)


def find_project_root(start: Path | None = None) -> Path:
    """Locate the project root by walking up from *start*.

    1. The first ancestor containing ``.claude/memory/`` wins.
    2. Otherwise the nearest ancestor with ``.claude/`` is used and its
       ``memory/`` directory is created.
    3. Otherwise the current working directory, with ``.claude/memory/``
       created in it.
    """
    current = Path(start or Path.cwd()).resolve()
    best_candidate: Path | None = None

    for directory in (current, *current.parents):
        claude_dir = directory / ".claude"
        if (claude_dir / "memory").is_dir():
            return directory
        if best_candidate is None and claude_dir.is_dir():
            best_candidate = directory

    root = best_candidate or Path.cwd()
    memory_dir = root / ".claude" / "memory"
    if not memory_dir.exists():
        memory_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Created %s for first-run initialization", memory_dir)
    return root


class LicenseManager:
    """Read, write and validate the plaintext license file.

    Parameters
    ----------
    license_dir:
        Directory holding the license.  Defaults to ``config.license_dir``,
        then ``{find_project_root()}/.claude``.
    config:
        Supplies the filename, license version and API URL.
    http_client:
        Optional ``httpx.Client`` for server checksum validation.
    """

    def __init__(
        self,
        license_dir: Path | None = None,
        config: ToolkitConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._config = config or ToolkitConfig()
        directory = license_dir or self._config.license_dir
        if directory is None:
            directory = find_project_root() / ".claude"
        self._dir = Path(directory)
        self._http = http_client

    @property
    def license_path(self) -> Path:
        return self._dir / self._config.license_filename

    # -- Write --------------------------------------------------------------

    def create_license_data(self, user_data: Mapping[str, Any]) -> LicenseData:
        """Build license contents from login user data (camelCase keys)."""
        email = user_data["email"]
        return LicenseData.model_validate({
            "version": self._config.license_version,
            "mode": "plaintext",
            "email": email,
            "userId": user_data.get("userId") or "",
            "displayName": user_data.get("displayName") or email.split("@")[0],
            "tier": user_data.get("tier") or Tier.FREE,
            "subscriptionStatus": user_data.get("subscriptionStatus") or "active",
            "subscriptionEndDate": user_data.get("subscriptionEndDate"),
            "compositeDeviceId": user_data.get("compositeDeviceId"),
            "maxDevices": user_data.get("maxDevices") or 1,
            "blessing": user_data.get("blessing"),
            "vercelChecksum": user_data.get("vercelChecksum"),
        })

    def write(self, user_data: Mapping[str, Any]) -> LicenseData:
        """Write (or overwrite) the license file and return what was written."""
        license_data = self.create_license_data(user_data)
        self._dir.mkdir(parents=True, exist_ok=True)
        self.license_path.write_text(
            license_data.model_dump_json(by_alias=True, indent=2), encoding="utf-8"
        )
        logger.debug("Wrote %s license to %s", license_data.tier.value, self.license_path)
        return license_data

    def update(self, user_data: Mapping[str, Any]) -> LicenseData:
        """Refresh from server data; same as :meth:`write`."""
        return self.write(user_data)

    def delete(self) -> bool:
        """Remove the license file (logout).  True if a file was removed."""
        if not self.license_path.exists():
            return False
        self.license_path.unlink()
        logger.info("License file deleted.")
        return True

    # -- Read ---------------------------------------------------------------

    def read(self) -> LicenseData | None:
        """Load the license, downgrading an expired one to FREE.

        Returns ``None`` when no license exists or it cannot be parsed.
        """
        path = self.license_path
        if not path.exists():
            logger.info("No license file found - user not logged in")
            return None

        try:
            license_data = LicenseData.model_validate_json(path.read_text(encoding="utf-8"))
        except (ValidationError, UnicodeDecodeError, OSError) as exc:
            logger.error("License file read failed: %s", exc)
            return None

        if license_data.is_expired:
            logger.warning("License expired: %s", license_data.subscription_end_date)
            return license_data.model_copy(
                update={"tier": Tier.FREE, "subscription_status": "expired"}
            )
        return license_data

    def info(self) -> LicenseData | None:
        return self.read()

    def validate(self) -> LicenseValidation:
        license_data = self.read()
        if license_data is None:
            return LicenseValidation(
                valid=False, tier=Tier.FREE, reason="No license file found"
            )
        return LicenseValidation(
            valid=True,
            tier=license_data.tier,
            email=license_data.email,
            user_id=license_data.user_id,
            subscription_status=license_data.subscription_status,
            subscription_end_date=license_data.subscription_end_date,
            issued_at=license_data.issued_at,
            last_validated=license_data.last_validated,
        )

    # -- Tamper protection layers -------------------------------------------

    @staticmethod
    def verify_blessing(blessing: BlessingToken | None) -> bool:
        """Structural check of a blessing token: signed, complete, unexpired."""
        if blessing is None or not blessing.signature:
            logger.error("Blessing validation: missing blessing or signature")
            return False
        if not blessing.tier or blessing.expires_at is None or not blessing.composite_device_id:
            logger.error("Blessing validation: missing required blessing fields")
            return False
        if datetime.now(timezone.utc) > blessing.expires_at:
            logger.error("Blessing validation: blessing token expired")
            return False
        return True

    def validate_server_checksum(
        self, email: str, tier: str, checksum: ServerChecksum | None
    ) -> bool:
        """Ask the server whether *checksum* is current for this user.

        Any network or decoding failure counts as invalid.
        """
        if checksum is None or not checksum.value or not checksum.rotation:
            logger.error("Checksum validation: missing checksum data")
            return False

        url = f"{self._config.api_url}/v1/auth/validate-checksum"
        params = {
            "email": email,
            "tier": tier,
            "rotation": checksum.rotation,
            "checksum": checksum.value,
        }
        try:
            if self._http is not None:
                response = self._http.get(url, params=params)
            else:
                with httpx.Client(timeout=self._config.request_timeout_seconds) as client:
                    response = client.get(url, params=params)
            result = response.json()
        except (httpx.HTTPError, json.JSONDecodeError) as exc:
            logger.error("Checksum validation error: %s", exc)
            return False

        if isinstance(result, dict) and result.get("valid"):
            return True
        logger.error(
            "Checksum validation failed: %s",
            result.get("error") if isinstance(result, dict) else result,
        )
        return False
