"""Bridge stored login credentials into the plaintext license file."""

from __future__ import annotations

import logging
from typing import Any

from esmc_toolkit.auth.credentials import CredentialStore
from esmc_toolkit.auth.license_manager import LicenseManager
from esmc_toolkit.models.license import Credentials, LicenseData
from esmc_toolkit.models.tiers import Tier

logger = logging.getLogger(__name__)

# Devices a tier may bind; anything above PRO gets the MAX allowance.
_MAX_DEVICES = {Tier.FREE: 1, Tier.PRO: 3}


class LicenseSyncError(RuntimeError):
    """Raised when credentials cannot be turned into a license file."""


def credentials_to_user_data(credentials: Credentials) -> dict[str, Any]:
    """Map credentials onto the license manager's user-data shape."""
    local_part = credentials.email.split("@")[0]
    return {
        "email": credentials.email,
        "userId": credentials.user_id or f"MCP_{local_part}",
        "displayName": credentials.name or local_part,
        "tier": credentials.tier,
        "subscriptionStatus": "active",
        "subscriptionEndDate": credentials.expires_at,
        "maxDevices": _MAX_DEVICES.get(credentials.tier, 10),
    }


def sync_license(store: CredentialStore, manager: LicenseManager) -> LicenseData:
    """Load credentials from *store* and write them as a license.

    Raises
    ------
    LicenseSyncError
        If no credentials are stored or the license cannot be written.
    """
    credentials = store.load()
    if credentials is None:
        raise LicenseSyncError(
            f"No credentials found at {store.path}. Log in first."
        )

    logger.info("Syncing %s license for %s", credentials.tier.value, credentials.email)
    try:
        return manager.write(credentials_to_user_data(credentials))
    except OSError as exc:
        raise LicenseSyncError(f"License sync failed: {exc}") from exc
