"""Tier management — which tier is active and what it unlocks.

Resolution order in :meth:`TierManager.initialize`:

1. No stored credentials → FREE (``source="default"``).
2. Backend validation succeeds → server tier (``source="backend"``).
3. Backend unreachable or rejects → local fallback:
   expired credentials are cleared and the tier reverts to FREE
   (``source="expired"``); otherwise the stored tier (``source="local"``).
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import httpx

from esmc_toolkit.auth.credentials import CredentialStore, is_expired
from esmc_toolkit.auth.hardware import hardware_id
from esmc_toolkit.config import ToolkitConfig
from esmc_toolkit.models.license import Credentials, TierStatus
from esmc_toolkit.models.tiers import (
    TIER_FEATURES,
    TIER_HIERARCHY,
    ColonelRank,
    Tier,
    TierFeatures,
    features_for,
)

logger = logging.getLogger(__name__)


class UnknownTierError(ValueError):
    """Raised when a tier name is not one of FREE, PRO, MAX, VIP."""


class TierManager:
    """Resolves the active tier and answers feature-gate questions.

    Parameters
    ----------
    store:
        Where credentials are loaded from (and cleared when expired).
    config:
        Supplies ``api_url`` and the request timeout.
    http_client:
        Optional ``httpx.Client``; one is created per request otherwise.
    """

    def __init__(
        self,
        store: CredentialStore,
        config: ToolkitConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._store = store
        self._config = config or ToolkitConfig()
        self._http = http_client
        self.current_tier: Tier = Tier.FREE
        self.credentials: Credentials | None = None
        self.features: TierFeatures = TIER_FEATURES[Tier.FREE]

    # -- Backend ------------------------------------------------------------

    def validate_with_backend(self, token: str, hw_id: str) -> dict[str, Any] | None:
        """POST the token to the backend; return the user dict or ``None``.

        Any transport or decoding failure returns ``None`` so that the
        caller falls back to local validation.
        """
        url = f"{self._config.api_url}/esmc/mcp/validate"
        payload = {"token": token, "hardwareId": hw_id}
        try:
            if self._http is not None:
                response = self._http.post(url, json=payload)
            else:
                with httpx.Client(timeout=self._config.request_timeout_seconds) as client:
                    response = client.post(url, json=payload)
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Backend validation failed: %s", exc)
            return None

        if not response.is_success or not isinstance(data, dict) or not data.get("valid"):
            logger.info("Backend rejected token (HTTP %d).", response.status_code)
            return None
        user = data.get("user")
        if not isinstance(user, dict):
            logger.warning("Backend reply carried no user record; using local credentials.")
            return None
        return user

    # -- Initialization -----------------------------------------------------

    def _activate(self, tier: str | Tier | None) -> None:
        try:
            self.current_tier = Tier(tier)
        except ValueError:
            self.current_tier = Tier.FREE
        self.features = features_for(self.current_tier)

    def initialize(self) -> TierStatus:
        self.credentials = self._store.load()

        if self.credentials is None:
            self._activate(Tier.FREE)
            return TierStatus(
                tier=Tier.FREE,
                source="default",
                authenticated=False,
                message="Not logged in - using FREE tier",
            )

        backend = self.validate_with_backend(
            self.credentials.token, hardware_id(self._config)
        )
        if backend is not None:
            self._activate(backend.get("tier"))
            return TierStatus(
                tier=self.current_tier,
                source="backend",
                authenticated=True,
                email=backend.get("email"),
                name=backend.get("name"),
                expires_at=_parse_datetime(backend.get("expiresAt")),
            )

        if is_expired(self.credentials):
            logger.warning("Subscription expired - cleaning up credentials")
            self._store.clear()
            self.credentials = None
            self._activate(Tier.FREE)
            return TierStatus(
                tier=Tier.FREE,
                source="expired",
                authenticated=False,
                message="Subscription expired - reverted to FREE tier",
            )

        self._activate(self.credentials.tier)
        return TierStatus(
            tier=self.current_tier,
            source="local",
            authenticated=True,
            email=self.credentials.email,
            name=self.credentials.name,
            expires_at=self.credentials.expires_at,
        )

    # -- Feature gates ------------------------------------------------------

    @property
    def tier(self) -> Tier:
        return self.current_tier

    def is_intelligence_enabled(self, component: str) -> bool:
        return component in self.features.intelligence

    def is_colonel_enabled(self, colonel: str | ColonelRank) -> bool:
        try:
            return ColonelRank(colonel) in self.features.colonels
        except ValueError:
            return False

    def is_module_enabled(self, module: str) -> bool:
        return module in self.features.modules

    def available_colonels(self, required: list[str]) -> list[str]:
        """Filter *required* down to the colonels this tier unlocks."""
        return [c for c in required if self.is_colonel_enabled(c)]

    @property
    def memory_type(self) -> str:
        return self.features.memory

    def validate_access(self, required_tier: str | Tier) -> bool:
        """Whether the active tier is at least *required_tier*.

        Raises
        ------
        UnknownTierError
            If *required_tier* is not a known tier.
        """
        try:
            required = Tier(required_tier)
        except ValueError:
            raise UnknownTierError(f"Unknown tier: {required_tier!r}") from None
        return (
            TIER_HIERARCHY.index(self.current_tier.value)
            >= TIER_HIERARCHY.index(required.value)
        )

    def user_info(self) -> dict[str, Any] | None:
        if self.credentials is None:
            return None
        return {
            "email": self.credentials.email,
            "name": self.credentials.name,
            "tier": self.current_tier.value,
            "expiresAt": self.credentials.expires_at,
        }

    def is_max_or_vip(self) -> bool:
        return self.current_tier in (Tier.MAX, Tier.VIP)

    def is_mysql_enabled(self) -> bool:
        return self.features.memory == "mysql"


def _parse_datetime(value: Any) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        logger.warning("Ignoring unparseable expiry from backend: %r", value)
        return None
