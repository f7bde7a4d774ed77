"""Adversarial tests — attempts to unlock a higher tier than paid for."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from esmc_toolkit.auth.tier_manager import TierManager, UnknownTierError
from esmc_toolkit.models.tiers import Tier


def _offline(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("down", request=request)


class TestTierEscalation:
    def test_unknown_required_tier_never_grants_access(self, credential_store, config):
        manager = TierManager(credential_store, config)
        with pytest.raises(UnknownTierError):
            manager.validate_access("GOD_MODE")
        with pytest.raises(UnknownTierError):
            manager.validate_access("free")

    def test_backend_without_valid_flag_is_not_trusted(
        self, credential_store, config, make_credentials, make_http_client
    ):
        """A 200 response that omits ``valid`` must not override the local tier."""
        credential_store.save(make_credentials(tier=Tier.FREE, expires_in=None))
        client = make_http_client((200, {"user": {"tier": "VIP"}}))
        status = TierManager(credential_store, config, http_client=client).initialize()
        assert status.source == "local"
        assert status.tier is Tier.FREE

    def test_hardware_id_override_not_sent(
        self, credential_store, config, make_credentials, make_http_client
    ):
        credential_store.save(make_credentials())
        client = make_http_client((200, {"valid": True, "user": {"tier": "PRO"}}))
        spoofing = config.model_copy(update={"hardware_id": "a" * 64})
        TierManager(credential_store, spoofing, http_client=client).initialize()
        (request,) = client.requests
        assert json.loads(request.content)["hardwareId"] != "a" * 64

    def test_expired_local_license_downgraded(self, license_manager):
        past = (datetime.now(timezone.utc) - timedelta(minutes=1)).isoformat()
        license_manager.write({"email": "eve@example.com", "tier": "VIP", "subscriptionEndDate": past})
        result = license_manager.validate()
        assert result.tier is Tier.FREE
        assert result.subscription_status == "expired"

    def test_offline_expired_credentials_cannot_keep_tier(
        self, credential_store, config, make_credentials, make_http_client
    ):
        credential_store.save(make_credentials(tier=Tier.VIP, expires_in=timedelta(seconds=-5)))
        manager = TierManager(credential_store, config, http_client=make_http_client(_offline))
        manager.initialize()
        assert manager.tier is Tier.FREE
        assert not manager.is_max_or_vip()
