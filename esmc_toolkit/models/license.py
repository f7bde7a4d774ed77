"""Credential, tier-status and license file models.

On disk these use camelCase keys (``userId``, ``subscriptionEndDate``);
in Python they are snake_case.  Always dump with ``by_alias=True``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from esmc_toolkit.models.tiers import Tier


def _as_utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Credentials(_CamelModel):
    """What the login flow stores in ``~/.esmc/credentials.json``."""

    token: str = ""
    email: str
    name: str = ""
    user_id: str = ""
    tier: Tier = Tier.FREE
    expires_at: datetime | None = None

    @field_validator("expires_at")
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value)


class TierStatus(_CamelModel):
    """Outcome of ``TierManager.initialize()``."""

    tier: Tier
    source: Literal["default", "backend", "expired", "local"]
    authenticated: bool
    email: str | None = None
    name: str | None = None
    expires_at: datetime | None = None
    message: str = ""


class BlessingToken(_CamelModel):
    """Server-issued tamper-protection token embedded in a license."""

    tier: str = ""
    expires_at: datetime | None = None
    composite_device_id: str = ""
    signature: str = ""

    @field_validator("expires_at")
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value)


class ServerChecksum(_CamelModel):
    """Rotating checksum the server can validate against replay."""

    value: str = ""
    rotation: str = ""


class LicenseData(_CamelModel):
    """Plaintext license file contents."""

    version: str
    mode: str = "plaintext"
    email: str
    user_id: str = ""
    display_name: str = ""
    tier: Tier = Tier.FREE
    subscription_status: str = "active"
    subscription_end_date: datetime | None = None
    composite_device_id: str | None = None
    max_devices: int = 1
    blessing: BlessingToken | None = None
    server_checksum: ServerChecksum | None = Field(
        default=None, alias="vercelChecksum"
    )
    issued_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    last_validated: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("subscription_end_date")
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        return _as_utc(value)

    @property
    def is_expired(self) -> bool:
        if self.subscription_end_date is None:
            return False
        return datetime.now(timezone.utc) > self.subscription_end_date


class LicenseValidation(_CamelModel):
    """Result of ``LicenseManager.validate()``."""

    valid: bool
    tier: Tier = Tier.FREE
    reason: str = ""
    email: str | None = None
    user_id: str | None = None
    subscription_status: str | None = None
    subscription_end_date: datetime | None = None
    issued_at: datetime | None = None
    last_validated: datetime | None = None
