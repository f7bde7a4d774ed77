"""Package integrity manifest and verification report models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IntegrityManifest(BaseModel):
    """``.integrity-manifest.json`` — per-file SHA-256 checksums of a build.

    Field order matters: the package signature is an HMAC over the compact
    JSON of this manifest in the order it was written.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    build_version: str
    build_date: str
    architecture: str = ""
    total_files: int
    checksums: dict[str, str] = {}


class PackageSignature(BaseModel):
    """``.package-signature`` — HMAC-SHA256 hex over the manifest."""

    model_config = ConfigDict(frozen=True)

    signature: str


class PackageVerificationReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    build_version: str
    signature_valid: bool
    verified: int = 0
    modified: list[str] = []
    missing: list[str] = []

    @property
    def ok(self) -> bool:
        return self.signature_valid and not self.modified and not self.missing


class IntegritySample(BaseModel):
    """One file/hash pair picked by the server for a spot check."""

    model_config = ConfigDict(frozen=True)

    file: str
    hash: str


class SampleVerificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    failed: list[str] = Field(default_factory=list)
    verified: int = 0
    total: int = 0
    skipped: bool = False
