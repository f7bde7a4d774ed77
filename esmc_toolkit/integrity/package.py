"""Package integrity — signed manifest of per-file SHA-256 checksums.

Layout under the package root::

    .claude/ESMC-Chaos/.integrity-manifest.json   # IntegrityManifest
    .package-signature                            # {"signature": "<hmac hex>"}

The signature is HMAC-SHA256 over the compact JSON of the manifest (keys in
written order).  The HMAC key is SHA-256 of ``ESMC_PACKAGE_SIGNATURE_KEY``,
or of ``"ESMC-<buildVersion>-package-signature"`` when no key is configured.
"""

from __future__ import annotations

import hmac
import json
import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from esmc_toolkit.config import ToolkitConfig
from esmc_toolkit.core.hasher import (
    compact_json_bytes,
    derive_key,
    hmac_sha256_hex,
    sha256_file,
)
from esmc_toolkit.models.integrity import (
    IntegrityManifest,
    PackageSignature,
    PackageVerificationReport,
)

logger = logging.getLogger(__name__)

MANIFEST_RELPATH = Path(".claude") / "ESMC-Chaos" / ".integrity-manifest.json"
SIGNATURE_RELPATH = Path(".package-signature")


class IntegrityError(RuntimeError):
    """Raised when the manifest or signature is missing or unreadable."""


def signature_passphrase(build_version: str, config: ToolkitConfig) -> str:
    return config.package_signature_key or f"ESMC-{build_version}-package-signature"


def sign_manifest(manifest: dict[str, Any], config: ToolkitConfig) -> str:
    """HMAC-SHA256 hex of the manifest dict as written."""
    key = derive_key(signature_passphrase(str(manifest.get("buildVersion", "")), config))
    return hmac_sha256_hex(key, compact_json_bytes(manifest))


def build_manifest(
    root: Path,
    files: Iterable[str | Path],
    *,
    build_version: str,
    architecture: str = "",
    build_date: str | None = None,
) -> IntegrityManifest:
    """Checksum *files* (relative to *root*) into a manifest."""
    root = Path(root)
    checksums = {
        Path(f).as_posix(): sha256_file(root / f) for f in sorted(map(str, files))
    }
    return IntegrityManifest(
        build_version=build_version,
        build_date=build_date or datetime.now(timezone.utc).isoformat(),
        architecture=architecture,
        total_files=len(checksums),
        checksums=checksums,
    )


def write_signed_manifest(
    root: Path, manifest: IntegrityManifest, config: ToolkitConfig
) -> str:
    """Write the manifest and its signature under *root*; return the signature."""
    root = Path(root)
    raw = manifest.model_dump(by_alias=True)
    signature = sign_manifest(raw, config)

    manifest_path = root / MANIFEST_RELPATH
    manifest_path.parent.mkdir(parents=True, exist_ok=True)
    manifest_path.write_text(json.dumps(raw, indent=2), encoding="utf-8")
    (root / SIGNATURE_RELPATH).write_text(
        PackageSignature(signature=signature).model_dump_json(), encoding="utf-8"
    )
    logger.info("Signed manifest for build %s (%d files)", manifest.build_version, manifest.total_files)
    return signature


class PackageVerifier:
    """Checks a package tree against its signed integrity manifest.

    Parameters
    ----------
    root:
        Package root; manifest and signature paths are relative to it.
    config:
        Supplies the optional signature key override.
    """

    def __init__(self, root: Path, config: ToolkitConfig | None = None) -> None:
        self._root = Path(root)
        self._config = config or ToolkitConfig()

    def _read_json(self, relpath: Path, what: str) -> Any:
        path = self._root / relpath
        if not path.exists():
            raise IntegrityError(f"{what} not found: {path}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise IntegrityError(f"{what} unreadable: {exc}") from exc

    def load_manifest(self) -> tuple[dict[str, Any], IntegrityManifest]:
        """Return the raw manifest dict (for signing) and its parsed model."""
        raw = self._read_json(MANIFEST_RELPATH, "Integrity manifest")
        try:
            return raw, IntegrityManifest.model_validate(raw)
        except ValidationError as exc:
            raise IntegrityError(f"Integrity manifest malformed: {exc}") from exc

    def load_signature(self) -> PackageSignature:
        raw = self._read_json(SIGNATURE_RELPATH, "Package signature")
        try:
            return PackageSignature.model_validate(raw)
        except ValidationError as exc:
            raise IntegrityError(f"Package signature malformed: {exc}") from exc

    def verify(self) -> PackageVerificationReport:
        """Verify the signature, then every listed file.

        File checks are skipped when the signature does not match: an
        unsigned manifest says nothing about the files.

        Raises
        ------
        IntegrityError
            If the manifest or signature is missing or malformed.
        """
        raw, manifest = self.load_manifest()
        signature = self.load_signature()

        expected = sign_manifest(raw, self._config)
        if not hmac.compare_digest(expected.encode(), signature.signature.encode()):
            logger.error("Signature mismatch for build %s; package may be tampered.", manifest.build_version)
            return PackageVerificationReport(
                build_version=manifest.build_version, signature_valid=False
            )

        verified = 0
        modified: list[str] = []
        missing: list[str] = []
        for relpath, expected_hash in manifest.checksums.items():
            path = self._root / relpath
            if not path.is_file():
                logger.error("Missing: %s", relpath)
                missing.append(relpath)
            elif sha256_file(path) != expected_hash:
                logger.error("Modified: %s", relpath)
                modified.append(relpath)
            else:
                verified += 1

        report = PackageVerificationReport(
            build_version=manifest.build_version,
            signature_valid=True,
            verified=verified,
            modified=modified,
            missing=missing,
        )
        if report.ok:
            logger.info("Package integrity verified (%d files).", verified)
        return report
