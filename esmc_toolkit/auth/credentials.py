"""Machine-bound encrypted credential storage.

Credentials are encrypted with a NaCl ``SecretBox`` whose key is the
SHA-256 of this machine's id, so a copied credentials file does not
decrypt elsewhere.  On disk: ``{"encrypted": "<hex nonce+ciphertext>"}``.
"""

from __future__ import annotations

import hashlib
import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import nacl.secret
from nacl.exceptions import CryptoError
from pydantic import ValidationError

from esmc_toolkit.auth.hardware import base_machine_id
from esmc_toolkit.models.license import Credentials

logger = logging.getLogger(__name__)


def machine_key() -> bytes:
    """32-byte encryption key bound to this machine."""
    return hashlib.sha256(base_machine_id().encode("utf-8")).digest()


def is_expired(credentials: Credentials | None) -> bool:
    """Credentials without an expiry (FREE tier) never expire."""
    if credentials is None or credentials.expires_at is None:
        return False
    return credentials.expires_at < datetime.now(timezone.utc)


class CredentialStore:
    """Save, load and clear encrypted credentials.

    Parameters
    ----------
    path:
        The credentials JSON file.
    key:
        Encryption key override (32 bytes).  Defaults to :func:`machine_key`.
    """

    def __init__(self, path: Path, *, key: bytes | None = None) -> None:
        self._path = Path(path)
        self._box = nacl.secret.SecretBox(key or machine_key())

    @property
    def path(self) -> Path:
        return self._path

    def save(self, credentials: Credentials) -> None:
        plaintext = credentials.model_dump_json(by_alias=True).encode("utf-8")
        encrypted = self._box.encrypt(plaintext)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps({"encrypted": bytes(encrypted).hex()}), encoding="utf-8"
        )
        logger.info("Saved credentials for %s to %s", credentials.email, self._path)

    def load(self) -> Credentials | None:
        """Decrypt and return the stored credentials.

        Returns ``None`` if no file exists, or if it fails to decrypt or
        parse (corrupted, tampered, or written on another machine).
        """
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            plaintext = self._box.decrypt(bytes.fromhex(data["encrypted"]))
            return Credentials.model_validate_json(plaintext)
        except (CryptoError, ValidationError, ValueError, KeyError, TypeError) as exc:
            logger.error("Credentials corrupted or tampered: %s", exc)
            return None

    def clear(self) -> None:
        """Remove the credentials file (logout).  Missing file is a no-op."""
        self._path.unlink(missing_ok=True)
