"""Hashing helpers shared by the component utilities and the integrity layer."""

from __future__ import annotations

import hashlib
import hmac
import json
from pathlib import Path
from typing import Any


def canonical_json_bytes(obj: Any) -> bytes:
    """Produce canonical JSON bytes — deterministic, sorted, compact.

    - sorted keys
    - no whitespace separators (",", ":")
    - ensure_ascii=True
    - UTF-8 encoding
    """
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")


def compact_json_bytes(obj: Any) -> bytes:
    """Compact JSON that keeps key insertion order.

    This is the byte form the package manifest is signed over, so keys
    must stay in the order the manifest was written.
    """
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def sha256_hex(data: bytes) -> str:
    """Return the SHA-256 hex digest of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def sha256_text(text: str) -> str:
    """SHA-256 hex digest of a UTF-8 encoded string."""
    return sha256_hex(text.encode("utf-8"))


def sha256_file(path: Path) -> str:
    """SHA-256 hex digest of a file's raw bytes."""
    return sha256_hex(Path(path).read_bytes())


def content_address(obj: Any) -> str:
    """Content-address a JSON-serializable object as ``"sha256:<hex>"``."""
    return f"sha256:{sha256_hex(canonical_json_bytes(obj))}"


def derive_key(passphrase: str) -> bytes:
    """32-byte key from a passphrase (raw SHA-256 digest)."""
    return hashlib.sha256(passphrase.encode("utf-8")).digest()


def hmac_sha256_hex(key: bytes, data: bytes) -> str:
    """HMAC-SHA256 of *data* under *key*, hex encoded."""
    return hmac.new(key, data, hashlib.sha256).hexdigest()
