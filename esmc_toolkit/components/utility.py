"""Hash / validate / transform helpers.

Thin wrappers: errors from hashlib and json propagate unchanged.
"""

from __future__ import annotations

import json
from typing import Any

from esmc_toolkit.core.hasher import sha256_hex

# Scalars never count as composite values.
_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, bool)


def hash_data(data: str | bytes | bytearray | memoryview) -> str:
    """Hex SHA-256 of *data*; strings are hashed as UTF-8.

    Raises ``TypeError`` for anything hashlib cannot digest.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return sha256_hex(data)


def validate(value: Any) -> bool:
    """True iff *value* is present and composite (mapping, sequence, object).

    Scalars, ``None``, functions and classes are rejected.
    """
    if value is None or isinstance(value, _SCALAR_TYPES):
        return False
    return not callable(value)


def transform(data: Any) -> Any:
    """Deep copy through a JSON round trip.

    Tuples come back as lists.  Cycles raise ``ValueError``; values JSON
    cannot encode raise ``TypeError``.
    """
    return json.loads(json.dumps(data))
