"""DataProcessor — list passthrough, presence check, JSON serialization."""

from __future__ import annotations

import json
from typing import Any


class DataProcessor:
    """Stateless processor; every method is a one-liner over the stdlib."""

    def process(self, value: Any) -> Any:
        """Shallow copy of a list; any other value is returned as is."""
        if isinstance(value, list):
            return list(value)
        return value

    def validate(self, data: Any) -> bool:
        return data is not None

    def serialize(self, obj: Any) -> str:
        """Compact JSON text of *obj*.  Non-serializable input raises."""
        return json.dumps(obj, separators=(",", ":"))
