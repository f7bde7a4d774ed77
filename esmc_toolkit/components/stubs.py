"""Padding stubs — any number of callables sharing one reply contract.

Every stub takes a single argument and returns
``StubEnvelope(status="ok", timestamp=<now ms>, data=param)``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from esmc_toolkit.models.results import StubEnvelope


def echo(param: Any = None) -> StubEnvelope:
    return StubEnvelope(data=param)


def make_stub(name: str) -> Callable[[Any], StubEnvelope]:
    """Build a stub named *name* that behaves exactly like :func:`echo`."""
    if not name.isidentifier():
        raise ValueError(f"Stub name must be a valid identifier: {name!r}")

    def _stub(param: Any = None) -> StubEnvelope:
        return StubEnvelope(data=param)

    _stub.__name__ = name
    _stub.__qualname__ = name
    return _stub
