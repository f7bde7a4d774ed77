"""Path helpers — thin wrappers over ``os.path``."""

from __future__ import annotations

import os


def normalize(p: str) -> str:
    return os.path.normpath(p)


def join(*parts: str) -> str:
    """Concatenate *parts* with the separator, then normalize.

    Every part is treated as relative to the one before it, so an absolute
    segment does not discard earlier parts: ``join("a", "/b")`` is ``"a/b"``.
    Only a leading absolute part keeps the result absolute.  Empty parts are
    ignored, and no parts (or only empty ones) yields ``"."``.
    """
    parts = tuple(part for part in parts if part)
    if not parts:
        return "."
    head, *tail = parts
    return os.path.normpath(os.path.join(head, *(p.lstrip("/\\") for p in tail)))


def resolve(p: str) -> str:
    """Absolute, normalized form of *p* relative to the working directory."""
    return os.path.abspath(p)
