"""Small formatting helpers."""

from __future__ import annotations

from typing import Iterable


def format_list(items: Iterable[object]) -> str:
    """Render items as ``{a, b, c}``."""
    return "{" + ", ".join(str(item) for item in items) + "}"