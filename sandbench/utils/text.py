"""Text helpers for diagnostics."""

from __future__ import annotations

from sandbench.config.benchmark import FAILURE_DETAIL_MAX_CHARS


def truncate(value: str, max_length: int = FAILURE_DETAIL_MAX_CHARS) -> str:
    """Cut ``value`` to ``max_length`` characters, marking the cut with ``...``."""
    if len(value) <= max_length:
        return value
    return f"{value[: max_length - 3]}..."


__all__ = ["truncate"]
