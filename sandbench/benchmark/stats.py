"""Distribution statistics over iteration timings."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .types import Stats


def percentile(values: Sequence[float], frac: float) -> float:
    """Nearest-rank percentile (0-1) of ``values``; 0.0 for no values."""
    if not values:
        return 0.0
    ordered = sorted(values)
    n = len(ordered)
    idx = math.ceil(frac * n) - 1
    idx = min(max(idx, 0), n - 1)
    return ordered[idx]


def median(values: Sequence[float]) -> float:
    """Median; the mean of the two central values for even counts."""
    if not values:
        return 0.0
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def compute_stats(values: Sequence[float]) -> Stats:
    """Build min/max/median/avg/p95/p99 for a list of millisecond values."""
    if not values:
        return Stats()
    return Stats(
        min=min(values),
        max=max(values),
        median=median(values),
        avg=sum(values) / len(values),
        p95=percentile(values, 0.95),
        p99=percentile(values, 0.99),
    )


__all__ = ["compute_stats", "median", "percentile"]
