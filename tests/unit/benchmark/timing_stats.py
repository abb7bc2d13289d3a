"""Unit tests for timing distribution statistics."""

from __future__ import annotations

import pytest

from sandbench.benchmark import Stats, median, percentile, compute_stats


def test_even_count_stats() -> None:
    stats = compute_stats([400.0, 100.0, 300.0, 200.0])
    assert stats.min == 100.0
    assert stats.max == 400.0
    assert stats.median == 250.0
    assert stats.avg == 250.0
    assert stats.p95 == 400.0
    assert stats.p99 == 400.0


def test_odd_count_median_is_central_value() -> None:
    assert median([5.0, 1.0, 3.0]) == 3.0


def test_empty_input_yields_zeroed_stats() -> None:
    assert compute_stats([]) == Stats()
    assert percentile([], 0.95) == 0.0
    assert median([]) == 0.0


def test_single_value_fills_every_field() -> None:
    stats = compute_stats([42.0])
    assert (stats.min, stats.max, stats.median, stats.avg, stats.p95, stats.p99) == (42.0,) * 6


@pytest.mark.parametrize(
    ("frac", "expected"),
    [(0.5, 50.0), (0.95, 95.0), (0.99, 99.0), (1.0, 100.0), (0.0, 1.0)],
)
def test_nearest_rank_percentile(frac: float, expected: float) -> None:
    values = [float(v) for v in range(100, 0, -1)]
    assert percentile(values, frac) == expected


def test_percentile_on_small_sample_uses_upper_rank() -> None:
    # ceil(0.95 * 10) - 1 = 9 -> largest value
    values = [float(v) for v in range(1, 11)]
    assert percentile(values, 0.95) == 10.0
    assert percentile(values, 0.5) == 5.0


def test_stats_are_order_independent() -> None:
    values = [120.0, 80.0, 300.0, 95.0, 150.0]
    assert compute_stats(values) == compute_stats(sorted(values)) == compute_stats(values[::-1])
