"""Unit tests for composite scoring and ranking."""

from __future__ import annotations

import pytest

from sandbench.benchmark import (
    Stats,
    TimingSample,
    ScoringWeights,
    BenchmarkResult,
    BenchmarkSummary,
    score_metric,
    compute_success_rate,
    compute_timing_score,
    compute_composite_score,
    sort_by_composite_score,
    compute_composite_scores,
)


def _result(provider: str, tti_values: list[float], failures: int = 0) -> BenchmarkResult:
    samples = [TimingSample(tti_ms=v) for v in tti_values]
    samples += [TimingSample.failure("boom")] * failures
    stats = Stats(
        min=min(tti_values),
        max=max(tti_values),
        median=sorted(tti_values)[len(tti_values) // 2],
        avg=sum(tti_values) / len(tti_values),
        p95=max(tti_values),
        p99=max(tti_values),
    )
    return BenchmarkResult(provider=provider, iterations=samples, summary=BenchmarkSummary(tti_ms=stats))


def _skipped(provider: str) -> BenchmarkResult:
    return BenchmarkResult(provider=provider, skipped=True, skip_reason="Missing: TOKEN")


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.0, 100.0), (5_000.0, 50.0), (10_000.0, 0.0), (20_000.0, 0.0), (2_500.0, 75.0)],
)
def test_score_metric(value: float, expected: float) -> None:
    assert score_metric(value) == pytest.approx(expected)


def test_timing_score_uses_weights() -> None:
    stats = Stats(min=0.0, max=10_000.0, median=5_000.0, avg=0.0, p95=10_000.0, p99=10_000.0)
    # 0.5*50 + 0.2*0 + 0.1*0 + 0.05*100 + 0.15*0
    assert compute_timing_score(stats) == pytest.approx(30.0)


def test_custom_weights_change_the_timing_score() -> None:
    stats = Stats(min=0.0, max=0.0, median=5_000.0, p95=0.0, p99=0.0)
    weights = ScoringWeights(median=1.0, p95=0.0, p99=0.0, min=0.0, max=0.0)
    assert compute_timing_score(stats, weights) == pytest.approx(50.0)


def test_success_rate_scales_linearly() -> None:
    assert compute_composite_score(80.0, 0.5) == 40.0
    assert compute_composite_score(80.0, 1.0) == 80.0
    assert compute_composite_score(33.3333, 1.0) == 33.33


def test_composite_score_rounds_ties_up() -> None:
    assert compute_composite_score(40.125, 1.0) == 40.13
    assert compute_composite_score(80.25, 0.5) == 40.13
    assert compute_composite_score(0.625, 1.0) == 0.63


def test_success_rate() -> None:
    assert compute_success_rate(_result("a", [100.0, 200.0], failures=2)) == 0.5
    assert compute_success_rate(_skipped("b")) == 0.0
    assert compute_success_rate(BenchmarkResult(provider="c")) == 0.0


def test_skipped_and_fully_failed_results_score_zero() -> None:
    skipped = _skipped("skipped")
    all_failed = BenchmarkResult(provider="dead", iterations=[TimingSample.failure("x")])
    compute_composite_scores([skipped, all_failed])
    assert skipped.composite_score == 0.0
    assert skipped.success_rate == 0.0
    assert all_failed.composite_score == 0.0


def test_scores_are_absolute_not_relative() -> None:
    alone = _result("fast", [200.0, 200.0, 200.0])
    compute_composite_scores([alone])

    fast = _result("fast", [200.0, 200.0, 200.0])
    slow = _result("slow", [9_000.0, 9_500.0, 9_900.0])
    compute_composite_scores([fast, slow])

    assert alone.composite_score == fast.composite_score == 98.0
    assert slow.composite_score < fast.composite_score


def test_sort_places_skipped_last_regardless_of_input_order() -> None:
    best = _result("best", [100.0])
    worst = _result("worst", [8_000.0])
    skipped = _skipped("skipped")
    compute_composite_scores([best, worst, skipped])

    for ordering in ([skipped, worst, best], [best, skipped, worst]):
        ranked = sort_by_composite_score(ordering)
        assert [r.provider for r in ranked] == ["best", "worst", "skipped"]


def test_sort_keeps_input_order_for_ties() -> None:
    first = _result("first", [500.0])
    second = _result("second", [500.0])
    skip_a, skip_b = _skipped("skip-a"), _skipped("skip-b")
    compute_composite_scores([first, second, skip_a, skip_b])

    ranked = sort_by_composite_score([skip_a, first, skip_b, second])
    assert [r.provider for r in ranked] == ["first", "second", "skip-a", "skip-b"]
