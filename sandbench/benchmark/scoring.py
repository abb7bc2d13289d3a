"""Composite scoring for benchmark results.

Formula::

    metric_score    = 100 * max(0, 1 - value_ms / SCORE_CEILING_MS)
    timing_score    = sum(weight * metric_score) over median, p95, p99, min, max
    composite_score = floor(timing_score * success_rate * 100 + 0.5) / 100

Scores are absolute: a provider with a 200 ms median scores the same whether
it runs alone or among fifty others. The success rate is a linear multiplier,
so 50% success halves the score. Skipped providers always score 0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from collections.abc import Iterable

from sandbench.config.scoring import (
    WEIGHT_MAX,
    WEIGHT_MIN,
    WEIGHT_P95,
    WEIGHT_P99,
    WEIGHT_MEDIAN,
    SCORE_DECIMALS,
    SCORE_CEILING_MS,
)

from .types import Stats, BenchmarkResult


@dataclass(frozen=True, slots=True)
class ScoringWeights:
    """Timing weights; meaningful only when they sum to 1.0 (not enforced)."""

    median: float = WEIGHT_MEDIAN
    p95: float = WEIGHT_P95
    p99: float = WEIGHT_P99
    min: float = WEIGHT_MIN
    max: float = WEIGHT_MAX


DEFAULT_WEIGHTS = ScoringWeights()


def score_metric(value_ms: float) -> float:
    """Score one timing value against the fixed ceiling (0-100, higher is better)."""
    return max(0.0, 100.0 * (1.0 - value_ms / SCORE_CEILING_MS))


def compute_success_rate(result: BenchmarkResult) -> float:
    """Fraction of iterations without an error (0 when skipped or empty)."""
    if result.skipped or not result.iterations:
        return 0.0
    return len(result.successful) / len(result.iterations)


def compute_timing_score(stats: Stats, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    """Weighted timing score (0-100) for one metric's stats."""
    return (
        weights.median * score_metric(stats.median)
        + weights.p95 * score_metric(stats.p95)
        + weights.p99 * score_metric(stats.p99)
        + weights.min * score_metric(stats.min)
        + weights.max * score_metric(stats.max)
    )


def compute_composite_score(timing_score: float, success_rate: float) -> float:
    """Scale by success rate and round half up to SCORE_DECIMALS places."""
    scale = 10**SCORE_DECIMALS
    return math.floor(timing_score * success_rate * scale + 0.5) / scale


def compute_composite_scores(
    results: Iterable[BenchmarkResult],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> None:
    """Fill ``success_rate`` and ``composite_score`` on every result in place."""
    for result in results:
        success_rate = compute_success_rate(result)
        result.success_rate = success_rate

        if result.skipped or success_rate == 0:
            result.composite_score = 0.0
            continue

        timing_score = compute_timing_score(result.summary.tti_ms, weights)
        result.composite_score = compute_composite_score(timing_score, success_rate)


def sort_by_composite_score(results: Iterable[BenchmarkResult]) -> list[BenchmarkResult]:
    """Highest score first; skipped providers last in their original order."""
    return sorted(
        results,
        key=lambda r: (1, 0.0) if r.skipped else (0, -(r.composite_score or 0.0)),
    )


__all__ = [
    "DEFAULT_WEIGHTS",
    "ScoringWeights",
    "compute_composite_score",
    "compute_composite_scores",
    "compute_success_rate",
    "compute_timing_score",
    "score_metric",
    "sort_by_composite_score",
]
