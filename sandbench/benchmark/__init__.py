"""Benchmark orchestration, statistics and scoring."""

from .stats import median, percentile, compute_stats
from .types import Stats, TimingSample, WorkloadConfig, BenchmarkResult, BenchmarkSummary
from .runner import run_all, build_summary, run_benchmark
from .scoring import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    score_metric,
    compute_success_rate,
    compute_timing_score,
    compute_composite_score,
    sort_by_composite_score,
    compute_composite_scores,
)
from .workload import resolve_workload, load_workload_file, parse_positive_int
from .iteration import run_iteration
from .reporting import print_report

__all__ = [
    # types
    "BenchmarkResult",
    "BenchmarkSummary",
    "Stats",
    "TimingSample",
    "WorkloadConfig",
    # stats
    "compute_stats",
    "median",
    "percentile",
    # scoring
    "DEFAULT_WEIGHTS",
    "ScoringWeights",
    "compute_composite_score",
    "compute_composite_scores",
    "compute_success_rate",
    "compute_timing_score",
    "score_metric",
    "sort_by_composite_score",
    # orchestration
    "build_summary",
    "run_all",
    "run_benchmark",
    "run_iteration",
    # workload
    "load_workload_file",
    "parse_positive_int",
    "resolve_workload",
    # reporting
    "print_report",
]
