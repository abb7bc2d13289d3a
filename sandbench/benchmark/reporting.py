"""Plain-text summary of a scored benchmark run."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .types import Stats, BenchmarkResult
from .scoring import sort_by_composite_score


def _secs(ms: float) -> str:
    return f"{ms / 1000:.2f}s"


def _optional_median(label: str, stats: Stats | None) -> str | None:
    if stats is None:
        return None
    return f"{label}={_secs(stats.median)}"


def format_result_line(result: BenchmarkResult) -> str:
    """One line per provider: timings, reliability and score."""
    if result.skipped:
        return f"{result.provider:<12} SKIPPED ({result.skip_reason or 'unknown reason'})"

    tti = result.summary.tti_ms
    parts = [
        f"{result.provider:<12}",
        f"tti={_secs(tti.median)}",
        f"min={_secs(tti.min)}",
        f"max={_secs(tti.max)}",
    ]
    for label, stats in (("workload", result.summary.workload_ms), ("total", result.summary.total_ms)):
        rendered = _optional_median(label, stats)
        if rendered:
            parts.append(rendered)
    parts.append(f"ok={len(result.successful)}/{len(result.iterations)}")
    if result.success_rate is not None:
        parts.append(f"success={result.success_rate:.0%}")
    if result.composite_score is not None:
        parts.append(f"score={result.composite_score:.2f}")
    return " ".join(parts)


def print_report(results: Iterable[BenchmarkResult], sink: Callable[[str], None] = print) -> None:
    """Print results in ranking order (skipped providers last)."""
    ranked = sort_by_composite_score(results)
    sink("SANDBOX PROVIDER BENCHMARK RESULTS")
    for result in ranked:
        sink(format_result_line(result))
    sink("TTI = Time to Interactive (median). Create + first command execution.")
    if any(r.summary.workload_ms or r.summary.total_ms for r in ranked):
        sink("Workload = setup + workload commands. Total = TTI + workload.")


__all__ = ["format_result_line", "print_report"]
