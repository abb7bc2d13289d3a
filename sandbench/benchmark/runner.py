"""Sequential benchmark runner.

Providers run one after another and iterations run one after another, so
wall-clock timings are never contaminated by concurrent local work.
Iteration i+1 starts only once iteration i's teardown attempt finished.
"""

from __future__ import annotations

import os
import time
import logging
from collections.abc import Mapping, Sequence

from sandbench.sandbox import Compute
from sandbench.logging import log_context
from sandbench.providers.types import ProviderConfig
from sandbench.config.timeouts import SANDBOX_CREATE_TIMEOUT_S
from sandbench.config.benchmark import DEFAULT_ITERATIONS, ALL_FAILED_REASON, MISSING_CREDENTIALS_PREFIX

from .stats import compute_stats
from .types import TimingSample, WorkloadConfig, BenchmarkResult, BenchmarkSummary
from .scoring import DEFAULT_WEIGHTS, ScoringWeights, compute_composite_scores
from .iteration import Clock, run_iteration

logger = logging.getLogger(__name__)


def missing_env_vars(required: Sequence[str], environ: Mapping[str, str] | None = None) -> list[str]:
    env = os.environ if environ is None else environ
    return [name for name in required if not env.get(name)]


def build_summary(samples: Sequence[TimingSample]) -> BenchmarkSummary:
    """Stats over successful samples; optional metrics only when measured."""
    ok = [s for s in samples if s.ok]
    workload_values = [s.workload_ms for s in ok if s.workload_ms is not None]
    total_values = [s.total_ms for s in ok if s.total_ms is not None]
    return BenchmarkSummary(
        tti_ms=compute_stats([s.tti_ms for s in ok]),
        workload_ms=compute_stats(workload_values) if workload_values else None,
        total_ms=compute_stats(total_values) if total_values else None,
    )


def format_sample(sample: TimingSample) -> str:
    if not sample.ok:
        return f"FAILED: {sample.error}"
    parts = [f"TTI: {sample.tti_ms / 1000:.2f}s"]
    if sample.workload_ms is not None:
        parts.append(f"Workload: {sample.workload_ms / 1000:.2f}s")
    if sample.total_ms is not None:
        parts.append(f"Total: {sample.total_ms / 1000:.2f}s")
    return " | ".join(parts)


async def _run_iterations(
    compute: Compute,
    *,
    iterations: int,
    workload: WorkloadConfig | None,
    create_timeout_s: float,
    clock: Clock,
) -> list[TimingSample]:
    samples: list[TimingSample] = []
    try:
        for i in range(1, iterations + 1):
            with log_context(iteration=i):
                logger.info("iteration %d/%d", i, iterations)
                sample = await run_iteration(
                    compute,
                    create_timeout_s=create_timeout_s,
                    workload=workload,
                    clock=clock,
                )
                samples.append(sample)
                logger.info("%s", format_sample(sample))
    finally:
        await compute.aclose()
    return samples


async def run_benchmark(
    provider: ProviderConfig,
    *,
    iterations: int = DEFAULT_ITERATIONS,
    workload: WorkloadConfig | None = None,
    create_timeout_s: float = SANDBOX_CREATE_TIMEOUT_S,
    environ: Mapping[str, str] | None = None,
    clock: Clock = time.perf_counter,
) -> BenchmarkResult:
    """Benchmark one provider; never raises for per-iteration failures."""
    with log_context(provider=provider.name):
        missing = missing_env_vars(provider.required_env_vars, environ)
        if missing:
            reason = MISSING_CREDENTIALS_PREFIX + ", ".join(missing)
            logger.warning("skipped: %s", reason)
            return BenchmarkResult(provider=provider.name, skipped=True, skip_reason=reason)

        logger.info("benchmarking %s (%d iterations)", provider.name, iterations)
        if workload is not None:
            logger.info("workload: %s", workload.name)

        try:
            compute = provider.create_compute()
        except Exception as exc:
            logger.warning("compute client setup failed: %s", exc)
            return BenchmarkResult(provider=provider.name, skipped=True, skip_reason=f"Setup failed: {exc}")

        samples = await _run_iterations(
            compute,
            iterations=iterations,
            workload=workload,
            create_timeout_s=create_timeout_s,
            clock=clock,
        )

    if not any(s.ok for s in samples):
        # every iteration failed: report as skipped rather than zeroed stats
        return BenchmarkResult(
            provider=provider.name,
            iterations=samples,
            skipped=True,
            skip_reason=ALL_FAILED_REASON,
        )
    return BenchmarkResult(provider=provider.name, iterations=samples, summary=build_summary(samples))


async def run_all(
    providers: Sequence[ProviderConfig],
    *,
    iterations: int = DEFAULT_ITERATIONS,
    workload: WorkloadConfig | None = None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    create_timeout_s: float = SANDBOX_CREATE_TIMEOUT_S,
) -> list[BenchmarkResult]:
    """Run every provider sequentially, then score the batch."""
    results: list[BenchmarkResult] = []
    for provider in providers:
        results.append(
            await run_benchmark(
                provider,
                iterations=iterations,
                workload=workload,
                create_timeout_s=create_timeout_s,
            )
        )
    compute_composite_scores(results, weights)
    return results


__all__ = ["build_summary", "format_sample", "missing_env_vars", "run_all", "run_benchmark"]
