"""Data types for benchmark runs.

Samples and stats are frozen once produced. ``BenchmarkResult`` stays mutable
only so the scoring step can fill in ``success_rate`` and ``composite_score``.
"""

from __future__ import annotations

from dataclasses import field, dataclass


@dataclass(frozen=True, slots=True)
class TimingSample:
    """Measurement of one iteration.

    A failed iteration carries ``error`` and no timings (``tti_ms`` is 0).
    ``workload_ms``/``total_ms`` are only set when a workload ran.
    """

    tti_ms: float
    workload_ms: float | None = None
    total_ms: float | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: str) -> TimingSample:
        return cls(tti_ms=0.0, error=error)


@dataclass(frozen=True, slots=True)
class Stats:
    """Distribution of one metric over the successful iterations."""

    min: float = 0.0
    max: float = 0.0
    median: float = 0.0
    avg: float = 0.0
    p95: float = 0.0
    p99: float = 0.0


@dataclass(frozen=True, slots=True)
class BenchmarkSummary:
    tti_ms: Stats = field(default_factory=Stats)
    workload_ms: Stats | None = None
    total_ms: Stats | None = None


@dataclass
class BenchmarkResult:
    """Everything one provider's run produced."""

    provider: str
    iterations: list[TimingSample] = field(default_factory=list)
    summary: BenchmarkSummary = field(default_factory=BenchmarkSummary)
    skipped: bool = False
    skip_reason: str | None = None
    success_rate: float | None = None
    composite_score: float | None = None

    @property
    def successful(self) -> list[TimingSample]:
        return [sample for sample in self.iterations if sample.ok]


@dataclass(frozen=True, slots=True)
class WorkloadConfig:
    """Optional commands run after the sandbox becomes interactive."""

    name: str
    setup_command: str | None = None
    command: str | None = None
    cwd: str | None = None
    timeout_ms: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.setup_command and not self.command


__all__ = [
    "BenchmarkResult",
    "BenchmarkSummary",
    "Stats",
    "TimingSample",
    "WorkloadConfig",
]
