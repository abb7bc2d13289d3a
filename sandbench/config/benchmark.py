"""Benchmark run defaults."""

import os


DEFAULT_ITERATIONS = int(os.getenv("BENCH_ITERATIONS", "10"))

SMOKE_COMMAND = 'echo "benchmark"'

# Failure messages carry at most this many characters of command output
FAILURE_DETAIL_MAX_CHARS = 220

ALL_FAILED_REASON = "All iterations failed"
MISSING_CREDENTIALS_PREFIX = "Missing: "

DEFAULT_WORKLOAD_NAME = "custom-workload"


__all__ = [
    "DEFAULT_ITERATIONS",
    "SMOKE_COMMAND",
    "FAILURE_DETAIL_MAX_CHARS",
    "ALL_FAILED_REASON",
    "MISSING_CREDENTIALS_PREFIX",
    "DEFAULT_WORKLOAD_NAME",
]
