"""Deadline errors."""

from __future__ import annotations

from .base import BenchmarkError


class OperationTimeoutError(BenchmarkError, TimeoutError):
    """Raised when a bounded operation exceeds its deadline.

    The message names the step that overran (creation, first command,
    setup, workload, exec, teardown) so iteration failures stay readable.
    """


__all__ = ["OperationTimeoutError"]
