"""Remote command failures."""

from __future__ import annotations

from .base import BenchmarkError


class CommandFailure(BenchmarkError):
    """Raised when a command completes with a non-zero exit code."""

    def __init__(self, prefix: str, exit_code: int, detail: str | None = None):
        self.prefix = prefix
        self.exit_code = exit_code
        self.detail = detail
        message = f"{prefix} (exit {exit_code})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


__all__ = ["CommandFailure"]
