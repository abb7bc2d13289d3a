"""HTTP transport errors raised by provider adapters."""

from __future__ import annotations

from .base import BenchmarkError


class TransportError(BenchmarkError):
    """Raised when a request fails at the HTTP layer (non-2xx or missing body)."""

    def __init__(self, message: str, *, status_code: int | None = None, detail: str | None = None):
        self.status_code = status_code
        self.detail = detail
        text = message
        if status_code is not None:
            text = f"{text} ({status_code})"
        if detail:
            text = f"{text}: {detail}"
        super().__init__(text)


__all__ = ["TransportError"]
