"""Event-stream protocol errors.

Raised when a remote execution stream ends ambiguously: either the server
reported an explicit error event, or the stream closed without ever sending
a terminal exit event. Neither case is ever treated as a zero exit code.
"""

from __future__ import annotations

from .base import BenchmarkError


class StreamProtocolError(BenchmarkError):
    """Raised when an exec event stream cannot be folded into a command result."""


__all__ = ["StreamProtocolError"]
