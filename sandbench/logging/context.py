"""Logging context helpers for consistent structured fields.

Every record carries the provider being benchmarked and the iteration
number, so interleaved output from a long run can be filtered per provider.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import Token, ContextVar

_PROVIDER: ContextVar[str] = ContextVar("provider", default="-")
_ITERATION: ContextVar[str] = ContextVar("iteration", default="-")


def set_log_context(
    *,
    provider: str | None = None,
    iteration: int | str | None = None,
) -> list[tuple[ContextVar[str], Token[str]]]:
    """Set log context values and return tokens for reset."""
    tokens: list[tuple[ContextVar[str], Token[str]]] = []
    if provider is not None:
        tokens.append((_PROVIDER, _PROVIDER.set(provider)))
    if iteration is not None:
        tokens.append((_ITERATION, _ITERATION.set(str(iteration))))
    return tokens


def reset_log_context(tokens: list[tuple[ContextVar[str], Token[str]]]) -> None:
    """Reset log context values using tokens returned by set_log_context."""
    for var, token in reversed(tokens):
        var.reset(token)


@contextmanager
def log_context(
    *,
    provider: str | None = None,
    iteration: int | str | None = None,
) -> Iterator[None]:
    """Context manager for applying log fields within a block."""
    tokens = set_log_context(provider=provider, iteration=iteration)
    try:
        yield
    finally:
        reset_log_context(tokens)


def install_log_context() -> None:
    """Install a LogRecord factory that injects context fields."""
    if getattr(install_log_context, "_installed", False):
        return

    old_factory = logging.getLogRecordFactory()

    def record_factory(*args, **kwargs):
        record = old_factory(*args, **kwargs)
        record.provider = _PROVIDER.get()
        record.iteration = _ITERATION.get()
        return record

    logging.setLogRecordFactory(record_factory)
    install_log_context._installed = True  # type: ignore[attr-defined]


__all__ = [
    "install_log_context",
    "log_context",
    "reset_log_context",
    "set_log_context",
]
