"""Base error class shared by every sandbench failure."""

from __future__ import annotations


class BenchmarkError(Exception):
    """Base class for all benchmark errors."""


__all__ = ["BenchmarkError"]
