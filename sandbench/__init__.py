"""sandbench: time-to-interactive benchmarks for remote sandbox providers."""

__version__ = "0.1.0"

__all__ = ["__version__"]
