"""Small shared utilities."""

from .text import truncate

__all__ = ["truncate"]
