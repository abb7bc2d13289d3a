"""Abstract base class for sandbox factories."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .base import Sandbox


class Compute(ABC):
    """Creates sandboxes on one provider."""

    @abstractmethod
    async def create(self) -> Sandbox:
        """Provision a new sandbox and return a handle to it."""

    async def aclose(self) -> None:
        """Release client resources (connection pools). No-op by default."""


__all__ = ["Compute"]
