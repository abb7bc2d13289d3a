"""Abstract base class for sandboxes.

The benchmark core only talks to Sandbox and Compute; each provider ships
one concrete subclass of each.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .result import CommandResult


class Sandbox(ABC):
    """An ephemeral remote execution environment owned by one iteration."""

    @abstractmethod
    async def run_command(
        self,
        command: str,
        *,
        cwd: str | None = None,
        timeout: float | None = None,
        background: bool = False,
    ) -> CommandResult:
        """Run a shell command and return its output and exit code.

        Args:
            command: Shell command line.
            cwd: Working directory inside the sandbox.
            timeout: Server-side execution limit in seconds.
            background: Detach the command where the backend supports it.
        """

    @abstractmethod
    async def destroy(self) -> None:
        """Release the sandbox. Deleting an already-gone sandbox is not an error."""


__all__ = ["Sandbox"]
