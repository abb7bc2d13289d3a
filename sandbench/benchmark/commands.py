"""Checked remote command execution.

A command counts as failed whenever its exit code is non-zero, whatever the
transport reported. The failure message carries the exit code and a
truncated tail of stderr (stdout when stderr is empty).
"""

from __future__ import annotations

import math

from sandbench.utils import truncate
from sandbench.errors import CommandFailure
from sandbench.sandbox import Sandbox, CommandResult


def ms_to_seconds(ms: float) -> int:
    """Whole seconds for a server-side timeout, never below 1."""
    return max(1, math.ceil(ms / 1000))


def failure_detail(result: CommandResult) -> str | None:
    detail = (result.stderr or "").strip() or (result.stdout or "").strip()
    return truncate(detail) if detail else None


async def run_checked_command(
    sandbox: Sandbox,
    command: str,
    *,
    timeout_s: float,
    failure_prefix: str,
    cwd: str | None = None,
) -> CommandResult:
    """Run ``command`` and raise CommandFailure on a non-zero exit code."""
    result = await sandbox.run_command(command, cwd=cwd, timeout=timeout_s)
    if result.exit_code != 0:
        raise CommandFailure(failure_prefix, result.exit_code, failure_detail(result))
    return result


__all__ = ["failure_detail", "ms_to_seconds", "run_checked_command"]
