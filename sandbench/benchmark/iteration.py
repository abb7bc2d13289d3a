"""One benchmark iteration, end to end.

States run strictly in order::

    Created -> Provisioned -> Interactive [-> SetupDone -> WorkloadDone]
                 any failure -> Failed
    WorkloadDone | Interactive | Failed -> Teardown

TTI is measured from the creation request to the end of the smoke command.
Workload time starts when the sandbox is interactive. Every step has its own
deadline, and teardown runs on every path without ever changing the outcome.
"""

from __future__ import annotations

import time
import logging
from collections.abc import Callable

from sandbench.runtime import with_deadline
from sandbench.sandbox import Compute, Sandbox
from sandbench.errors import classify_error
from sandbench.config.benchmark import SMOKE_COMMAND
from sandbench.config.timeouts import (
    DESTROY_TIMEOUT_S,
    WORKLOAD_TIMEOUT_S,
    FIRST_COMMAND_TIMEOUT_S,
    SANDBOX_CREATE_TIMEOUT_S,
)

from .types import TimingSample, WorkloadConfig
from .commands import ms_to_seconds, run_checked_command

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def _elapsed_ms(clock: Clock, since: float) -> float:
    return (clock() - since) * 1000.0


async def _run_step(
    sandbox: Sandbox,
    command: str,
    *,
    deadline_s: float,
    command_timeout_s: float,
    label: str,
    cwd: str | None = None,
) -> None:
    await with_deadline(
        run_checked_command(
            sandbox,
            command,
            timeout_s=command_timeout_s,
            failure_prefix=f"{label} failed",
            cwd=cwd,
        ),
        deadline_s,
        f"{label} timed out",
    )


async def _run_workload(sandbox: Sandbox, workload: WorkloadConfig) -> None:
    timeout_ms = workload.timeout_ms if workload.timeout_ms is not None else WORKLOAD_TIMEOUT_S * 1000
    deadline_s = timeout_ms / 1000.0
    command_timeout_s = ms_to_seconds(timeout_ms)

    if workload.setup_command:
        await _run_step(
            sandbox,
            workload.setup_command,
            deadline_s=deadline_s,
            command_timeout_s=command_timeout_s,
            label="Workload setup",
            cwd=workload.cwd,
        )
    if workload.command:
        await _run_step(
            sandbox,
            workload.command,
            deadline_s=deadline_s,
            command_timeout_s=command_timeout_s,
            label="Workload command",
            cwd=workload.cwd,
        )


async def _teardown(sandbox: Sandbox) -> None:
    """Destroy the sandbox; never raises."""
    try:
        await with_deadline(sandbox.destroy(), DESTROY_TIMEOUT_S, "Destroy timed out")
    except Exception as exc:
        logger.debug("teardown failed (%s): %s", classify_error(exc), exc)


async def _measure(
    sandbox: Sandbox,
    start: float,
    *,
    workload: WorkloadConfig | None,
    clock: Clock,
) -> TimingSample:
    await _run_step(
        sandbox,
        SMOKE_COMMAND,
        deadline_s=FIRST_COMMAND_TIMEOUT_S,
        command_timeout_s=FIRST_COMMAND_TIMEOUT_S,
        label="First command execution",
    )
    tti_ms = _elapsed_ms(clock, start)

    if workload is None or workload.is_empty:
        return TimingSample(tti_ms=tti_ms)

    workload_start = clock()
    await _run_workload(sandbox, workload)
    workload_ms = _elapsed_ms(clock, workload_start)
    total_ms = _elapsed_ms(clock, start)
    return TimingSample(tti_ms=tti_ms, workload_ms=workload_ms, total_ms=total_ms)


async def run_iteration(
    compute: Compute,
    *,
    create_timeout_s: float = SANDBOX_CREATE_TIMEOUT_S,
    workload: WorkloadConfig | None = None,
    clock: Clock = time.perf_counter,
) -> TimingSample:
    """Run one iteration and return exactly one sample.

    Operational failures (timeouts, non-zero exits, transport and stream
    errors) become the sample's ``error`` with their message kept verbatim.
    The sandbox, once created, is destroyed before this returns.
    """
    sandbox: Sandbox | None = None
    try:
        start = clock()
        sandbox = await with_deadline(compute.create(), create_timeout_s, "Sandbox creation timed out")
        return await _measure(sandbox, start, workload=workload, clock=clock)
    except Exception as exc:
        logger.warning("iteration failed (%s): %s", classify_error(exc), exc)
        return TimingSample.failure(str(exc) or type(exc).__name__)
    finally:
        if sandbox is not None:
            await _teardown(sandbox)


__all__ = ["run_iteration"]
