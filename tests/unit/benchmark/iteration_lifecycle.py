"""Unit tests for the single-iteration orchestrator."""

from __future__ import annotations

import asyncio

import pytest

from sandbench.sandbox import CommandResult
from sandbench.config.benchmark import SMOKE_COMMAND
from sandbench.benchmark import iteration as iteration_module
from sandbench.errors import TransportError, StreamProtocolError
from sandbench.benchmark import TimingSample, WorkloadConfig, run_iteration
from tests.helpers import FakeCompute, FakeSandbox, ScriptedClock


def _run(compute: FakeCompute, **kwargs) -> TimingSample:
    return asyncio.run(run_iteration(compute, **kwargs))


def _single(sandbox: FakeSandbox) -> FakeCompute:
    compute = FakeCompute(make_sandbox=lambda: sandbox)
    sandbox.events = compute.events
    return compute


def test_smoke_only_iteration_reports_tti_and_destroys_once() -> None:
    sandbox = FakeSandbox()
    sample = _run(_single(sandbox), clock=ScriptedClock([10.0, 10.41]))

    assert sample.tti_ms == pytest.approx(410.0)
    assert sample.workload_ms is None
    assert sample.total_ms is None
    assert sample.error is None
    assert sandbox.destroy_calls == 1
    assert [c.command for c in sandbox.calls] == [SMOKE_COMMAND]
    assert sandbox.calls[0].timeout == 30


def test_workload_timings_follow_state_boundaries() -> None:
    sandbox = FakeSandbox()
    workload = WorkloadConfig(name="w", setup_command="pip install x", command="python run.py", cwd="/work")
    # start, tti, workload start, workload end, total end
    clock = ScriptedClock([0.0, 0.5, 0.6, 1.6, 1.7])

    sample = _run(_single(sandbox), workload=workload, clock=clock)

    assert sample.tti_ms == pytest.approx(500.0)
    assert sample.workload_ms == pytest.approx(1000.0)
    assert sample.total_ms == pytest.approx(1700.0)
    assert [c.command for c in sandbox.calls] == [SMOKE_COMMAND, "pip install x", "python run.py"]
    assert [c.cwd for c in sandbox.calls[1:]] == ["/work", "/work"]
    assert sandbox.events[-1] == "destroy"


def test_workload_command_timeout_is_whole_seconds_of_workload_timeout() -> None:
    sandbox = FakeSandbox()
    workload = WorkloadConfig(name="w", command="make", timeout_ms=1500)
    _run(_single(sandbox), workload=workload)
    assert sandbox.calls[1].timeout == 2


def test_setup_failure_records_error_and_still_destroys() -> None:
    sandbox = FakeSandbox({"setup": CommandResult(stdout="", stderr="no such package\n", exit_code=1)})
    workload = WorkloadConfig(name="w", setup_command="setup", command="run")

    sample = _run(_single(sandbox), workload=workload)

    assert "Workload setup failed (exit 1)" in sample.error
    assert sample.error.endswith("no such package")
    assert sample.tti_ms == 0
    assert sample.workload_ms is None and sample.total_ms is None
    assert [c.command for c in sandbox.calls] == [SMOKE_COMMAND, "setup"]
    assert sandbox.destroy_calls == 1


def test_smoke_failure_uses_stdout_when_stderr_empty_and_truncates() -> None:
    sandbox = FakeSandbox({SMOKE_COMMAND: CommandResult(stdout="x" * 500, stderr="  ", exit_code=127)})
    sample = _run(_single(sandbox))

    prefix = "First command execution failed (exit 127): "
    assert sample.error.startswith(prefix)
    detail = sample.error[len(prefix) :]
    assert len(detail) == 220
    assert detail.endswith("...")


def test_failure_without_output_has_no_detail() -> None:
    sandbox = FakeSandbox({SMOKE_COMMAND: CommandResult(stdout="", stderr="", exit_code=2)})
    assert _run(_single(sandbox)).error == "First command execution failed (exit 2)"


def test_transport_and_stream_errors_become_sample_errors() -> None:
    for exc in (TransportError("ISLO exec failed", status_code=502, detail="bad gateway"), StreamProtocolError("x")):
        sandbox = FakeSandbox({SMOKE_COMMAND: exc})
        sample = _run(_single(sandbox))
        assert sample.error == str(exc)
        assert sandbox.destroy_calls == 1


def test_creation_failure_records_error_without_teardown() -> None:
    compute = FakeCompute(create_error=TransportError("ISLO request failed", status_code=401, detail="denied"))
    sample = _run(compute)
    assert sample.error == "ISLO request failed (401): denied"
    assert compute.created == []


def test_creation_timeout_is_labelled() -> None:
    compute = FakeCompute(create_delay=5)
    sample = _run(compute, create_timeout_s=0.01)
    assert sample.error == "Sandbox creation timed out"


def test_first_command_timeout_is_labelled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(iteration_module, "FIRST_COMMAND_TIMEOUT_S", 0.01)
    sandbox = FakeSandbox(delays={SMOKE_COMMAND: 5})
    sample = _run(_single(sandbox))
    assert sample.error == "First command execution timed out"
    assert sandbox.destroy_calls == 1


def test_workload_timeout_is_labelled() -> None:
    sandbox = FakeSandbox(delays={"slow": 5})
    workload = WorkloadConfig(name="w", command="slow", timeout_ms=10)
    sample = _run(_single(sandbox), workload=workload)
    assert sample.error == "Workload command timed out"
    assert sandbox.destroy_calls == 1


def test_teardown_error_never_masks_success() -> None:
    sandbox = FakeSandbox(destroy_error=RuntimeError("delete exploded"))
    sample = _run(_single(sandbox), clock=ScriptedClock([0.0, 0.2]))
    assert sample.error is None
    assert sample.tti_ms == pytest.approx(200.0)


def test_teardown_error_never_overrides_primary_failure() -> None:
    sandbox = FakeSandbox(
        {SMOKE_COMMAND: CommandResult("", "boom", 1)},
        destroy_error=TransportError("ISLO delete failed", status_code=500),
    )
    sample = _run(_single(sandbox))
    assert sample.error == "First command execution failed (exit 1): boom"


def test_hanging_teardown_is_bounded(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(iteration_module, "DESTROY_TIMEOUT_S", 0.01)
    sandbox = FakeSandbox(destroy_delay=5)
    sample = _run(_single(sandbox))
    assert sample.error is None
    assert sandbox.destroy_calls == 1


def test_empty_workload_behaves_like_no_workload() -> None:
    sandbox = FakeSandbox()
    sample = _run(_single(sandbox), workload=WorkloadConfig(name="empty"), clock=ScriptedClock([0.0, 1.0]))
    assert sample.tti_ms == pytest.approx(1000.0)
    assert sample.workload_ms is None
    assert len(sandbox.calls) == 1
