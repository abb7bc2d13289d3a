"""Shared fakes and builders for the unit tests."""

from .clock import ScriptedClock
from .sandbox import SMOKE_OK, CommandCall, FakeCompute, FakeSandbox
from .streams import split_at, sse_record, byte_stream, decode_lines, collect_lines

__all__ = [
    "SMOKE_OK",
    "CommandCall",
    "FakeCompute",
    "FakeSandbox",
    "ScriptedClock",
    "byte_stream",
    "collect_lines",
    "decode_lines",
    "split_at",
    "sse_record",
]
