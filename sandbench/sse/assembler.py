"""Fold exec stream events into a single command result.

The exec endpoint streams ``stdout``/``stderr`` fragments followed by one
``exit`` event. An ``error`` event anywhere in the stream fails assembly
even if an exit code was also sent, and a stream that closes without a
parseable exit code fails as well.
"""

from __future__ import annotations

import re
from dataclasses import field, dataclass
from collections.abc import AsyncIterable

from sandbench.errors import StreamProtocolError
from sandbench.sandbox.result import CommandResult

from .events import EVENT_EXIT, EVENT_ERROR, EVENT_STDERR, EVENT_STDOUT, SSEEvent
from .parser import EventParser
from .decoder import iter_lines

_EXIT_CODE_RE = re.compile(r"[+-]?\d+")


def parse_exit_code(payload: str) -> int | None:
    """Parse a base-10 exit code, returning None for anything else."""
    text = payload.strip()
    if not _EXIT_CODE_RE.fullmatch(text):
        return None
    return int(text)


@dataclass
class ResultAssembler:
    """Accumulated outputs of one exec stream."""

    stdout: str = ""
    stderr: str = ""
    exit_code: int | None = None
    errors: list[str] = field(default_factory=list)

    def apply(self, event: SSEEvent) -> None:
        """Fold one event into the accumulated state."""
        if event.type == EVENT_STDOUT:
            self.stdout += event.payload
        elif event.type == EVENT_STDERR:
            self.stderr += event.payload
        elif event.type == EVENT_EXIT:
            # A corrupt exit payload keeps the last valid code
            parsed = parse_exit_code(event.payload)
            if parsed is not None:
                self.exit_code = parsed
        elif event.type == EVENT_ERROR:
            self.errors.append(event.payload)

    def result(self) -> CommandResult:
        """Return the assembled result or raise StreamProtocolError."""
        if self.errors:
            detail = "\n".join(self.errors)
            raise StreamProtocolError(f"exec stream error: {detail}")
        if self.exit_code is None:
            raise StreamProtocolError("exec stream ended without exit event")
        return CommandResult(stdout=self.stdout, stderr=self.stderr, exit_code=self.exit_code)


async def assemble_command_result(lines: AsyncIterable[str]) -> CommandResult:
    """Parse decoded lines into events and fold them into a result."""
    parser = EventParser()
    assembler = ResultAssembler()
    async for line in lines:
        event = parser.feed_line(line)
        if event is not None:
            assembler.apply(event)
    trailing = parser.flush()
    if trailing is not None:
        assembler.apply(trailing)
    return assembler.result()


async def read_command_result(chunks: AsyncIterable[bytes]) -> CommandResult:
    """Decode a raw exec stream body into a command result."""
    return await assemble_command_result(iter_lines(chunks))


__all__ = [
    "ResultAssembler",
    "assemble_command_result",
    "parse_exit_code",
    "read_command_result",
]
