"""Server-sent event record types."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_EVENT_TYPE = "message"

EVENT_STDOUT = "stdout"
EVENT_STDERR = "stderr"
EVENT_EXIT = "exit"
EVENT_ERROR = "error"


@dataclass(frozen=True, slots=True)
class SSEEvent:
    """A fully reconstructed event: its type and the joined data lines."""

    type: str
    payload: str


__all__ = [
    "DEFAULT_EVENT_TYPE",
    "EVENT_ERROR",
    "EVENT_EXIT",
    "EVENT_STDERR",
    "EVENT_STDOUT",
    "SSEEvent",
]
