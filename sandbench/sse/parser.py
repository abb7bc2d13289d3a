"""Line-level parser for the ``text/event-stream`` record grammar.

Each call to :meth:`EventParser.feed_line` is one reducer step over the
pending record (event type plus buffered data lines). A blank line closes
the record; ``event:`` and ``data:`` fields fill it; ``:`` comments and
unknown fields are ignored.
"""

from __future__ import annotations

from dataclasses import field, dataclass

from .events import DEFAULT_EVENT_TYPE, SSEEvent


@dataclass
class EventParser:
    """Accumulates field lines until a blank line terminates the record."""

    event_type: str = DEFAULT_EVENT_TYPE
    data_lines: list[str] = field(default_factory=list)

    def feed_line(self, line: str) -> SSEEvent | None:
        """Apply one decoded line; return an event when a record completes."""
        if line == "":
            return self._emit()
        if line.startswith(":"):
            return None
        if line.startswith("event:"):
            self.event_type = line[len("event:") :].strip()
            return None
        if line.startswith("data:"):
            value = line[len("data:") :]
            if value.startswith(" "):
                value = value[1:]
            self.data_lines.append(value)
        return None

    def flush(self) -> SSEEvent | None:
        """Emit a record left open when the stream ended without a blank line."""
        return self._emit()

    def _emit(self) -> SSEEvent | None:
        event = None
        if self.data_lines:
            event = SSEEvent(type=self.event_type, payload="\n".join(self.data_lines))
        self.event_type = DEFAULT_EVENT_TYPE
        self.data_lines = []
        return event


__all__ = ["EventParser"]
