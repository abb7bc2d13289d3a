"""Incremental line decoding for chunked byte streams.

Transports hand over bytes at arbitrary boundaries: a chunk may end in the
middle of a line or in the middle of a multi-byte UTF-8 character. The
decoder keeps whatever is incomplete and only releases whole lines.
"""

from __future__ import annotations

import codecs
from collections.abc import AsyncIterable, AsyncIterator


class LineDecoder:
    """Stateful bytes-to-lines decoder bound to a single stream."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._buffer = ""

    def feed(self, chunk: bytes) -> list[str]:
        """Decode a chunk and return every line it completes."""
        if not chunk:
            return []
        self._buffer += self._decoder.decode(chunk)
        return self._drain()

    def finish(self) -> list[str]:
        """Flush the decoder and return the trailing partial line, if any."""
        self._buffer += self._decoder.decode(b"", final=True)
        lines = self._drain()
        if self._buffer:
            lines.append(_strip_cr(self._buffer))
            self._buffer = ""
        return lines

    def _drain(self) -> list[str]:
        lines: list[str] = []
        while True:
            index = self._buffer.find("\n")
            if index == -1:
                return lines
            lines.append(_strip_cr(self._buffer[:index]))
            self._buffer = self._buffer[index + 1 :]


def _strip_cr(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line


async def iter_lines(chunks: AsyncIterable[bytes]) -> AsyncIterator[str]:
    """Yield decoded lines from an async byte stream.

    The final line is emitted even when the stream does not end with a
    line break. Comment lines are passed through untouched.
    """
    decoder = LineDecoder()
    async for chunk in chunks:
        for line in decoder.feed(chunk):
            yield line
    for line in decoder.finish():
        yield line


__all__ = ["LineDecoder", "iter_lines"]
