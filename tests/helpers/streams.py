"""Byte-stream builders for decoder and assembler tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterable

from sandbench.sse import iter_lines


async def byte_stream(chunks: Iterable[bytes]) -> AsyncIterator[bytes]:
    for chunk in chunks:
        await asyncio.sleep(0)
        yield chunk


def split_at(data: bytes, offset: int) -> list[bytes]:
    return [data[:offset], data[offset:]]


def sse_record(event: str | None, *data: str) -> str:
    lines = [f"event: {event}"] if event is not None else []
    lines.extend(f"data: {item}" for item in data)
    return "\n".join(lines) + "\n\n"


async def collect_lines(chunks: Iterable[bytes]) -> list[str]:
    return [line async for line in iter_lines(byte_stream(chunks))]


def decode_lines(chunks: Iterable[bytes]) -> list[str]:
    return asyncio.run(collect_lines(chunks))


__all__ = ["byte_stream", "collect_lines", "decode_lines", "split_at", "sse_record"]
