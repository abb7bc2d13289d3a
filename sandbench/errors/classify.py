"""Exception classification helpers for failure log labels."""

from __future__ import annotations

import httpx

from .stream import StreamProtocolError
from .command import CommandFailure
from .transport import TransportError

# First match wins
ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (TimeoutError, "timeout"),
    (httpx.TimeoutException, "timeout"),
    (TransportError, "transport"),
    (StreamProtocolError, "stream"),
    (CommandFailure, "command"),
    (httpx.NetworkError, "connection"),
    (ConnectionError, "connection"),
    (httpx.TransportError, "transport"),
)


def classify_error(exc: BaseException) -> str:
    """Map an exception to a short category label."""

    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]
