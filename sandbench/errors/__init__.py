"""Centralized exception classes for sandbench.

Organization:
    - base.py: BenchmarkError root class
    - transport.py: HTTP-level failures with status and response text
    - stream.py: event-stream protocol failures (error event, missing exit)
    - command.py: non-zero exit codes with a diagnostic tail
    - timeout.py: step-labelled deadline overruns
    - classify.py: exception-to-label mapping for logs
"""

from .base import BenchmarkError
from .stream import StreamProtocolError
from .command import CommandFailure
from .timeout import OperationTimeoutError
from .classify import classify_error
from .transport import TransportError

__all__ = [
    "BenchmarkError",
    "CommandFailure",
    "OperationTimeoutError",
    "StreamProtocolError",
    "TransportError",
    "classify_error",
]
