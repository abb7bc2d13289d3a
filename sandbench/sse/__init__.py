"""Server-sent event decoding for remote exec streams.

Layers, leaves first:
    - decoder.py: raw byte chunks -> lines
    - parser.py: lines -> SSEEvent records
    - assembler.py: events -> CommandResult
"""

from .events import SSEEvent, DEFAULT_EVENT_TYPE
from .parser import EventParser
from .decoder import LineDecoder, iter_lines
from .assembler import (
    ResultAssembler,
    parse_exit_code,
    read_command_result,
    assemble_command_result,
)

__all__ = [
    "DEFAULT_EVENT_TYPE",
    "EventParser",
    "LineDecoder",
    "ResultAssembler",
    "SSEEvent",
    "assemble_command_result",
    "iter_lines",
    "parse_exit_code",
    "read_command_result",
]
