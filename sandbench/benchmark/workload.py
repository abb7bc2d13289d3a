"""Workload resolution from CLI flags and an optional JSON workload file.

Flags always win over the file. When neither source provides a setup or a
workload command the benchmark measures TTI only.
"""

from __future__ import annotations

import json
from typing import Any
from pathlib import Path

from sandbench.config.benchmark import DEFAULT_WORKLOAD_NAME

from .types import WorkloadConfig


def parse_positive_int(value: str | int, flag_name: str) -> int:
    """Parse a strictly positive integer or raise ValueError naming the flag."""
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{flag_name} must be a positive integer") from None
    if parsed <= 0:
        raise ValueError(f"{flag_name} must be a positive integer")
    return parsed


def load_workload_file(path: str | Path, *, base_dir: Path | None = None) -> dict[str, Any]:
    """Read a workload JSON object; relative paths resolve against ``base_dir``."""
    file_path = Path(path)
    if not file_path.is_absolute() and base_dir is not None:
        file_path = base_dir / file_path
    parsed = json.loads(file_path.read_text(encoding="utf-8"))
    if not isinstance(parsed, dict):
        raise ValueError(f"Invalid workload file: {path}")
    return parsed


def resolve_workload(
    *,
    setup_command: str | None = None,
    command: str | None = None,
    name: str | None = None,
    cwd: str | None = None,
    timeout_ms: str | int | None = None,
    file_config: dict[str, Any] | None = None,
) -> WorkloadConfig | None:
    """Merge flag values over file values into a WorkloadConfig (or None)."""
    file_config = file_config or {}

    setup = setup_command or file_config.get("setupCommand") or file_config.get("setup_command")
    cmd = command or file_config.get("command")
    if not setup and not cmd:
        return None

    resolved_timeout: int | None = None
    if timeout_ms is not None:
        resolved_timeout = parse_positive_int(timeout_ms, "--workload-timeout-ms")
    else:
        file_timeout = file_config.get("timeoutMs", file_config.get("timeout_ms"))
        if file_timeout is not None:
            resolved_timeout = parse_positive_int(file_timeout, "--workload-timeout-ms")

    return WorkloadConfig(
        name=name or file_config.get("name") or DEFAULT_WORKLOAD_NAME,
        setup_command=setup or None,
        command=cmd or None,
        cwd=cwd or file_config.get("cwd") or None,
        timeout_ms=resolved_timeout,
    )


__all__ = ["load_workload_file", "parse_positive_int", "resolve_workload"]
