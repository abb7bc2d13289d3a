#!/usr/bin/env python3
"""
Sandbox provider benchmark.

Creates a sandbox on each provider, runs a first command, optionally runs a
workload, tears the sandbox down, and repeats. Prints median/min/max time to
interactive (TTI), success rate and a composite score per provider.

Environment Variables:
- ISLO_BASE_URL / ISLO_API_TOKEN: ISLO endpoint and token (provider skipped if missing)
- ISLO_TENANT_PUBLIC_ID / ISLO_USER_PUBLIC_ID: optional ISLO routing headers
- APP_LOG_LEVEL: log level (default: INFO)

Variables are also read from a `.env` file in the working directory.
"""

from __future__ import annotations

import sys
import asyncio
import argparse
from pathlib import Path

from dotenv import load_dotenv

from sandbench.logging import configure_logging
from sandbench.providers import provider_names, select_providers
from sandbench.benchmark import (
    WorkloadConfig,
    run_all,
    print_report,
    resolve_workload,
    load_workload_file,
    parse_positive_int,
)
from sandbench.config.timeouts import SANDBOX_CREATE_TIMEOUT_S
from sandbench.config.benchmark import DEFAULT_ITERATIONS


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Benchmark sandbox providers (time to interactive)")
    p.add_argument("--provider", help=f"only run this provider ({', '.join(provider_names())})")
    p.add_argument(
        "--iterations",
        "-n",
        default=str(DEFAULT_ITERATIONS),
        help=f"iterations per provider (default {DEFAULT_ITERATIONS})",
    )
    p.add_argument("--setup-cmd", dest="setup_cmd", help="workload setup command")
    p.add_argument("--workload-cmd", dest="workload_cmd", help="workload command")
    p.add_argument("--workload-file", dest="workload_file", help="JSON workload file")
    p.add_argument("--workload-name", dest="workload_name", help="workload label")
    p.add_argument("--workload-cwd", dest="workload_cwd", help="working directory for workload commands")
    p.add_argument("--workload-timeout-ms", dest="workload_timeout_ms", help="per-command workload timeout (ms)")
    p.add_argument("--log-level", dest="log_level", help="override APP_LOG_LEVEL")
    return p.parse_args(argv)


def _resolve_workload(args: argparse.Namespace) -> WorkloadConfig | None:
    file_config = None
    if args.workload_file:
        file_config = load_workload_file(args.workload_file, base_dir=Path.cwd())
    return resolve_workload(
        setup_command=args.setup_cmd,
        command=args.workload_cmd,
        name=args.workload_name,
        cwd=args.workload_cwd,
        timeout_ms=args.workload_timeout_ms,
        file_config=file_config,
    )


def main(argv: list[str] | None = None) -> int:
    """Thin orchestrator: parse CLI args, run the benchmark, print the report."""
    load_dotenv(Path.cwd() / ".env")
    args = _parse_args(argv)
    configure_logging(args.log_level)

    try:
        iterations = parse_positive_int(args.iterations, "--iterations")
        providers = select_providers(args.provider)
        workload = _resolve_workload(args)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    results = asyncio.run(
        run_all(
            providers,
            iterations=iterations,
            workload=workload,
            create_timeout_s=SANDBOX_CREATE_TIMEOUT_S,
        )
    )
    print_report(results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
