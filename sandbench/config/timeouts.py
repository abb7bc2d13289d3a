"""Deadlines for every remote sandbox operation.

All values are seconds. Each step of an iteration gets its own deadline;
an overrun on one step never shortens another.
"""

import os


# Sandbox creation (top-level per-iteration timeout)
SANDBOX_CREATE_TIMEOUT_S = float(os.getenv("SANDBOX_CREATE_TIMEOUT_S", "120"))

# Smoke command that marks the sandbox as interactive
FIRST_COMMAND_TIMEOUT_S = 30.0

# Setup and workload commands, unless the workload overrides it
WORKLOAD_TIMEOUT_S = float(os.getenv("WORKLOAD_TIMEOUT_S", "300"))

# Teardown is best effort and never blocks longer than this
DESTROY_TIMEOUT_S = 15.0

# Server-side exec timeout when the caller does not pass one
EXEC_DEFAULT_TIMEOUT_S = 300.0

HTTP_CONNECT_TIMEOUT_S = float(os.getenv("HTTP_CONNECT_TIMEOUT_S", "10"))


__all__ = [
    "SANDBOX_CREATE_TIMEOUT_S",
    "FIRST_COMMAND_TIMEOUT_S",
    "WORKLOAD_TIMEOUT_S",
    "DESTROY_TIMEOUT_S",
    "EXEC_DEFAULT_TIMEOUT_S",
    "HTTP_CONNECT_TIMEOUT_S",
]
