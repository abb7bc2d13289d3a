"""Configuration values for sandbench.

Modules here are declarative: constants and environment reads only.
"""

from .islo import (
    ISLO_USER_ENV,
    ISLO_TOKEN_ENV,
    ISLO_TENANT_ENV,
    ISLO_EXEC_SHELL,
    ISLO_BASE_URL_ENV,
    ISLO_DEFAULT_IMAGE,
    ISLO_DEFAULT_VCPUS,
    ISLO_GONE_STATUSES,
    ISLO_DEFAULT_DISK_GB,
    ISLO_DEFAULT_MEMORY_MB,
    ISLO_SANDBOX_NAME_PREFIX,
)
from .logging import APP_LOG_LEVEL, APP_LOG_FORMAT, APP_LOG_DATEFMT
from .scoring import (
    WEIGHT_MAX,
    WEIGHT_MIN,
    WEIGHT_P95,
    WEIGHT_P99,
    WEIGHT_MEDIAN,
    SCORE_DECIMALS,
    SCORE_CEILING_MS,
)
from .timeouts import (
    DESTROY_TIMEOUT_S,
    WORKLOAD_TIMEOUT_S,
    EXEC_DEFAULT_TIMEOUT_S,
    HTTP_CONNECT_TIMEOUT_S,
    FIRST_COMMAND_TIMEOUT_S,
    SANDBOX_CREATE_TIMEOUT_S,
)
from .benchmark import (
    SMOKE_COMMAND,
    ALL_FAILED_REASON,
    DEFAULT_ITERATIONS,
    DEFAULT_WORKLOAD_NAME,
    FAILURE_DETAIL_MAX_CHARS,
    MISSING_CREDENTIALS_PREFIX,
)

__all__ = [
    # benchmark
    "ALL_FAILED_REASON",
    "DEFAULT_ITERATIONS",
    "DEFAULT_WORKLOAD_NAME",
    "FAILURE_DETAIL_MAX_CHARS",
    "MISSING_CREDENTIALS_PREFIX",
    "SMOKE_COMMAND",
    # islo
    "ISLO_BASE_URL_ENV",
    "ISLO_DEFAULT_DISK_GB",
    "ISLO_DEFAULT_IMAGE",
    "ISLO_DEFAULT_MEMORY_MB",
    "ISLO_DEFAULT_VCPUS",
    "ISLO_EXEC_SHELL",
    "ISLO_GONE_STATUSES",
    "ISLO_SANDBOX_NAME_PREFIX",
    "ISLO_TENANT_ENV",
    "ISLO_TOKEN_ENV",
    "ISLO_USER_ENV",
    # logging
    "APP_LOG_DATEFMT",
    "APP_LOG_FORMAT",
    "APP_LOG_LEVEL",
    # scoring
    "SCORE_CEILING_MS",
    "SCORE_DECIMALS",
    "WEIGHT_MAX",
    "WEIGHT_MEDIAN",
    "WEIGHT_MIN",
    "WEIGHT_P95",
    "WEIGHT_P99",
    # timeouts
    "DESTROY_TIMEOUT_S",
    "EXEC_DEFAULT_TIMEOUT_S",
    "FIRST_COMMAND_TIMEOUT_S",
    "HTTP_CONNECT_TIMEOUT_S",
    "SANDBOX_CREATE_TIMEOUT_S",
    "WORKLOAD_TIMEOUT_S",
]
