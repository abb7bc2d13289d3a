"""ISLO sandbox backend settings.

Credentials are read by the provider registry at run time; this module only
names the environment variables and the sandbox shape requested on creation.
"""

import os


ISLO_BASE_URL_ENV = "ISLO_BASE_URL"
ISLO_TOKEN_ENV = "ISLO_API_TOKEN"
ISLO_TENANT_ENV = "ISLO_TENANT_PUBLIC_ID"
ISLO_USER_ENV = "ISLO_USER_PUBLIC_ID"

ISLO_DEFAULT_IMAGE = os.getenv("ISLO_IMAGE", "docker.io/library/python:3.12-slim")
ISLO_DEFAULT_VCPUS = int(os.getenv("ISLO_VCPUS", "2"))
ISLO_DEFAULT_MEMORY_MB = int(os.getenv("ISLO_MEMORY_MB", "512"))
ISLO_DEFAULT_DISK_GB = int(os.getenv("ISLO_DISK_GB", "10"))

ISLO_SANDBOX_NAME_PREFIX = "bench"
ISLO_EXEC_SHELL = ("/bin/sh", "-lc")

# Statuses treated as "already gone" on delete
ISLO_GONE_STATUSES = frozenset({404, 410})


__all__ = [
    "ISLO_BASE_URL_ENV",
    "ISLO_TOKEN_ENV",
    "ISLO_TENANT_ENV",
    "ISLO_USER_ENV",
    "ISLO_DEFAULT_IMAGE",
    "ISLO_DEFAULT_VCPUS",
    "ISLO_DEFAULT_MEMORY_MB",
    "ISLO_DEFAULT_DISK_GB",
    "ISLO_SANDBOX_NAME_PREFIX",
    "ISLO_EXEC_SHELL",
    "ISLO_GONE_STATUSES",
]
