"""ISLO connection settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from collections.abc import Mapping

from sandbench.config.islo import (
    ISLO_USER_ENV,
    ISLO_TOKEN_ENV,
    ISLO_TENANT_ENV,
    ISLO_BASE_URL_ENV,
    ISLO_DEFAULT_IMAGE,
    ISLO_DEFAULT_VCPUS,
    ISLO_DEFAULT_DISK_GB,
    ISLO_DEFAULT_MEMORY_MB,
)


@dataclass(frozen=True)
class IsloConfig:
    """Credentials and requested sandbox shape for the ISLO API."""

    base_url: str
    token: str
    tenant_public_id: str | None = None
    user_public_id: str | None = None
    image: str = ISLO_DEFAULT_IMAGE
    vcpus: int = ISLO_DEFAULT_VCPUS
    memory_mb: int = ISLO_DEFAULT_MEMORY_MB
    disk_gb: int = ISLO_DEFAULT_DISK_GB

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> IsloConfig:
        env = os.environ if environ is None else environ
        return cls(
            base_url=env[ISLO_BASE_URL_ENV],
            token=env[ISLO_TOKEN_ENV],
            tenant_public_id=env.get(ISLO_TENANT_ENV) or None,
            user_public_id=env.get(ISLO_USER_ENV) or None,
        )


__all__ = ["IsloConfig"]
