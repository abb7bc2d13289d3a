"""HTTP helpers for the ISLO API."""

from __future__ import annotations

import time
import secrets
import string

import httpx

from sandbench.utils import truncate
from sandbench.errors import TransportError
from sandbench.config.islo import ISLO_SANDBOX_NAME_PREFIX

from .config import IsloConfig

_BASE36 = string.digits + string.ascii_lowercase


def normalize_base_url(url: str) -> str:
    return url.rstrip("/")


def build_auth_headers(config: IsloConfig) -> dict[str, str]:
    headers = {"Authorization": f"Bearer {config.token}"}
    if config.tenant_public_id:
        headers["X-Public-Tenant-Id"] = config.tenant_public_id
    if config.user_public_id:
        headers["X-Public-User-Id"] = config.user_public_id
    return headers


def create_sandbox_name() -> str:
    """Unique-enough name: prefix, epoch milliseconds, six base36 characters."""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(6))
    return f"{ISLO_SANDBOX_NAME_PREFIX}-{int(time.time() * 1000)}-{suffix}"


async def safe_read_text(response: httpx.Response) -> str:
    """Response text for diagnostics; never raises."""
    try:
        await response.aread()
        text = response.text.strip()
    except Exception:
        return "<failed to read response>"
    return truncate(text) if text else "<empty response>"


async def ensure_success(response: httpx.Response, message: str) -> None:
    """Raise TransportError(message, status, text) for a non-2xx response."""
    if response.is_success:
        return
    raise TransportError(
        message,
        status_code=response.status_code,
        detail=await safe_read_text(response),
    )


__all__ = [
    "build_auth_headers",
    "create_sandbox_name",
    "ensure_success",
    "normalize_base_url",
    "safe_read_text",
]
