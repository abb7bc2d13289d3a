"""ISLO compute client: creates sandboxes over the REST API."""

from __future__ import annotations

import logging

import httpx

from sandbench.errors import TransportError
from sandbench.sandbox import Compute
from sandbench.config.timeouts import HTTP_CONNECT_TIMEOUT_S

from .http import ensure_success, build_auth_headers, normalize_base_url, create_sandbox_name
from .config import IsloConfig
from .sandbox import IsloSandbox

logger = logging.getLogger(__name__)


class IsloCompute(Compute):
    """Sandbox factory for one ISLO endpoint.

    Read timeouts are left to the benchmark deadlines; only connecting is
    bounded at the HTTP layer.
    """

    def __init__(self, config: IsloConfig, *, client: httpx.AsyncClient | None = None):
        self._config = config
        self._base_url = normalize_base_url(config.base_url)
        self._headers = build_auth_headers(config)
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(None, connect=HTTP_CONNECT_TIMEOUT_S),
        )

    async def create(self) -> IsloSandbox:
        requested = create_sandbox_name()
        body = {
            "name": requested,
            "image": self._config.image,
            "vcpus": self._config.vcpus,
            "memory_mb": self._config.memory_mb,
            "disk_gb": self._config.disk_gb,
        }
        response = await self._client.post(f"{self._base_url}/sandboxes/", json=body, headers=self._headers)
        await ensure_success(response, "ISLO request failed")

        try:
            created = response.json()
        except ValueError as exc:
            raise TransportError("ISLO create returned invalid JSON", status_code=response.status_code) from exc

        name = requested
        if isinstance(created, dict) and isinstance(created.get("name"), str) and created["name"].strip():
            name = created["name"]
        logger.debug("created sandbox %s", name)
        return IsloSandbox(self._client, self._base_url, self._headers, name)

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = ["IsloCompute"]
