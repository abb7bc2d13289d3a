"""ISLO sandbox handle: streamed exec and delete."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from sandbench.sandbox import Sandbox, CommandResult
from sandbench.runtime import with_deadline
from sandbench.sse import read_command_result
from sandbench.config.islo import ISLO_EXEC_SHELL, ISLO_GONE_STATUSES
from sandbench.config.timeouts import EXEC_DEFAULT_TIMEOUT_S

from .http import ensure_success

logger = logging.getLogger(__name__)


class IsloSandbox(Sandbox):
    """One ISLO sandbox, addressed by name."""

    def __init__(self, client: httpx.AsyncClient, base_url: str, headers: dict[str, str], name: str):
        self._client = client
        self._base_url = base_url
        self._headers = headers
        self.name = name

    @property
    def url(self) -> str:
        return f"{self._base_url}/sandboxes/{quote(self.name, safe='')}"

    async def run_command(
        self,
        command: str,
        *,
        cwd: str | None = None,
        timeout: float | None = None,
        background: bool = False,
    ) -> CommandResult:
        # background is not supported by the exec stream; commands always run attached
        timeout_s = EXEC_DEFAULT_TIMEOUT_S if timeout is None else timeout
        return await with_deadline(self._exec_stream(command, cwd), timeout_s, "ISLO exec timed out")

    async def _exec_stream(self, command: str, cwd: str | None) -> CommandResult:
        body: dict[str, object] = {"command": [*ISLO_EXEC_SHELL, command]}
        if cwd:
            body["cwd"] = cwd
        headers = {**self._headers, "Accept": "text/event-stream"}

        async with self._client.stream("POST", f"{self.url}/exec/stream", json=body, headers=headers) as response:
            await ensure_success(response, "ISLO exec failed")
            return await read_command_result(response.aiter_bytes())

    async def destroy(self) -> None:
        response = await self._client.delete(self.url, headers=self._headers)
        if response.status_code in ISLO_GONE_STATUSES:
            logger.debug("sandbox %s already gone (%d)", self.name, response.status_code)
            return
        await ensure_success(response, "ISLO delete failed")


__all__ = ["IsloSandbox"]
