"""ISLO sandbox backend over HTTP and server-sent events."""

from .config import IsloConfig
from .compute import IsloCompute
from .sandbox import IsloSandbox

__all__ = ["IsloCompute", "IsloConfig", "IsloSandbox"]
