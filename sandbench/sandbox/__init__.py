"""Provider-independent sandbox capability."""

from .base import Sandbox
from .result import CommandResult
from .compute import Compute

__all__ = ["CommandResult", "Compute", "Sandbox"]
