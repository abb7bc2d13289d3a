"""Provider registration record."""

from __future__ import annotations

from dataclasses import field, dataclass
from collections.abc import Callable

from sandbench.sandbox import Compute


@dataclass(frozen=True)
class ProviderConfig:
    """How to build one provider's compute client.

    ``create_compute`` is only called once every variable in
    ``required_env_vars`` is set, so factories may read them directly.
    """

    name: str
    create_compute: Callable[[], Compute]
    required_env_vars: tuple[str, ...] = field(default_factory=tuple)


__all__ = ["ProviderConfig"]
