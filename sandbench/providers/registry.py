"""Registered sandbox providers."""

from __future__ import annotations

from sandbench.config.islo import ISLO_TOKEN_ENV, ISLO_BASE_URL_ENV

from .islo import IsloCompute, IsloConfig
from .types import ProviderConfig


def _islo_compute() -> IsloCompute:
    return IsloCompute(IsloConfig.from_env())


PROVIDERS: tuple[ProviderConfig, ...] = (
    ProviderConfig(
        name="islo",
        create_compute=_islo_compute,
        required_env_vars=(ISLO_BASE_URL_ENV, ISLO_TOKEN_ENV),
    ),
)


def provider_names(providers: tuple[ProviderConfig, ...] = PROVIDERS) -> list[str]:
    return [p.name for p in providers]


def select_providers(
    name: str | None,
    providers: tuple[ProviderConfig, ...] = PROVIDERS,
) -> list[ProviderConfig]:
    """All providers, or the one named; ValueError for an unknown name."""
    if not name:
        return list(providers)
    selected = [p for p in providers if p.name == name]
    if not selected:
        available = ", ".join(provider_names(providers))
        raise ValueError(f"Unknown provider: {name}. Available: {available}")
    return selected


__all__ = ["PROVIDERS", "provider_names", "select_providers"]
