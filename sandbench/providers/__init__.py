"""Sandbox provider adapters and their registry."""

from .types import ProviderConfig
from .registry import PROVIDERS, provider_names, select_providers

__all__ = ["PROVIDERS", "ProviderConfig", "provider_names", "select_providers"]
