"""Factory for creating AI provider adapters."""

from __future__ import annotations

import dataclasses
from typing import Optional

import httpx

from autotest_core.errors import ConfigurationError, UnsupportedProviderError

from .anthropic import ClaudeProvider
from .base import ProviderAdapter, ProviderConfig
from .chat_completions import DeepSeekProvider, GLMProvider
from .gemini import GeminiProvider
from .openai import OpenAIProvider
from .qwen import QwenProvider

PROVIDERS: dict[str, type[ProviderAdapter]] = {
    "claude": ClaudeProvider,
    "deepseek": DeepSeekProvider,
    "openai": OpenAIProvider,
    "gemini": GeminiProvider,
    "qwen": QwenProvider,
    "glm": GLMProvider,
}

PROVIDER_CATALOG = [
    {
        "id": "deepseek",
        "name": "DeepSeek",
        "recommended": True,
        "description": "Best price/performance, fast",
    },
    {
        "id": "claude",
        "name": "Claude (Anthropic)",
        "recommended": True,
        "description": "Strongest reasoning and instruction following",
    },
    {
        "id": "openai",
        "name": "OpenAI GPT-4",
        "recommended": False,
        "description": "General purpose, mature ecosystem",
    },
    {
        "id": "gemini",
        "name": "Google Gemini",
        "recommended": False,
        "description": "Strong multimodal capabilities",
    },
    {
        "id": "qwen",
        "name": "Alibaba Qwen",
        "recommended": False,
        "description": "Strong Chinese language support",
    },
    {
        "id": "glm",
        "name": "Zhipu GLM",
        "recommended": False,
        "description": "Domestic general-purpose model",
    },
]


def supported_providers() -> list[str]:
    """Vendor ids accepted by ``create_provider``."""
    return list(PROVIDERS)


def list_providers() -> list[dict]:
    """Vendor catalogue shown to users when choosing a provider."""
    return [dict(entry) for entry in PROVIDER_CATALOG]


def provider_class(vendor_id: str) -> type[ProviderAdapter]:
    """
    Look up the adapter class for a vendor id (case-insensitive).

    Raises:
        UnsupportedProviderError: If the vendor is not supported
    """
    provider_cls = PROVIDERS.get((vendor_id or "").strip().lower())
    if provider_cls is None:
        raise UnsupportedProviderError(vendor_id, supported_providers())
    return provider_cls


def validate_provider(vendor_id: str, config: ProviderConfig) -> ProviderConfig:
    """
    Check a selection without building an adapter.

    Returns:
        ``config`` with its vendor_id normalized

    Raises:
        UnsupportedProviderError: If the vendor is not supported
        ConfigurationError: If the credential is missing
    """
    provider_cls = provider_class(vendor_id)
    if not config.api_key:
        raise ConfigurationError(f"Missing API key for provider '{provider_cls.vendor_id}'")
    return dataclasses.replace(config, vendor_id=provider_cls.vendor_id)


def create_provider(
    vendor_id: str,
    config: Optional[ProviderConfig] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> ProviderAdapter:
    """
    Create a provider adapter for a vendor id.

    Args:
        vendor_id: Vendor id ("claude", "deepseek", "openai", "gemini", "qwen", "glm")
        config: Credentials and overrides; its vendor_id is normalized to ``vendor_id``
        http_client: Optional httpx client used as transport

    Returns:
        Provider adapter instance

    Raises:
        UnsupportedProviderError: If the vendor is not supported
        ConfigurationError: If the credential is missing
    """
    provider_cls = provider_class(vendor_id)
    key = provider_cls.vendor_id

    if config is None:
        config = ProviderConfig(vendor_id=key)
    elif config.vendor_id != key:
        config = dataclasses.replace(config, vendor_id=key)

    return provider_cls(config, http_client=http_client)
