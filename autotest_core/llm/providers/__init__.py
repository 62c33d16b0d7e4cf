"""
autotest-core AI providers
"""

from .base import ProviderAdapter, ProviderConfig
from .anthropic import ClaudeProvider
from .chat_completions import ChatCompletionsProvider, DeepSeekProvider, GLMProvider
from .gemini import GeminiProvider
from .http import HTTPProvider
from .openai import OpenAIProvider
from .qwen import QwenProvider
from .factory import (
    PROVIDERS,
    create_provider,
    list_providers,
    provider_class,
    supported_providers,
    validate_provider,
)

__all__ = [
    "ProviderAdapter",
    "ProviderConfig",
    "HTTPProvider",
    "ChatCompletionsProvider",
    "ClaudeProvider",
    "DeepSeekProvider",
    "GLMProvider",
    "GeminiProvider",
    "OpenAIProvider",
    "QwenProvider",
    "PROVIDERS",
    "create_provider",
    "list_providers",
    "provider_class",
    "supported_providers",
    "validate_provider",
]
