"""
autotest-core LLM - uniform access to the AI vendors

Supported providers:
- Claude (Anthropic SDK)
- OpenAI (OpenAI SDK)
- DeepSeek, GLM (chat-completions over httpx)
- Gemini, Qwen (vendor envelopes over httpx)

Every provider exposes the same three capabilities: ``analyze``,
``generate_test_cases`` and ``generate_report``.
"""

from .parsing import (
    decode_response,
    extract_payload,
    fill_template,
    is_decode_failure,
    to_prompt_json,
)

from .providers import (
    ProviderAdapter,
    ProviderConfig,
    create_provider,
    list_providers,
    supported_providers,
)

__all__ = [
    # Parsing
    "decode_response",
    "extract_payload",
    "fill_template",
    "is_decode_failure",
    "to_prompt_json",
    # Providers
    "ProviderAdapter",
    "ProviderConfig",
    "create_provider",
    "list_providers",
    "supported_providers",
]
