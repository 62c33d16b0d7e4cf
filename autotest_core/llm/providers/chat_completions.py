"""Vendors exposing an OpenAI-style ``/chat/completions`` endpoint."""

from __future__ import annotations

from typing import Any

from .http import HTTPProvider


class ChatCompletionsProvider(HTTPProvider):
    """Strategy for vendors that speak the chat-completions envelope."""

    def build_request(self, system_prompt: str, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        url = f"{self.base_url}/chat/completions"
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.TEMPERATURE,
            "max_tokens": self.MAX_TOKENS,
        }
        return url, headers, payload

    def extract_text(self, data: dict[str, Any]) -> str:
        return data["choices"][0]["message"]["content"] or ""


class DeepSeekProvider(ChatCompletionsProvider):
    """Strategy for DeepSeek."""

    vendor_id = "deepseek"
    DEFAULT_BASE_URL = "https://api.deepseek.com/v1"
    DEFAULT_MODEL = "deepseek-chat"


class GLMProvider(ChatCompletionsProvider):
    """Strategy for Zhipu GLM."""

    vendor_id = "glm"
    DEFAULT_BASE_URL = "https://open.bigmodel.cn/api/paas/v4"
    DEFAULT_MODEL = "glm-4"
