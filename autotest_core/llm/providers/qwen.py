"""Alibaba Qwen (DashScope) provider strategy."""

from __future__ import annotations

from typing import Any

from .http import HTTPProvider


class QwenProvider(HTTPProvider):
    """Strategy for Qwen via the DashScope text-generation API."""

    vendor_id = "qwen"
    DEFAULT_BASE_URL = "https://dashscope.aliyuncs.com/api/v1"
    DEFAULT_MODEL = "qwen-max"

    def build_request(self, system_prompt: str, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        url = f"{self.base_url}/services/aigc/text-generation/generation"
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }
        payload = {
            "model": self.model,
            "input": {
                "messages": [
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": prompt},
                ]
            },
            "parameters": {
                "max_tokens": self.MAX_TOKENS,
                "temperature": self.TEMPERATURE,
            },
        }
        return url, headers, payload

    def extract_text(self, data: dict[str, Any]) -> str:
        output = data["output"]
        # result_format=message answers with choices, the default with text
        if output.get("choices"):
            return output["choices"][0]["message"]["content"] or ""
        return output["text"]
