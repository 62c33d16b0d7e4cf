"""Google Gemini provider strategy."""

from __future__ import annotations

from typing import Any

from .http import HTTPProvider


class GeminiProvider(HTTPProvider):
    """
    Strategy for Google Gemini.

    Uses the ``generateContent`` endpoint; the key travels in the
    ``x-goog-api-key`` header.
    """

    vendor_id = "gemini"
    DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
    DEFAULT_MODEL = "gemini-pro"

    def build_request(self, system_prompt: str, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.config.api_key,
        }
        payload = {
            "systemInstruction": {"parts": [{"text": system_prompt}]},
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.TEMPERATURE,
                "maxOutputTokens": self.MAX_TOKENS,
            },
        }
        return url, headers, payload

    def extract_text(self, data: dict[str, Any]) -> str:
        parts = data["candidates"][0]["content"]["parts"]
        return "".join(part.get("text", "") for part in parts)
