"""OpenAI provider strategy."""

from __future__ import annotations

from typing import Optional

import httpx
import openai

from autotest_core.errors import ConfigurationError, ProviderError

from .base import ProviderAdapter, ProviderConfig


class OpenAIProvider(ProviderAdapter):
    """Strategy for OpenAI, called through the official async SDK."""

    vendor_id = "openai"
    DEFAULT_BASE_URL = "https://api.openai.com/v1"
    DEFAULT_MODEL = "gpt-4-turbo"

    def __init__(self, config: ProviderConfig, http_client: Optional[httpx.AsyncClient] = None):
        super().__init__(config, http_client)
        # max_retries=0: one outbound request per call
        try:
            self.client = openai.AsyncOpenAI(
                api_key=config.api_key,
                base_url=self.base_url,
                timeout=config.timeout,
                max_retries=0,
                http_client=http_client,
            )
        except TypeError as e:
            # SDK releases that do not accept an httpx.AsyncClient
            raise ConfigurationError(f"Cannot build the {self.vendor_id} client: {e}") from e

    async def complete(self, system_prompt: str, prompt: str) -> str:
        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.TEMPERATURE,
                max_tokens=self.MAX_TOKENS,
            )
        except openai.APIStatusError as e:
            raise ProviderError(self.vendor_id, e.status_code, e.response.text)
        except openai.APIError as e:
            raise ProviderError(self.vendor_id, None, str(e))

        if not completion.choices:
            raise ProviderError(self.vendor_id, None, "", message="OpenAI API returned no choices")
        return completion.choices[0].message.content or ""

    async def aclose(self) -> None:
        # An injected http_client belongs to the caller
        if self._http_client is None:
            await self.client.close()
