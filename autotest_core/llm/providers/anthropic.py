"""Anthropic (Claude) provider strategy."""

from __future__ import annotations

from typing import Optional

import anthropic
import httpx

from autotest_core.errors import ConfigurationError, ProviderError

from .base import ProviderAdapter, ProviderConfig


class ClaudeProvider(ProviderAdapter):
    """Strategy for Claude, called through the official async SDK."""

    vendor_id = "claude"
    DEFAULT_MODEL = "claude-sonnet-4-20250514"

    def __init__(self, config: ProviderConfig, http_client: Optional[httpx.AsyncClient] = None):
        super().__init__(config, http_client)
        # max_retries=0: one outbound request per call
        try:
            self.client = anthropic.AsyncAnthropic(
                api_key=config.api_key,
                base_url=self.base_url or None,
                timeout=config.timeout,
                max_retries=0,
                http_client=http_client,
            )
        except TypeError as e:
            # SDK releases that do not accept an httpx.AsyncClient
            raise ConfigurationError(f"Cannot build the {self.vendor_id} client: {e}") from e

    async def complete(self, system_prompt: str, prompt: str) -> str:
        try:
            message = await self.client.messages.create(
                model=self.model,
                max_tokens=self.MAX_TOKENS,
                system=system_prompt,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIStatusError as e:
            raise ProviderError(self.vendor_id, e.status_code, e.response.text)
        except anthropic.APIError as e:
            raise ProviderError(self.vendor_id, None, str(e))

        return "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )

    async def aclose(self) -> None:
        # An injected http_client belongs to the caller
        if self._http_client is None:
            await self.client.close()
