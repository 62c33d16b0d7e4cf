"""Base strategy for vendors called over plain HTTP with httpx."""

from __future__ import annotations

import json
from abc import abstractmethod
from typing import Any

import httpx
import structlog

from autotest_core.errors import ProviderError

from .base import ProviderAdapter

logger = structlog.get_logger()


class HTTPProvider(ProviderAdapter):
    """
    Provider whose transport is a single JSON POST.

    Subclasses describe the vendor envelope: ``build_request`` returns the
    URL, headers and payload, ``extract_text`` pulls the message text out
    of the decoded response.
    """

    @abstractmethod
    def build_request(self, system_prompt: str, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        """Return ``(url, headers, payload)`` for one vendor call."""
        raise NotImplementedError

    @abstractmethod
    def extract_text(self, data: dict[str, Any]) -> str:
        """Extract the message text from the vendor response envelope."""
        raise NotImplementedError

    async def complete(self, system_prompt: str, prompt: str) -> str:
        url, headers, payload = self.build_request(system_prompt, prompt)
        response = await self._post_json(url, headers, payload)

        try:
            data = response.json()
        except ValueError:
            raise ProviderError(
                self.vendor_id,
                response.status_code,
                response.text,
                message=f"{self.vendor_id} API returned a non-JSON body",
            )

        try:
            return self.extract_text(data)
        except (KeyError, IndexError, TypeError):
            raise ProviderError(
                self.vendor_id,
                response.status_code,
                json.dumps(data, ensure_ascii=False)[:2000],
                message=f"{self.vendor_id} API returned an unexpected response envelope",
            )

    async def _post_json(self, url: str, headers: dict[str, str], payload: dict[str, Any]) -> httpx.Response:
        """POST once, without retries, and fail with ProviderError on non-2xx."""
        try:
            if self._http_client is not None:
                response = await self._http_client.post(
                    url, headers=headers, json=payload, timeout=self.config.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                    response = await client.post(url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            logger.error("Provider transport error", vendor=self.vendor_id, error=str(e))
            raise ProviderError(self.vendor_id, None, str(e))

        if not response.is_success:
            logger.error(
                "Provider request failed",
                vendor=self.vendor_id,
                status=response.status_code,
            )
            raise ProviderError(self.vendor_id, response.status_code, response.text)

        return response
