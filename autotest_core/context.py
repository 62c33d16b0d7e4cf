"""Provider selection shared by a host process.

A host (web server, CLI) keeps one ``ProviderHandle`` with the vendor the
user picked. Each run gets its own ``RunContext`` with a freshly built
adapter, so switching vendor never affects a run already in progress.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

import httpx
import structlog

from autotest_core.errors import ConfigurationError
from autotest_core.llm.providers.base import ProviderAdapter, ProviderConfig
from autotest_core.llm.providers.factory import (
    PROVIDERS,
    create_provider,
    provider_class,
    validate_provider,
)
from autotest_core.testing.pipeline import PipelineOrchestrator

logger = structlog.get_logger()


@dataclass(frozen=True)
class RunContext:
    """Everything one pipeline run needs, fixed at creation."""

    provider_id: str
    adapter: ProviderAdapter
    prompts: Mapping[str, str] = field(default_factory=dict)

    def orchestrator(self) -> PipelineOrchestrator:
        """Orchestrator bound to this run's adapter."""
        return PipelineOrchestrator(self.adapter, self.prompts)

    async def aclose(self) -> None:
        """Release the adapter built for this run."""
        await self.adapter.aclose()

    async def __aenter__(self) -> RunContext:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


class ProviderHandle:
    """
    Replaceable process-wide provider selection.

    Example:
        handle = ProviderHandle()
        handle.select("deepseek", ProviderConfig("deepseek", api_key="..."))
        async with handle.open_run(prompts) as run:
            result = await run.orchestrator().run(run_config)
    """

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None):
        self._lock = threading.Lock()
        self._config: Optional[ProviderConfig] = None
        self._http_client = http_client

    @property
    def current(self) -> Optional[str]:
        """Selected vendor id, or None."""
        config = self._config
        return config.vendor_id if config else None

    def select(self, vendor_id: str, config: ProviderConfig) -> str:
        """
        Select a vendor for subsequent runs.

        Only the vendor id and the credential are checked here; adapters
        are built per run by ``open_run``.

        Raises:
            UnsupportedProviderError: If the vendor is not supported
            ConfigurationError: If the credential is missing
        """
        normalized = validate_provider(vendor_id, config)

        with self._lock:
            previous = self._config
            self._config = normalized

        logger.info(
            "Provider selected",
            vendor=normalized.vendor_id,
            model=normalized.model or provider_class(normalized.vendor_id).DEFAULT_MODEL,
            previous=previous.vendor_id if previous else None,
        )
        return normalized.vendor_id

    def clear(self) -> None:
        """Forget the current selection."""
        with self._lock:
            self._config = None

    def open_run(self, prompts: Optional[Mapping[str, str]] = None) -> RunContext:
        """
        Snapshot the current selection into a new RunContext.

        Raises:
            ConfigurationError: If no vendor has been selected
        """
        with self._lock:
            config = self._config
        if config is None:
            raise ConfigurationError(
                f"No AI provider selected. Choose one of: {', '.join(PROVIDERS)}"
            )

        adapter = create_provider(config.vendor_id, config, http_client=self._http_client)
        return RunContext(
            provider_id=adapter.vendor_id,
            adapter=adapter,
            prompts=MappingProxyType(dict(prompts or {})),
        )
