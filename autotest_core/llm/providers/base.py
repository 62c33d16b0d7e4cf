"""Base class for AI provider adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

import httpx
import structlog

from autotest_core.errors import ConfigurationError
from autotest_core.llm.parsing import decode_response, fill_template, to_prompt_json

if TYPE_CHECKING:
    from autotest_core.testing.models import RunConfig

logger = structlog.get_logger()

STAGE_ANALYSIS = "analysis"
STAGE_TEST_CASE = "test_case"
STAGE_REPORT = "report"


@dataclass(frozen=True)
class ProviderConfig:
    """
    Identifies and authenticates one vendor.

    Args:
        vendor_id: Vendor id ("claude", "deepseek", ...)
        api_key: Credential sent to the vendor
        base_url: Endpoint override (vendor default when None)
        model: Model override (vendor default when None)
        timeout: Request timeout in seconds
    """

    vendor_id: str
    api_key: str = field(default="", repr=False)
    base_url: Optional[str] = None
    model: Optional[str] = None
    timeout: float = 120.0


class ProviderAdapter(ABC):
    """
    Abstract base class for AI provider adapters.

    Every vendor exposes the same three capabilities (analyze, generate test
    cases, generate report). Subclasses only implement ``complete``, which
    issues exactly one request to the vendor and returns its message text.
    """

    vendor_id: str = ""
    DEFAULT_BASE_URL: Optional[str] = None
    DEFAULT_MODEL: str = ""
    MAX_TOKENS = 4000
    TEMPERATURE = 0.7

    SYSTEM_PROMPTS = {
        STAGE_ANALYSIS: (
            "You are a professional QA engineer who analyzes web pages "
            "and designs test cases for them."
        ),
        STAGE_TEST_CASE: (
            "You are a test case design expert who covers the main flows, "
            "edge cases and error handling of a screen."
        ),
        STAGE_REPORT: "You are a test reporting expert who writes clear, professional test reports.",
    }

    def __init__(self, config: ProviderConfig, http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the adapter.

        Args:
            config: Vendor configuration (not modified afterwards)
            http_client: Optional shared httpx client used as transport

        Raises:
            ConfigurationError: If the credential is missing
        """
        if not config.api_key:
            raise ConfigurationError(f"Missing API key for provider '{self.vendor_id}'")

        self.config = config
        self.model = config.model or self.DEFAULT_MODEL
        self.base_url = (config.base_url or self.DEFAULT_BASE_URL or "").rstrip("/")
        self._http_client = http_client

    async def analyze(self, run_config: RunConfig, prompt_template: str) -> Any:
        """
        Analyze the target screen.

        Args:
            run_config: Target application login/navigation context
            prompt_template: Template with ``{key}`` placeholders

        Returns:
            Decoded analysis (or the decode-failure sentinel)
        """
        prompt = fill_template(prompt_template, run_config.template_vars())
        content = await self._request(STAGE_ANALYSIS, prompt)
        return decode_response(content)

    async def generate_test_cases(self, analysis: Any, prompt_template: str) -> Any:
        """
        Generate test cases from an analysis.

        Returns:
            Decoded test case set (or the decode-failure sentinel)
        """
        prompt = f"{prompt_template}\n\nAnalysis result:\n{to_prompt_json(analysis)}"
        content = await self._request(STAGE_TEST_CASE, prompt)
        return decode_response(content)

    async def generate_report(self, results: Any, prompt_template: str) -> str:
        """
        Generate a report from test cases or an ExecutionResult.

        Returns:
            Report text as returned by the vendor
        """
        prompt = f"{prompt_template}\n\nTest results:\n{to_prompt_json(results)}"
        return await self._request(STAGE_REPORT, prompt)

    async def _request(self, stage: str, prompt: str) -> str:
        logger.info(
            "Provider request",
            vendor=self.vendor_id,
            model=self.model,
            stage=stage,
            prompt_chars=len(prompt),
        )
        content = await self.complete(self.SYSTEM_PROMPTS[stage], prompt)
        logger.info(
            "Provider response",
            vendor=self.vendor_id,
            stage=stage,
            response_chars=len(content),
        )
        return content

    @abstractmethod
    async def complete(self, system_prompt: str, prompt: str) -> str:
        """
        Send one request to the vendor and return the message text.

        Args:
            system_prompt: Stage-specific system instruction
            prompt: User prompt

        Returns:
            Message text extracted from the vendor envelope

        Raises:
            ProviderError: If the call fails at transport/auth level
        """
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release transport resources owned by the adapter."""

    async def __aenter__(self) -> "ProviderAdapter":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model!r}, base_url={self.base_url!r})"
