"""
Fixtures compartilhadas dos testes.

Nada aqui acessa rede ou browser: vendors respondem via
``httpx.MockTransport`` e o executor recebe uma pagina falsa.
"""

import asyncio
import json
import os
import sys
from typing import Any, Callable, Optional

import httpx
import pytest

# Adicionar raiz do projeto ao path (execucao sem instalar o pacote)
_tests_dir = os.path.dirname(os.path.abspath(__file__))
_root_dir = os.path.dirname(_tests_dir)
if _root_dir not in sys.path:
    sys.path.insert(0, _root_dir)

from autotest_core.llm.providers.base import ProviderAdapter, ProviderConfig
from autotest_core.testing.execution import BrowserSession, PlaywrightExecutor
from autotest_core.testing.models import RunConfig


@pytest.fixture
def run_config() -> RunConfig:
    return RunConfig(
        target_url="https://app.example.com/login",
        username="tester",
        password="s3cret",
        screen_name="Orders",
        test_data={"order": "A-1"},
    )


@pytest.fixture
def sample_cases() -> list[dict]:
    """Casos no formato devolvido pela IA."""
    return [
        {
            "id": "TC001",
            "name": "Search order",
            "steps": [
                {"action": "fill", "selector": "#search", "value": "A-1"},
                {"action": "click", "selector": "button.search"},
            ],
            "expectedResult": "A-1",
        },
        {
            "id": "TC002",
            "name": "Open details",
            "steps": [{"action": "navigate", "url": "https://app.example.com/orders/1"}],
            "expectedResult": "Order details",
        },
    ]


@pytest.fixture
def mock_client() -> Callable[..., httpx.AsyncClient]:
    """Cria um AsyncClient cujo transporte e um handler local."""
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


class ScriptedAdapter(ProviderAdapter):
    """
    Provider falso com respostas por etapa.

    Uma resposta que e uma Exception e levantada em vez de devolvida.
    """

    vendor_id = "scripted"
    DEFAULT_MODEL = "scripted-model"

    def __init__(self, responses: dict[str, Any], config: Optional[ProviderConfig] = None):
        super().__init__(config or ProviderConfig("scripted", api_key="test-key"))
        self.responses = responses
        self.calls: list[tuple[str, str]] = []

    async def complete(self, system_prompt: str, prompt: str) -> str:
        stage = next(k for k, v in self.SYSTEM_PROMPTS.items() if v == system_prompt)
        self.calls.append((stage, prompt))
        response = self.responses[stage]
        if isinstance(response, Exception):
            raise response
        if not isinstance(response, str):
            response = json.dumps(response)
        return response


@pytest.fixture
def scripted_adapter() -> Callable[[dict[str, Any]], ScriptedAdapter]:
    return ScriptedAdapter


class FakePage:
    """
    Pagina Playwright falsa que registra as chamadas.

    ``body_text`` e o texto devolvido por ``inner_text("body")``;
    ``fail_on`` mapeia seletor/url para a excecao levantada ao usa-lo.
    """

    def __init__(self, body_text: str = "", fail_on: Optional[dict[str, Exception]] = None):
        self.body_text = body_text
        self.fail_on = fail_on or {}
        self.calls: list[tuple] = []
        self.screenshot_error: Optional[Exception] = None

    def _check(self, target: str) -> None:
        if target in self.fail_on:
            raise self.fail_on[target]

    def set_default_timeout(self, timeout: float) -> None:
        self.calls.append(("timeout", timeout))

    async def goto(self, url: str) -> None:
        self.calls.append(("goto", url))
        self._check(url)

    async def fill(self, selector: str, value: str) -> None:
        self.calls.append(("fill", selector, value))
        self._check(selector)

    async def click(self, selector: str) -> None:
        self.calls.append(("click", selector))
        self._check(selector)

    async def wait_for_load_state(self, state: str = "load") -> None:
        self.calls.append(("wait", state))

    async def inner_text(self, selector: str) -> str:
        self.calls.append(("inner_text", selector))
        return self.body_text

    async def screenshot(self, path: str, full_page: bool = False) -> None:
        self.calls.append(("screenshot", path, full_page))
        if self.screenshot_error:
            raise self.screenshot_error


@pytest.fixture
def fake_page() -> Callable[..., FakePage]:
    return FakePage


class FakeSessionExecutor(PlaywrightExecutor):
    """
    Executor cuja sessao usa a pagina falsa em vez de abrir um browser.

    Cada abertura cria um BrowserSession proprio; ``closed`` registra as
    sessoes fechadas, na ordem.
    """

    def __init__(self, page, launch_error=None, **kwargs):
        super().__init__(**kwargs)
        self.page = page
        self.launch_error = launch_error
        self.launched: list[BrowserSession] = []
        self.closed: list[BrowserSession] = []

    @property
    def launches(self) -> int:
        return len(self.launched)

    @property
    def closes(self) -> int:
        return len(self.closed)

    async def _launch(self) -> BrowserSession:
        await asyncio.sleep(0)
        if self.launch_error:
            raise self.launch_error
        session = BrowserSession(page=self.page)
        self.launched.append(session)
        return session

    async def _close(self, session: BrowserSession) -> None:
        self.closed.append(session)


@pytest.fixture
def session_executor() -> Callable[..., FakeSessionExecutor]:
    return FakeSessionExecutor
