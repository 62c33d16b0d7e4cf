"""
Modulo de execucao de testes.

Exporta:
- BaseExecutor: Interface abstrata para executores
- PlaywrightExecutor: Execucao com Playwright
- BrowserSession: Recursos de browser de uma execucao
"""

from autotest_core.testing.execution.base_executor import BaseExecutor
from autotest_core.testing.execution.playwright_executor import BrowserSession, PlaywrightExecutor

__all__ = [
    "BaseExecutor",
    "BrowserSession",
    "PlaywrightExecutor",
]
