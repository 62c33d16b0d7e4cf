"""
autotest-core - Geracao e execucao de testes de UI guiadas por IA

Modulos:
- llm: Providers de IA (Claude, OpenAI, DeepSeek, Gemini, Qwen, GLM)
- testing: Pipeline, geracao/merge de scripts e execucao com Playwright
- context: Selecao de provider compartilhada por um host
- config: Configuracao via variaveis de ambiente (.env)
"""

__version__ = "0.1.0"

from . import errors
from . import llm
from . import testing

__all__ = ["errors", "llm", "testing", "__version__"]
