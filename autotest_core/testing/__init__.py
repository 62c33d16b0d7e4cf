"""
autotest-core - Testing Module

Testes de UI gerados por IA para aplicacoes web.

## Arquitetura

FASE 1: GERACAO
- PipelineOrchestrator: analise -> casos de teste -> relatorio com um provider
- ScriptGenerator: casos de teste -> script pytest + Playwright
- ScriptMerger / ArtifactStore: une scripts entre execucoes, sem ids duplicados

FASE 2: EXECUCAO
- PlaywrightExecutor: login, passos, verificacao e screenshot por caso
- summarize_execution: resumo em markdown dos resultados

## Uso Rapido

    from autotest_core.llm import create_provider, ProviderConfig
    from autotest_core.testing import PipelineOrchestrator, RunConfig, load_prompts

    adapter = create_provider("deepseek", ProviderConfig("deepseek", api_key="..."))
    orchestrator = PipelineOrchestrator(adapter, load_prompts())

    result = await orchestrator.run(RunConfig(
        target_url="https://app.local/login",
        username="admin",
        screen_name="Orders",
    ))
    print(result.completed_steps)
"""

# Orquestrador
from .pipeline import PipelineOrchestrator, PipelineState

# Modelos de dados
from .models import (
    # Classes
    RunConfig,
    LoginSelectors,
    Step,
    TestCase,
    CaseResult,
    ExecutionResult,
    PipelineRunResult,
    # Enums
    ActionType,
    # Funcoes
    parse_test_cases,
)

# Scripts
from .scripts import (
    ArtifactStore,
    CollisionPolicy,
    ScriptGenerator,
    ScriptMerger,
    load_cases,
)

# Executores
from .execution import (
    BaseExecutor,
    PlaywrightExecutor,
)

# Prompts e relatorios
from .prompts import load_prompts, save_prompts
from .reporting import summarize_execution

# Utilitarios
from .utils import (
    get_logger,
    sanitize_filename,
    truncate_string,
)

__all__ = [
    # Orquestrador
    "PipelineOrchestrator",
    "PipelineState",

    # Modelos de dados
    "RunConfig",
    "LoginSelectors",
    "Step",
    "TestCase",
    "CaseResult",
    "ExecutionResult",
    "PipelineRunResult",
    "ActionType",
    "parse_test_cases",

    # Scripts
    "ArtifactStore",
    "CollisionPolicy",
    "ScriptGenerator",
    "ScriptMerger",
    "load_cases",

    # Executores
    "BaseExecutor",
    "PlaywrightExecutor",

    # Prompts e relatorios
    "load_prompts",
    "save_prompts",
    "summarize_execution",

    # Utilitarios
    "get_logger",
    "sanitize_filename",
    "truncate_string",
]
