"""
Modelos de dados do sistema de testes.

Exporta:
- RunConfig, LoginSelectors (run_config.py)
- Step, TestCase, ActionType (test_case.py)
- CaseResult, ExecutionResult, PipelineRunResult (test_result.py)
"""

from .run_config import (
    RunConfig,
    LoginSelectors,
)

from .test_case import (
    ActionType,
    Step,
    TestCase,
    coerce_test_case,
    parse_test_cases,
    raw_test_cases,
    unique_by_id,
)

from .test_result import (
    CaseResult,
    ExecutionResult,
    PipelineRunResult,
)

__all__ = [
    # Enums
    "ActionType",
    # Run
    "RunConfig",
    "LoginSelectors",
    # Test cases
    "Step",
    "TestCase",
    "coerce_test_case",
    "parse_test_cases",
    "raw_test_cases",
    "unique_by_id",
    # Results
    "CaseResult",
    "ExecutionResult",
    "PipelineRunResult",
]
