"""
Scripts de teste: geracao, merge e persistencia.
"""

from .generator import CASE_DECORATOR, ScriptGenerator
from .merger import (
    CaseBlock,
    CollisionPolicy,
    MergeResult,
    ScriptMerger,
    extract_blocks,
    parse_script,
)
from .storage import ArtifactStore, cases_path_for, load_cases

__all__ = [
    "CASE_DECORATOR",
    "ScriptGenerator",
    "CaseBlock",
    "CollisionPolicy",
    "MergeResult",
    "ScriptMerger",
    "extract_blocks",
    "parse_script",
    "ArtifactStore",
    "cases_path_for",
    "load_cases",
]
