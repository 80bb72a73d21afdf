# src/dataflow_translator/core/engine/__init__.py
"""
Engine de tradução do Dataflow Translator.

Componentes principais:
    - planner → ordenação topológica determinística dos transforms
    - engine  → tradução coordenada e política fail-fast

Invariantes:
    - Um transform só é traduzido após o produtor de seus inputs
    - Cada transform é traduzido no máximo uma vez
    - Um JobSpec só existe quando todos os transforms foram traduzidos
"""

from .engine import JobTranslationResult, PipelineTranslator
from .planner import CycleDetectedError, UnknownDependencyError, plan_translation

__all__ = [
    "JobTranslationResult",
    "PipelineTranslator",
    "CycleDetectedError",
    "UnknownDependencyError",
    "plan_translation",
]
