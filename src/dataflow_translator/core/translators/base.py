# src/dataflow_translator/core/translators/base.py
"""
Contrato de tradutor de transforms.

Um tradutor converte um descritor de transform em exatamente um Step no
`TranslationContext`, ou falha de forma síncrona sem escrever nada.

Invariantes exigidas de toda implementação:
    - Toda validação ocorre antes da primeira escrita no contexto
    - Uma chamada bem-sucedida emite exatamente um Step
    - Uma chamada com falha não emite Step algum
    - Tradutores não guardam estado entre chamadas
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from dataflow_translator.core.pipeline.context import TranslationContext


@runtime_checkable
class TransformTranslator(Protocol):
    def translate(self, transform: Any, ctx: TranslationContext) -> None:
        """Valida `transform` e emite seu Step em `ctx`."""
        ...
