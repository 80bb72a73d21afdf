# src/dataflow_translator/core/pipeline/registry.py
"""
Registro de tradutores e dispatch por tipo de transform.

Este módulo define o `TranslatorRegistry`, que associa cada `TransformKind`
a exatamente um tradutor, e o `TranslationResult`, o tipo de resultado
explícito de uma tradução (Step emitido ou erro estruturado).

Decisões arquiteturais:
    - Dispatch por tag (sum type {Read, Write}), sem hierarquia de classes
    - Exceções tipadas de tradução viram `TranslationErrorPayload`
    - Outras exceções (erros de programação) propagam sem conversão
    - Registro duplicado é erro estrutural imediato

Invariantes:
    - Cada `TransformKind` possui no máximo um tradutor
    - `TranslationResult` possui exatamente um de (step, error)
    - Um resultado com erro nunca acompanha Step emitido no contexto

Limites explícitos:
    - Não ordena transforms (ver core.engine.planner)
    - Não aplica políticas fail-fast
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from dataflow_translator.core.errors import TranslationErrorPayload, exception_to_error
from dataflow_translator.core.exceptions import (
    TranslationException,
    UnsupportedTransformError,
)

from .context import TranslationContext
from .types import Step, TransformKind


class DuplicateTranslatorError(ValueError):
    """Dois tradutores registrados para o mesmo `TransformKind`."""


@dataclass(frozen=True)
class TranslationResult:
    """Resultado explícito da tradução de um transform."""

    transform: str
    step: Optional[Step] = None
    error: Optional[TranslationErrorPayload] = None

    def __post_init__(self) -> None:
        if (self.step is None) == (self.error is None):
            raise ValueError("TranslationResult requires exactly one of step or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Step:
        if self.step is None:
            raise RuntimeError(f"Translation of '{self.transform}' failed: {self.error.message}")
        return self.step


@dataclass
class TranslatorRegistry:
    """Mapa `TransformKind` → tradutor."""

    _translators: Dict[TransformKind, Any] = field(default_factory=dict, init=False, repr=False)

    def register(self, kind: TransformKind, translator: Any) -> None:
        kind = TransformKind(kind)
        if kind in self._translators:
            raise DuplicateTranslatorError(f"Duplicate translator for transform kind: {kind.value}")
        from dataflow_translator.core.translators.base import TransformTranslator

        if not isinstance(translator, TransformTranslator):
            raise TypeError("translator must define translate(transform, ctx)")
        self._translators[kind] = translator

    def get(self, kind: TransformKind) -> Any:
        translator = self._translators.get(kind)
        if translator is None:
            raise UnsupportedTransformError(
                message=f"No translator registered for transform kind {getattr(kind, 'value', kind)!r}",
                details={"kind": str(getattr(kind, "value", kind))},
                hint="Registre um tradutor para este tipo de transform.",
            )
        return translator

    def kinds(self) -> list:
        return list(self._translators)

    def translate(self, transform: Any, ctx: TranslationContext) -> TranslationResult:
        """
        Traduz `transform` para um Step em `ctx`.

        Returns:
            TranslationResult com o Step emitido, ou com o erro estruturado
            quando uma validação falha (nenhum Step é emitido nesse caso).
        """
        name = getattr(transform, "name", None) or repr(transform)
        emitted = len(ctx.steps)
        try:
            translator = self.get(getattr(transform, "kind", None))
            translator.translate(transform, ctx)
        except TranslationException as exc:
            return TranslationResult(transform=name, error=exception_to_error(exc))

        if len(ctx.steps) != emitted + 1:
            raise RuntimeError(
                f"Translator for '{name}' must emit exactly one step, emitted {len(ctx.steps) - emitted}"
            )
        return TranslationResult(transform=name, step=ctx.steps[-1])


def default_registry() -> TranslatorRegistry:
    """Registry com os tradutores de TextIO."""
    from dataflow_translator.core.translators.text_io import ReadTranslator, WriteTranslator

    registry = TranslatorRegistry()
    registry.register(TransformKind.TEXT_READ, ReadTranslator())
    registry.register(TransformKind.TEXT_WRITE, WriteTranslator())
    return registry
