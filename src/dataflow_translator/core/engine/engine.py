# src/dataflow_translator/core/engine/engine.py
"""
Orquestrador da tradução de um pipeline em um job.

O `PipelineTranslator` planeja a ordem dos transforms, invoca o tradutor de
cada um exatamente uma vez e consolida o resultado. Um JobSpec só é produzido
quando todos os transforms foram traduzidos: qualquer erro de tradução é uma
falha fatal de pré-submissão e nada é agendado.

Políticas (configuração `engine.*`):
    - fail_fast=true  → a primeira falha encerra a tradução
    - fail_fast=false → transforms independentes continuam sendo traduzidos
      para reportar todos os erros de uma vez; consumidores de um transform
      com falha são marcados com TRANSLATION_SKIPPED_DEPENDENCY

Limites explícitos:
    - Não submete o job ao serviço
    - Não aplica retry (erros são estáticos)
    - Não otimiza o plano
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from dataflow_translator.core.config.options import PipelineOptions
from dataflow_translator.core.errors import skipped_dependency
from dataflow_translator.core.pipeline.context import TranslationContext
from dataflow_translator.core.pipeline.registry import (
    TranslationResult,
    TranslatorRegistry,
    default_registry,
)
from dataflow_translator.core.traceability.job import JobSpec

from .planner import plan_translation, transform_dependencies


@dataclass(frozen=True)
class JobTranslationResult:
    """Resultado agregado da tradução de um pipeline."""

    results: Dict[str, TranslationResult] = field(default_factory=dict)
    job: Optional[JobSpec] = None

    @property
    def ok(self) -> bool:
        return self.job is not None

    def errors(self) -> Dict[str, Dict[str, Any]]:
        return {
            name: r.error.to_dict()
            for name, r in self.results.items()
            if r.error is not None
        }


class PipelineTranslator:
    """Traduz um conjunto de transforms em um JobSpec."""

    def __init__(
        self,
        *,
        transforms: Sequence[Any],
        options: Optional[PipelineOptions] = None,
        registry: Optional[TranslatorRegistry] = None,
    ):
        self.transforms = list(transforms)
        self.options = options or PipelineOptions()
        self.registry = registry or default_registry()
        self.ctx: Optional[TranslationContext] = None

    def run(self) -> JobTranslationResult:
        """
        Traduz todos os transforms em um contexto novo.

        Cada chamada é independente; o contexto da última execução fica
        disponível em `self.ctx` (Steps e eventos).
        """
        self.ctx = TranslationContext(options=self.options)
        ordered = plan_translation(self.transforms)
        deps = transform_dependencies(self.transforms)

        results: Dict[str, TranslationResult] = {}
        for transform in ordered:
            name = transform.name

            failed = next((d for d in deps[name] if d in results and not results[d].ok), None)
            if failed is not None:
                results[name] = TranslationResult(
                    transform=name,
                    error=skipped_dependency(transform=name, failed=failed),
                )
                continue

            result = self.registry.translate(transform, self.ctx)
            results[name] = result

            if not result.ok:
                self.ctx.log(
                    transform=name,
                    level="ERROR",
                    message=result.error.message,
                    error_type=result.error.type,
                )
                if self.options.fail_fast:
                    break

        if len(results) == len(ordered) and all(r.ok for r in results.values()):
            job = JobSpec.from_context(self.ctx)
            self.ctx.log(
                transform="*",
                level="INFO",
                message="job translated",
                steps=len(job.steps),
            )
            return JobTranslationResult(results=results, job=job)

        return JobTranslationResult(results=results, job=None)
