# src/dataflow_translator/core/pipeline/context.py
"""
Contexto de tradução (Step Builder).

Este módulo define o `TranslationContext`, o acumulador ordenado no qual os
tradutores escrevem os Steps de um job. O contexto é passado explicitamente
a cada chamada de tradução; não existe estado global.

O TranslationContext é o único meio permitido de:
    - iniciar Steps (`add_step`)
    - escrever propriedades no Step corrente (`add_input`)
    - ligar outputs value-only (`add_value_only_output`)
    - declarar o encoding de escrita (`add_encoding_input`)
    - consultar o modo de execução (`is_streaming`)
    - registrar eventos estruturados de log (`log`)

Invariantes:
    - Steps são nomeados `s1`, `s2`, ... na ordem de criação
    - Propriedades preservam a ordem de escrita
    - Cada coleção tem no máximo um Step produtor
    - Eventos sempre incluem `job_name` e `transform`

Concorrência:
    - O contexto NÃO é thread-safe. O contrato de escrita ordenada assume
      acesso exclusivo durante uma chamada de `translate`; traduções
      concorrentes devem usar contextos distintos.

Limites explícitos:
    - Não valida transforms (responsabilidade dos tradutores)
    - Não submete jobs
    - Não persiste dados automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dataflow_translator.core.coders import Coder, value_only
from dataflow_translator.core.config.options import PipelineOptions
from dataflow_translator.core.exceptions import DuplicateOutputError, UnknownInputError

from .types import (
    OutputInfo,
    OutputReference,
    PCollectionRef,
    PropertyNames,
    Step,
    StepKind,
)


@dataclass
class TranslationContext:
    """
    Acumulador de Steps de uma tradução.

    Campos:
        - options: opções efetivas do pipeline
        - steps: Steps emitidos, em ordem
        - events: log estruturado de eventos
    """

    options: PipelineOptions = field(default_factory=PipelineOptions)

    steps: List[Step] = field(default_factory=list, init=False)
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    _producers: Dict[PCollectionRef, OutputReference] = field(default_factory=dict, init=False, repr=False)
    _current: Optional[Step] = field(default=None, init=False, repr=False)

    # -----------------------------
    # Modo de execução
    # -----------------------------
    def is_streaming(self) -> bool:
        return bool(self.options.streaming)

    # -----------------------------
    # Construção de Steps
    # -----------------------------
    def add_step(self, transform: Any, kind: StepKind) -> Step:
        step = Step(
            name=f"s{len(self.steps) + 1}",
            kind=StepKind(kind),
            user_name=getattr(transform, "name", None) or str(transform),
        )
        self.steps.append(step)
        self._current = step
        return step

    def _require_current(self) -> Step:
        if self._current is None:
            raise RuntimeError("No step in progress: call add_step() before writing properties")
        return self._current

    def add_input(self, name: str, value: Any) -> None:
        step = self._require_current()
        if isinstance(value, PCollectionRef):
            value = self.as_output_reference(value)
        step.properties[name] = value

    def add_value_only_output(self, name: str, pcollection: PCollectionRef) -> OutputInfo:
        step = self._require_current()
        info = OutputInfo(
            user_name=f"{step.user_name}.{name}",
            output_name=name,
            encoding=value_only(pcollection.coder),
        )
        step.properties[name] = info
        self.register_output(pcollection, step.name, name)
        return info

    def add_encoding_input(self, coder: Coder) -> None:
        step = self._require_current()
        step.properties[PropertyNames.ENCODING] = value_only(coder)

    # -----------------------------
    # Bindings de coleções
    # -----------------------------
    def register_output(self, pcollection: PCollectionRef, step_name: str, output_name: str) -> None:
        if pcollection in self._producers:
            raise DuplicateOutputError(
                message=f"Collection '{pcollection.name}' already has a producing step",
                details={"collection": pcollection.name, "step_name": step_name},
            )
        self._producers[pcollection] = OutputReference(step_name=step_name, output_name=output_name)

    def is_produced(self, pcollection: PCollectionRef) -> bool:
        return pcollection in self._producers

    def as_output_reference(self, pcollection: PCollectionRef) -> OutputReference:
        ref = self._producers.get(pcollection)
        if ref is None:
            raise UnknownInputError(
                message=f"Collection '{pcollection.name}' was not produced by any translated step",
                details={"collection": pcollection.name},
                hint="Traduza o transform produtor antes do consumidor ou registre o output explicitamente.",
            )
        return ref

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, transform: str, level: str, message: str, **extra: Any) -> None:
        if not self.options.allows(level):
            return
        event = {
            "job_name": self.options.job_name,
            "transform": transform,
            "level": level.upper(),
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)
