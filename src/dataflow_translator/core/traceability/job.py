# src/dataflow_translator/core/traceability/job.py
"""
JobSpec — descrição serializável do job entregue ao serviço de execução.

O JobSpec consolida, de forma determinística:
    - o nome do job
    - o hash das opções efetivas usadas na tradução
    - os Steps emitidos, já no formato de fio (dicts ordenados)

Decisões arquiteturais:
    - O formato de persistência é JSON determinístico (UTF-8); a ordem das
      propriedades de cada Step é preservada, pois faz parte do formato de fio
    - A ordem dos Steps é a ordem de emissão no contexto
    - O JobSpec não é mutado após criado

Limites explícitos:
    - Não submete o job
    - Não valida Steps (já validados pelos tradutores)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from dataflow_translator.core.pipeline.context import TranslationContext


SCHEMA_VERSION = "1"


@dataclass(frozen=True)
class JobSpec:
    job_name: str
    options_hash: str
    steps: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_context(cls, ctx: TranslationContext) -> "JobSpec":
        return cls(
            job_name=ctx.options.job_name,
            options_hash=ctx.options.options_hash,
            steps=[step.to_dict() for step in ctx.steps],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": SCHEMA_VERSION,
            "job_name": self.job_name,
            "options_hash": self.options_hash,
            "steps": [dict(s) for s in self.steps],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JobSpec":
        if not isinstance(data, dict):
            raise ValueError("JobSpec payload must be a dict")
        version = data.get("schema_version")
        if version != SCHEMA_VERSION:
            raise ValueError(f"Unsupported JobSpec schema_version: {version!r}")
        steps = data.get("steps", [])
        if not isinstance(steps, list):
            raise ValueError("JobSpec 'steps' must be a list")
        return cls(
            job_name=str(data["job_name"]),
            options_hash=str(data["options_hash"]),
            steps=list(steps),
        )


def save_job(job: JobSpec, path: Path) -> None:
    """Persiste o JobSpec em JSON determinístico, criando diretórios pais."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(job.to_dict(), f, ensure_ascii=False, indent=2)
        f.write("\n")


def load_job(path: Path) -> JobSpec:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Job file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return JobSpec.from_dict(json.load(f))
