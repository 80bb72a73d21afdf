# src/dataflow_translator/core/config/options.py
"""
Opções de pipeline consumidas pela tradução.

Este módulo interpreta a configuração efetiva (dict) e produz um objeto
`PipelineOptions` imutável, com tipos verificados.

Chaves reconhecidas (v1):
    pipeline.streaming  → bool  (default: false)
    pipeline.job_name   → str   (default: "translation-job")
    engine.fail_fast    → bool  (default: true)
    engine.log_level    → DEBUG | INFO | WARNING | ERROR (default: INFO)

Chaves desconhecidas são preservadas em `raw` e participam do hash, mas não
alteram o comportamento da tradução.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidOptionError
from .hashing import compute_config_hash


LOG_LEVELS: Dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
}

DEFAULT_JOB_NAME = "translation-job"


def _section(cfg: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = cfg.get(name, {})
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidOptionError(
            f"Seção '{name}' deve ser dict, recebido: {type(value).__name__}"
        )
    return value


def _typed(section: Mapping[str, Any], key: str, expected: type, default: Any, path: str) -> Any:
    value = section.get(key, default)
    if value is None:
        return default
    # bool é subclasse de int; aqui os tipos precisam bater exatamente
    if type(value) is not expected:
        raise InvalidOptionError(
            f"Opção '{path}' deve ser {expected.__name__}, recebido: {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class PipelineOptions:
    """Opções efetivas de uma tradução."""

    streaming: bool = False
    job_name: str = DEFAULT_JOB_NAME
    fail_fast: bool = True
    log_level: str = "INFO"
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.log_level not in LOG_LEVELS:
            raise InvalidOptionError(
                f"Opção 'engine.log_level' inválida: {self.log_level!r} "
                f"(aceitos: {', '.join(LOG_LEVELS)})"
            )
        if not self.job_name.strip():
            raise InvalidOptionError("Opção 'pipeline.job_name' não pode ser vazia")

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, Any]] = None) -> "PipelineOptions":
        cfg = dict(config or {})
        pipeline = _section(cfg, "pipeline")
        engine = _section(cfg, "engine")

        level = _typed(engine, "log_level", str, "INFO", "engine.log_level")

        return cls(
            streaming=_typed(pipeline, "streaming", bool, False, "pipeline.streaming"),
            job_name=_typed(pipeline, "job_name", str, DEFAULT_JOB_NAME, "pipeline.job_name"),
            fail_fast=_typed(engine, "fail_fast", bool, True, "engine.fail_fast"),
            log_level=level.upper(),
            raw=cfg,
        )

    @property
    def options_hash(self) -> str:
        return compute_config_hash(self.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        effective = dict(self.raw)
        effective["pipeline"] = {
            **dict(_section(self.raw, "pipeline")),
            "streaming": self.streaming,
            "job_name": self.job_name,
        }
        effective["engine"] = {
            **dict(_section(self.raw, "engine")),
            "fail_fast": self.fail_fast,
            "log_level": self.log_level,
        }
        return effective

    def allows(self, level: str) -> bool:
        """Indica se eventos de `level` devem ser registrados."""
        return LOG_LEVELS.get(level.upper(), 0) >= LOG_LEVELS[self.log_level]
