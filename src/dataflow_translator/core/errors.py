"""
Dataflow Translator — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros da tradução.
Erros de tradução são artefatos de domínio e fazem parte do contrato com o
orquestrador, devendo ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Todo erro aqui descrito é uma falha fatal de pré-submissão: nada é agendado
para execução quando qualquer transform falha na tradução.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import TranslationException


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TranslationErrorPayload:
    """
    Payload canônico de erro de tradução.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Modo / localização
TRANSLATION_UNSUPPORTED_MODE = "TRANSLATION_UNSUPPORTED_MODE"
TRANSLATION_MALFORMED_LOCATION = "TRANSLATION_MALFORMED_LOCATION"
TRANSLATION_UNSUPPORTED_PATTERN = "TRANSLATION_UNSUPPORTED_PATTERN"

# Sharding
TRANSLATION_UNSUPPORTED_SHARD_TEMPLATE = "TRANSLATION_UNSUPPORTED_SHARD_TEMPLATE"
TRANSLATION_INVALID_SHARD_CONFIGURATION = "TRANSLATION_INVALID_SHARD_CONFIGURATION"

# Grafo / dispatch
TRANSLATION_UNKNOWN_INPUT = "TRANSLATION_UNKNOWN_INPUT"
TRANSLATION_UNSUPPORTED_TRANSFORM = "TRANSLATION_UNSUPPORTED_TRANSFORM"
TRANSLATION_DUPLICATE_OUTPUT = "TRANSLATION_DUPLICATE_OUTPUT"

# Descritores
TRANSLATION_INVALID_TRANSFORM = "TRANSLATION_INVALID_TRANSFORM"

# Orquestração
TRANSLATION_SKIPPED_DEPENDENCY = "TRANSLATION_SKIPPED_DEPENDENCY"


# ---------------------------------------------------------------------------
# Mapeamento exceção -> payload
# ---------------------------------------------------------------------------

def exception_to_error(exc: TranslationException) -> TranslationErrorPayload:
    """Converte uma exceção tipada em TranslationErrorPayload.

    O código vem do atributo de classe `code`, não do nome da classe,
    para que renomeações internas não quebrem consumidores do payload.
    """
    return TranslationErrorPayload(
        type=exc.code,
        message=str(exc) or "Erro de tradução",
        details=dict(exc.details or {}),
        hint=exc.hint,
    )


def skipped_dependency(*, transform: str, failed: str) -> TranslationErrorPayload:
    return TranslationErrorPayload(
        type=TRANSLATION_SKIPPED_DEPENDENCY,
        message="Transform not translated because an upstream transform failed",
        details={
            "transform": transform,
            "failed_dependency": failed,
        },
        hint="Corrija o transform upstream e traduza o pipeline novamente.",
    )
