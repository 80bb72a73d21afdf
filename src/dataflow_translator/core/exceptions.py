"""
Dataflow Translator — Canonical Exceptions (v1)

Este módulo define as exceções tipadas da tradução de transforms em Steps.

Objetivo:
- Permitir que tradutores levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para TranslationErrorPayload
- Evitar ValueError/RuntimeError genéricos nos gates de validação

Regras:
- Todas as causas são erros estáticos de configuração (nunca transitórios).
- Exceções devem carregar apenas dados estruturados (serializáveis).
- Nenhuma exceção é tratada com retry ou fallback.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional


@dataclass(frozen=True, eq=False)
class TranslationException(Exception):
    """Base class para exceções de tradução.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - `code` é o identificador estável do erro (catálogo em core.errors)
    - Mensagem deve ser curta e humana
    """

    code: ClassVar[str] = "TRANSLATION_ERROR"

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Modo de execução
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class UnsupportedModeError(TranslationException):
    """Transform usado enquanto o pipeline roda em modo streaming."""

    code: ClassVar[str] = "TRANSLATION_UNSUPPORTED_MODE"


# ---------------------------------------------------------------------------
# Localizações
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class MalformedLocationError(TranslationException):
    """Filepattern/prefix não é uma localização de storage bem formada."""

    code: ClassVar[str] = "TRANSLATION_MALFORMED_LOCATION"


@dataclass(frozen=True, eq=False)
class UnsupportedPatternError(TranslationException):
    """Wildcard fora do último segmento do path (somente leitura)."""

    code: ClassVar[str] = "TRANSLATION_UNSUPPORTED_PATTERN"


# ---------------------------------------------------------------------------
# Sharding (somente escrita)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class UnsupportedShardTemplateError(TranslationException):
    """Shard template fora do conjunto reconhecido pelo serviço."""

    code: ClassVar[str] = "TRANSLATION_UNSUPPORTED_SHARD_TEMPLATE"


@dataclass(frozen=True, eq=False)
class InvalidShardConfigurationError(TranslationException):
    """Combinação inválida de shard template e número de shards."""

    code: ClassVar[str] = "TRANSLATION_INVALID_SHARD_CONFIGURATION"


# ---------------------------------------------------------------------------
# Grafo / dispatch
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class UnknownInputError(TranslationException):
    """Input do transform não foi produzido por nenhum Step do contexto."""

    code: ClassVar[str] = "TRANSLATION_UNKNOWN_INPUT"


@dataclass(frozen=True, eq=False)
class UnsupportedTransformError(TranslationException):
    """Nenhum tradutor registrado para o tipo do transform."""

    code: ClassVar[str] = "TRANSLATION_UNSUPPORTED_TRANSFORM"


@dataclass(frozen=True, eq=False)
class DuplicateOutputError(TranslationException):
    """Coleção de saída já possui um Step produtor no contexto."""

    code: ClassVar[str] = "TRANSLATION_DUPLICATE_OUTPUT"


# ---------------------------------------------------------------------------
# Descritores
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class InvalidTransformError(TranslationException):
    """Campo do descritor com tipo incompatível (coleção ou coder)."""

    code: ClassVar[str] = "TRANSLATION_INVALID_TRANSFORM"
