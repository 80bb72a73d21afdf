# src/dataflow_translator/core/pipeline/__init__.py
"""
# Pipeline Core — Dataflow Translator

Este pacote define os **descritores de transforms**, o **Step** produzido
para o serviço de execução e o **contexto** onde Steps são construídos.

## Componentes

- **types**
  - `ReadTransform` / `WriteTransform`: descritores declarativos de TextIO
  - `PCollectionRef`: handle lógico de dados
  - `Step`, `StepKind`, `PropertyNames`: formato de fio do Step

- **context**
  - `TranslationContext`: Step Builder ordenado, log estruturado

- **registry**
  - `TranslatorRegistry`: dispatch por `TransformKind`
  - `TranslationResult`: Step emitido ou erro estruturado

## Invariantes

- Toda validação ocorre antes da primeira escrita no contexto
- Uma tradução bem-sucedida emite exatamente um Step
- Nenhum estado global: o contexto é sempre passado explicitamente
"""

from .context import TranslationContext
from .registry import (
    DuplicateTranslatorError,
    TranslationResult,
    TranslatorRegistry,
    default_registry,
)
from .types import (
    OutputInfo,
    OutputReference,
    PCollectionRef,
    PropertyNames,
    ReadTransform,
    ShardNameTemplate,
    Step,
    StepKind,
    TransformKind,
    WriteTransform,
)

__all__ = [
    "TranslationContext",
    "DuplicateTranslatorError",
    "TranslationResult",
    "TranslatorRegistry",
    "default_registry",
    "OutputInfo",
    "OutputReference",
    "PCollectionRef",
    "PropertyNames",
    "ReadTransform",
    "ShardNameTemplate",
    "Step",
    "StepKind",
    "TransformKind",
    "WriteTransform",
]
