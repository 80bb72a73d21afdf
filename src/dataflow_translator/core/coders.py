"""
Coders de elementos e descritores canônicos de encoding.

O core de tradução não codifica nem decodifica elementos; ele apenas pede ao
coder um descritor canônico (cloud object) para embutir no Step. Este módulo
define o conjunto mínimo de coders necessário para descrever a representação
de texto e o wrapper value-only usado em outputs e encodings de escrita.

Formato do cloud object:
    - coders simples → {"@type": <encoding_id>}
    - wrappers       → {"@type": ..., "is_wrapper": True,
                        "component_encodings": [<cloud object do componente>]}

Invariantes:
    - Coders são imutáveis e comparáveis por valor
    - O mesmo coder sempre produz o mesmo cloud object
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict


@dataclass(frozen=True)
class Coder:
    """Base de coders; subclasses definem `encoding_id`."""

    encoding_id: ClassVar[str] = "Coder"

    def as_cloud_object(self) -> Dict[str, Any]:
        return {"@type": self.encoding_id}


@dataclass(frozen=True)
class StringUtf8Coder(Coder):
    """Linhas de texto em UTF-8 (coder padrão de TextIO)."""

    encoding_id: ClassVar[str] = "StringUtf8Coder"


@dataclass(frozen=True)
class ByteArrayCoder(Coder):
    encoding_id: ClassVar[str] = "ByteArrayCoder"


@dataclass(frozen=True)
class ValueOnlyWindowedValueCoder(Coder):
    """
    Encoding que carrega apenas o valor do elemento.

    Descarta timestamp, janelas e metadados de chave: no ponto de leitura
    ainda não existem, e no ponto de escrita já foram resolvidos upstream.
    """

    encoding_id: ClassVar[str] = "ValueOnlyWindowedValueCoder"

    value_coder: Coder = StringUtf8Coder()

    def as_cloud_object(self) -> Dict[str, Any]:
        return {
            "@type": self.encoding_id,
            "is_wrapper": True,
            "component_encodings": [self.value_coder.as_cloud_object()],
        }


def value_only(coder: Coder) -> ValueOnlyWindowedValueCoder:
    """Envolve `coder` em um encoding value-only."""
    if not isinstance(coder, Coder):
        raise TypeError(f"Expected a Coder, got {type(coder).__name__}")
    return ValueOnlyWindowedValueCoder(value_coder=coder)
