# src/dataflow_translator/core/pipeline/types.py
"""
Tipos canônicos da tradução de transforms em Steps.

Este módulo define os descritores declarativos de transforms de I/O de texto,
os handles lógicos de coleções e a estrutura do Step produzido para o
serviço de execução.

Componentes principais:
    - PCollectionRef   → handle lógico de dados (opaco para o tradutor)
    - TransformKind    → tag do sum type de transforms {Read, Write}
    - ReadTransform    → descritor de leitura de texto
    - WriteTransform   → descritor de escrita de texto
    - StepKind         → tag do Step ("ParallelRead" / "ParallelWrite")
    - OutputReference  → binding de input (Step produtor + nome do output)
    - OutputInfo       → binding de output value-only
    - Step             → mapa ordenado de propriedades + tag de tipo
    - PropertyNames    → nomes de propriedades do formato de fio

Princípios fundamentais:
    - Descritores são imutáveis e independentes de backend
    - Nomes de propriedades são bit-exatos com o intérprete do serviço
    - Nenhuma lógica de validação vive neste módulo

Limites explícitos:
    - Não traduz transforms
    - Não resolve localizações
    - Não realiza I/O
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List

from dataflow_translator.core.coders import Coder, StringUtf8Coder
from dataflow_translator.core.paths.gcs import GcsPath


class PropertyNames:
    """Nomes de propriedades reconhecidos pelo intérprete de Steps do serviço."""

    FORMAT = "format"
    FILEPATTERN = "filepattern"
    OUTPUT = "output"
    VALIDATE_SOURCE = "validateSource"
    PARALLEL_INPUT = "input"
    FILENAME_PREFIX = "filenamePrefix"
    SHARD_NAME_TEMPLATE = "shardNameTemplate"
    FILENAME_SUFFIX = "filenameSuffix"
    NUM_SHARDS = "numShards"
    ENCODING = "encoding"


class ShardNameTemplate:
    """Templates de nomes de shards conhecidos pelo SDK."""

    # Ex.: prefix-00001-of-00005.txt
    INDEX_OF_MAX = "-SSSSS-of-NNNNN"
    # Ex.: prefix/part-00001.txt
    DIRECTORY_CONTAINER = "/part-SSSSS"


class TransformKind(str, Enum):
    TEXT_READ = "TextIO.Read"
    TEXT_WRITE = "TextIO.Write"


class StepKind(str, Enum):
    PARALLEL_READ = "ParallelRead"
    PARALLEL_WRITE = "ParallelWrite"


@dataclass(frozen=True)
class PCollectionRef:
    """Handle lógico de uma coleção de elementos e seu coder."""

    name: str
    coder: Coder = StringUtf8Coder()


@dataclass(frozen=True)
class ReadTransform:
    """
    Descritor de leitura de texto.

    Campos:
        - name: nome completo do transform no grafo (user name do Step)
        - filepattern: localização independente de backend, com no máximo
          um segmento contendo wildcards
        - output: coleção produzida
        - needs_validation: se o serviço deve verificar a existência da
          fonte antes de agendar
    """

    kind: ClassVar[TransformKind] = TransformKind.TEXT_READ

    name: str
    filepattern: str
    output: PCollectionRef
    needs_validation: bool = True

    def inputs(self) -> List[PCollectionRef]:
        return []

    def outputs(self) -> List[PCollectionRef]:
        return [self.output]


@dataclass(frozen=True)
class WriteTransform:
    """
    Descritor de escrita de texto.

    Campos:
        - name: nome completo do transform no grafo (user name do Step)
        - filename_prefix: localização base dos arquivos de saída
        - input: coleção consumida
        - element_coder: coder canônico dos elementos escritos
        - shard_template: padrão de nomes dos shards
        - filename_suffix: sufixo de cada arquivo de shard
        - num_shards: 0 deixa o fan-out a critério do serviço

    Invariante: template vazio exige `num_shards <= 1` (validado na tradução).
    """

    kind: ClassVar[TransformKind] = TransformKind.TEXT_WRITE

    name: str
    filename_prefix: str
    input: PCollectionRef
    element_coder: Coder = StringUtf8Coder()
    shard_template: str = ShardNameTemplate.INDEX_OF_MAX
    filename_suffix: str = ""
    num_shards: int = 0

    def inputs(self) -> List[PCollectionRef]:
        return [self.input]

    def outputs(self) -> List[PCollectionRef]:
        return []


@dataclass(frozen=True)
class OutputReference:
    """Binding de input: aponta para o output de um Step já emitido."""

    step_name: str
    output_name: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "@type": "OutputReference",
            "step_name": self.step_name,
            "output_name": self.output_name,
        }


@dataclass(frozen=True)
class OutputInfo:
    """Binding de output value-only (sem chave nem janela)."""

    user_name: str
    output_name: str
    encoding: Coder

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_name": self.user_name,
            "output_name": self.output_name,
            "encoding": self.encoding.as_cloud_object(),
        }


def serialize_property(value: Any) -> Any:
    """Converte o valor de uma propriedade para sua forma no formato de fio."""
    if isinstance(value, GcsPath):
        return str(value)
    if isinstance(value, Coder):
        return value.as_cloud_object()
    if isinstance(value, (OutputReference, OutputInfo)):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    return value


@dataclass(frozen=True)
class Step:
    """
    Descrição normalizada de um transform, ingerível pelo serviço.

    `properties` preserva a ordem de escrita. Após o retorno do tradutor
    o Step pertence ao contexto e não é mais alterado.
    """

    name: str
    kind: StepKind
    user_name: str
    properties: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "properties": {
                "user_name": self.user_name,
                **{k: serialize_property(v) for k, v in self.properties.items()},
            },
        }
