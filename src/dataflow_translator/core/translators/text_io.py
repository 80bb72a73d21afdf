# src/dataflow_translator/core/translators/text_io.py
"""
Tradução de transforms TextIO para o serviço de execução.

Leitura → Step "ParallelRead":
    format, filepattern, output (value-only), validateSource

Escrita → Step "ParallelWrite":
    input, format, filenamePrefix, shardNameTemplate, filenameSuffix,
    numShards (apenas se > 0), encoding (value-only)

Gates de validação (todos antes de qualquer escrita):
    - modo streaming não é suportado
    - apenas localizações gs:// bem formadas
    - leitura: wildcards confinados ao último segmento do path
    - escrita: shard template ∈ {INDEX_OF_MAX, ""}; "" exige num_shards <= 1
    - coleções são PCollectionRef, cada uma com um único produtor, e o
      coder de escrita é um Coder

A ordem das propriedades é parte do formato de fio e não deve mudar.
"""

from __future__ import annotations

from dataflow_translator.core.coders import Coder
from dataflow_translator.core.exceptions import (
    DuplicateOutputError,
    InvalidShardConfigurationError,
    InvalidTransformError,
    UnsupportedModeError,
    UnsupportedPatternError,
    UnsupportedShardTemplateError,
)
from dataflow_translator.core.paths.gcs import has_wildcard_after_last_delimiter, resolve
from dataflow_translator.core.pipeline.context import TranslationContext
from dataflow_translator.core.pipeline.types import (
    PCollectionRef,
    PropertyNames,
    ReadTransform,
    ShardNameTemplate,
    StepKind,
    WriteTransform,
)


TEXT_FORMAT = "text"

SUPPORTED_SHARD_TEMPLATES = (ShardNameTemplate.INDEX_OF_MAX, "")


def _check_batch_mode(ctx: TranslationContext, transform_name: str) -> None:
    if ctx.is_streaming():
        raise UnsupportedModeError(
            message="TextIO not supported in streaming mode.",
            details={"transform": transform_name, "streaming": True},
            hint="Execute o pipeline em modo batch (pipeline.streaming: false).",
        )


def _check_collection(transform_name: str, field_name: str, value: object) -> None:
    if not isinstance(value, PCollectionRef):
        raise InvalidTransformError(
            message=f"Field '{field_name}' must be a collection reference, got {type(value).__name__}",
            details={"transform": transform_name, "field": field_name, "type": type(value).__name__},
            hint="Use PCollectionRef para inputs e outputs de transforms.",
        )


class ReadTranslator:
    """Traduz `ReadTransform` em um Step ParallelRead."""

    def translate(self, transform: ReadTransform, ctx: TranslationContext) -> None:
        _check_batch_mode(ctx, transform.name)

        path = resolve(transform.filepattern)
        # O serviço exige que o primeiro wildcard ocorra após o último '/'.
        if not has_wildcard_after_last_delimiter(path):
            raise UnsupportedPatternError(
                message=(
                    f'Unsupported wildcard usage in "{path}": '
                    "all wildcards must occur after the final '/' delimiter."
                ),
                details={
                    "transform": transform.name,
                    "filepattern": transform.filepattern,
                    "prefix": path.prefix,
                },
                hint="Mova os wildcards para o último segmento do path.",
            )

        _check_collection(transform.name, "output", transform.output)
        if ctx.is_produced(transform.output):
            raise DuplicateOutputError(
                message=f"Collection '{transform.output.name}' already has a producing step",
                details={"transform": transform.name, "collection": transform.output.name},
                hint="Cada coleção deve ser produzida por um único transform.",
            )

        step = ctx.add_step(transform, StepKind.PARALLEL_READ)
        ctx.add_input(PropertyNames.FORMAT, TEXT_FORMAT)
        ctx.add_input(PropertyNames.FILEPATTERN, path)
        ctx.add_value_only_output(PropertyNames.OUTPUT, transform.output)
        ctx.add_input(PropertyNames.VALIDATE_SOURCE, bool(transform.needs_validation))

        ctx.log(
            transform=transform.name,
            level="DEBUG",
            message="translated",
            step_name=step.name,
            step_kind=step.kind.value,
        )


class WriteTranslator:
    """Traduz `WriteTransform` em um Step ParallelWrite."""

    def translate(self, transform: WriteTransform, ctx: TranslationContext) -> None:
        _check_batch_mode(ctx, transform.name)

        path = resolve(transform.filename_prefix)
        _check_collection(transform.name, "input", transform.input)
        input_ref = ctx.as_output_reference(transform.input)
        self._check_sharding(transform)
        if not isinstance(transform.element_coder, Coder):
            raise InvalidTransformError(
                message=f"Element coder must be a Coder, got {type(transform.element_coder).__name__}",
                details={"transform": transform.name, "field": "element_coder"},
                hint="Informe um coder concreto, p.ex. StringUtf8Coder().",
            )

        step = ctx.add_step(transform, StepKind.PARALLEL_WRITE)
        ctx.add_input(PropertyNames.PARALLEL_INPUT, input_ref)
        ctx.add_input(PropertyNames.FORMAT, TEXT_FORMAT)
        ctx.add_input(PropertyNames.FILENAME_PREFIX, path)
        ctx.add_input(PropertyNames.SHARD_NAME_TEMPLATE, transform.shard_template)
        ctx.add_input(PropertyNames.FILENAME_SUFFIX, transform.filename_suffix)
        # Ausência de numShards significa fan-out escolhido pelo serviço.
        if transform.num_shards > 0:
            ctx.add_input(PropertyNames.NUM_SHARDS, transform.num_shards)
        ctx.add_encoding_input(transform.element_coder)

        ctx.log(
            transform=transform.name,
            level="DEBUG",
            message="translated",
            step_name=step.name,
            step_kind=step.kind.value,
        )

    @staticmethod
    def _check_sharding(transform: WriteTransform) -> None:
        num_shards = transform.num_shards
        if isinstance(num_shards, bool) or not isinstance(num_shards, int) or num_shards < 0:
            raise InvalidShardConfigurationError(
                message=f"Num shards must be a non-negative integer, got {num_shards!r}",
                details={"transform": transform.name, "num_shards": repr(num_shards)},
                hint="Use 0 para deixar o serviço escolher o número de shards.",
            )

        template = transform.shard_template
        if template == ShardNameTemplate.INDEX_OF_MAX:
            return
        if template == "":
            # Template vazio não distingue shards: força saída única.
            if num_shards > 1:
                raise InvalidShardConfigurationError(
                    message="Num shards must be <= 1 when using an empty sharding template",
                    details={"transform": transform.name, "num_shards": num_shards},
                    hint="Use num_shards 0 ou 1, ou o template '-SSSSS-of-NNNNN'.",
                )
            return
        # TODO: aceitar outros templates quando o serviço suportá-los.
        raise UnsupportedShardTemplateError(
            message=f"Shard template {template} not yet supported by Dataflow service",
            details={
                "transform": transform.name,
                "shard_template": template,
                "supported": list(SUPPORTED_SHARD_TEMPLATES),
            },
            hint="Use '-SSSSS-of-NNNNN' ou o template vazio.",
        )
