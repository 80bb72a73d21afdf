# tests/core/pipeline/test_translation_context.py
"""
Testes do TranslationContext (Step Builder).

Os testes asseguram que:
- Steps são nomeados sequencialmente e preservam a ordem de escrita
- escrever propriedades sem Step corrente é um erro explícito
- bindings de coleções são únicos por coleção
- o log estruturado respeita o nível configurado
"""

import pytest

from dataflow_translator.core.coders import StringUtf8Coder, value_only
from dataflow_translator.core.config.options import PipelineOptions
from dataflow_translator.core.exceptions import DuplicateOutputError, UnknownInputError
from dataflow_translator.core.pipeline.context import TranslationContext
from dataflow_translator.core.pipeline.types import OutputReference, PCollectionRef, StepKind


def test_steps_are_named_sequentially(ctx, read_transform):
    first = ctx.add_step(read_transform, StepKind.PARALLEL_READ)
    second = ctx.add_step(read_transform, "ParallelWrite")

    assert [s.name for s in ctx.steps] == ["s1", "s2"]
    assert first.user_name == "ReadLogs"
    assert second.kind == StepKind.PARALLEL_WRITE


def test_properties_preserve_write_order(ctx, read_transform):
    ctx.add_step(read_transform, StepKind.PARALLEL_READ)
    ctx.add_input("z", 1)
    ctx.add_input("a", 2)
    ctx.add_input("m", 3)

    assert list(ctx.steps[0].properties) == ["z", "a", "m"]


def test_writing_without_current_step_raises(ctx):
    with pytest.raises(RuntimeError):
        ctx.add_input("format", "text")


def test_add_input_converts_collection_to_output_reference(ctx, read_transform, lines):
    ctx.register_output(lines, "s9", "out")
    ctx.add_step(read_transform, StepKind.PARALLEL_WRITE)
    ctx.add_input("input", lines)

    assert ctx.steps[0].properties["input"] == OutputReference("s9", "out")


def test_value_only_output_registers_producer(ctx, read_transform, lines):
    ctx.add_step(read_transform, StepKind.PARALLEL_READ)
    info = ctx.add_value_only_output("output", lines)

    assert info.user_name == "ReadLogs.output"
    assert info.encoding == value_only(StringUtf8Coder())
    assert ctx.is_produced(lines)
    assert ctx.as_output_reference(lines) == OutputReference("s1", "output")


def test_collection_cannot_have_two_producers(ctx, lines):
    ctx.register_output(lines, "s1", "out")

    with pytest.raises(DuplicateOutputError):
        ctx.register_output(lines, "s2", "out")


def test_unknown_collection_reference_raises(ctx):
    with pytest.raises(UnknownInputError) as exc_info:
        ctx.as_output_reference(PCollectionRef(name="nowhere"))

    assert exc_info.value.details == {"collection": "nowhere"}


def test_encoding_input_is_value_only(ctx, read_transform):
    ctx.add_step(read_transform, StepKind.PARALLEL_WRITE)
    ctx.add_encoding_input(StringUtf8Coder())

    assert ctx.steps[0].properties["encoding"] == value_only(StringUtf8Coder())


def test_is_streaming_reflects_options(ctx, streaming_ctx):
    assert ctx.is_streaming() is False
    assert streaming_ctx.is_streaming() is True


def test_log_filters_by_level():
    quiet = TranslationContext(options=PipelineOptions(log_level="WARNING"))
    quiet.log(transform="T", level="DEBUG", message="hidden")
    quiet.log(transform="T", level="error", message="shown", extra_field=1)

    assert len(quiet.events) == 1
    event = quiet.events[0]
    assert event["level"] == "ERROR"
    assert event["message"] == "shown"
    assert event["extra_field"] == 1
    assert event["job_name"] == "translation-job"
    assert "timestamp" in event


def test_step_to_dict_serializes_wire_values(ctx, read_transform):
    from dataflow_translator.core.translators.text_io import ReadTranslator

    ReadTranslator().translate(read_transform, ctx)

    assert ctx.steps[0].to_dict() == {
        "kind": "ParallelRead",
        "name": "s1",
        "properties": {
            "user_name": "ReadLogs",
            "format": "text",
            "filepattern": "gs://my-bucket/logs/2024-*.txt",
            "output": {
                "user_name": "ReadLogs.output",
                "output_name": "output",
                "encoding": {
                    "@type": "ValueOnlyWindowedValueCoder",
                    "is_wrapper": True,
                    "component_encodings": [{"@type": "StringUtf8Coder"}],
                },
            },
            "validateSource": True,
        },
    }
