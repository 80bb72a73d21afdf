# tests/core/pipeline/test_registry_dispatch.py
"""
Testes do TranslatorRegistry e do TranslationResult.

Os testes asseguram que:
- o dispatch é feito pela tag `TransformKind` do descritor
- exceções tipadas viram erros estruturados (sem Step emitido)
- registros duplicados e tipos desconhecidos são rejeitados
"""

import pytest

try:
    from dataflow_translator.core.errors import (
        TRANSLATION_DUPLICATE_OUTPUT,
        TRANSLATION_INVALID_SHARD_CONFIGURATION,
        TRANSLATION_INVALID_TRANSFORM,
        TRANSLATION_UNSUPPORTED_MODE,
        TRANSLATION_UNSUPPORTED_TRANSFORM,
    )
    from dataflow_translator.core.pipeline.registry import (
        DuplicateTranslatorError,
        TranslationResult,
        TranslatorRegistry,
        default_registry,
    )
    from dataflow_translator.core.pipeline.types import ReadTransform, StepKind, TransformKind
    from dataflow_translator.core.translators.text_io import ReadTranslator
except Exception as e:  # noqa: BLE001
    TranslatorRegistry = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing translator registry. Implement:\n"
            "- src/dataflow_translator/core/pipeline/registry.py (TranslatorRegistry, TranslationResult)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_default_registry_dispatches_read_and_write(ctx, read_transform, write_transform_factory):
    _require_imports()
    registry = default_registry()

    read = registry.translate(read_transform, ctx)
    write = registry.translate(write_transform_factory(), ctx)

    assert read.ok and write.ok
    assert read.unwrap().kind == StepKind.PARALLEL_READ
    assert write.unwrap().kind == StepKind.PARALLEL_WRITE
    assert set(registry.kinds()) == {TransformKind.TEXT_READ, TransformKind.TEXT_WRITE}


def test_validation_failure_becomes_error_result(streaming_ctx, read_transform):
    _require_imports()
    result = default_registry().translate(read_transform, streaming_ctx)

    assert not result.ok
    assert result.step is None
    assert result.error.type == TRANSLATION_UNSUPPORTED_MODE
    assert result.error.details["transform"] == "ReadLogs"
    assert streaming_ctx.steps == []
    with pytest.raises(RuntimeError):
        result.unwrap()


def test_error_payload_is_serializable(bound_ctx, write_transform_factory):
    _require_imports()
    result = default_registry().translate(write_transform_factory(num_shards=3), bound_ctx)

    payload = result.error.to_dict()
    assert payload["type"] == TRANSLATION_INVALID_SHARD_CONFIGURATION
    assert payload["details"]["num_shards"] == 3
    assert payload["hint"]


def test_unregistered_kind_is_an_error_result(ctx, read_transform):
    _require_imports()
    result = TranslatorRegistry().translate(read_transform, ctx)

    assert result.error.type == TRANSLATION_UNSUPPORTED_TRANSFORM
    assert ctx.steps == []


def test_duplicate_registration_raises():
    _require_imports()
    registry = TranslatorRegistry()
    registry.register(TransformKind.TEXT_READ, ReadTranslator())

    with pytest.raises(DuplicateTranslatorError):
        registry.register(TransformKind.TEXT_READ, ReadTranslator())


def test_translator_must_emit_exactly_one_step(ctx, read_transform):
    _require_imports()

    class _Silent:
        def translate(self, transform, ctx):
            return None

    registry = TranslatorRegistry()
    registry.register(TransformKind.TEXT_READ, _Silent())

    with pytest.raises(RuntimeError):
        registry.translate(read_transform, ctx)


def test_result_requires_exactly_one_outcome():
    _require_imports()
    with pytest.raises(ValueError):
        TranslationResult(transform="T")


def test_register_rejects_objects_without_translate():
    _require_imports()
    from dataflow_translator.core.translators.base import TransformTranslator

    assert isinstance(ReadTranslator(), TransformTranslator)
    with pytest.raises(TypeError):
        TranslatorRegistry().register(TransformKind.TEXT_READ, object())


def test_malformed_descriptors_become_error_results(bound_ctx, write_transform_factory):
    _require_imports()
    registry = default_registry()

    read = registry.translate(
        ReadTransform(name="ReadLogs", filepattern="gs://my-bucket/logs/*.txt", output="lines"),
        bound_ctx,
    )
    write = registry.translate(write_transform_factory(element_coder=None), bound_ctx)

    assert read.error.type == TRANSLATION_INVALID_TRANSFORM
    assert write.error.type == TRANSLATION_INVALID_TRANSFORM
    assert bound_ctx.steps == []


def test_second_producer_of_collection_is_an_error_result(ctx, read_transform):
    _require_imports()
    registry = default_registry()
    registry.translate(read_transform, ctx).unwrap()

    result = registry.translate(read_transform, ctx)

    assert result.error.type == TRANSLATION_DUPLICATE_OUTPUT
    assert result.error.details["collection"] == "lines"
    assert len(ctx.steps) == 1
