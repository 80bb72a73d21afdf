# tests/core/traceability/test_job_round_trip.py
"""
Testes de persistência do JobSpec (save → load).

Garante que:
- o JobSpec sobrevive ao round-trip em disco sem perda
- a ordem das propriedades de cada Step é preservada no arquivo
- payloads com schema_version desconhecido são rejeitados
"""

import json
from pathlib import Path

import pytest

from dataflow_translator.core.traceability.job import (
    SCHEMA_VERSION,
    JobSpec,
    load_job,
    save_job,
)


def _translated_job(ctx, read_transform, write_transform_factory) -> JobSpec:
    from dataflow_translator.core.pipeline.registry import default_registry

    registry = default_registry()
    registry.translate(read_transform, ctx).unwrap()
    registry.translate(write_transform_factory(), ctx).unwrap()
    return JobSpec.from_context(ctx)


def test_job_round_trip(tmp_path: Path, ctx, read_transform, write_transform_factory):
    job = _translated_job(ctx, read_transform, write_transform_factory)
    path = tmp_path / "jobs" / "job.json"

    save_job(job, path)
    loaded = load_job(path)

    assert loaded == job
    assert loaded.job_name == "test-job"
    assert len(loaded.steps) == 2


def test_property_order_is_preserved_on_disk(tmp_path: Path, ctx, read_transform, write_transform_factory):
    job = _translated_job(ctx, read_transform, write_transform_factory)
    path = tmp_path / "job.json"

    save_job(job, path)
    raw = json.loads(path.read_text(encoding="utf-8"))

    assert raw["schema_version"] == SCHEMA_VERSION
    assert list(raw["steps"][1]["properties"]) == [
        "user_name",
        "input",
        "format",
        "filenamePrefix",
        "shardNameTemplate",
        "filenameSuffix",
        "numShards",
        "encoding",
    ]


def test_unknown_schema_version_is_rejected():
    with pytest.raises(ValueError):
        JobSpec.from_dict({"schema_version": "0", "job_name": "j", "options_hash": "h", "steps": []})


def test_steps_must_be_a_list():
    with pytest.raises(ValueError):
        JobSpec.from_dict({"schema_version": SCHEMA_VERSION, "job_name": "j", "options_hash": "h", "steps": {}})


def test_load_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_job(tmp_path / "missing.json")
