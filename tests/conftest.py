# tests/conftest.py
"""
Fixtures compartilhados para testes do Dataflow Translator.

Este módulo define fixtures reutilizáveis que fornecem:
- YAMLs de configuração (defaults + override local) como strings
- opções de pipeline em modo batch e streaming
- contextos de tradução isolados (um por teste)
- coleções lógicas e descritores de leitura/escrita canônicos

Invariantes:
    - Nenhuma fixture realiza I/O (arquivos ficam a cargo de `tmp_path`)
    - Cada teste recebe um TranslationContext novo
    - Imports do core são feitos de forma lazy para deixar falhas de
      import legíveis no teste que as provoca
"""

import pytest


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de defaults semelhante a um `translator.defaults.yaml` real.

    Returns:
        str: Conteúdo YAML das opções base.
    """
    return """\
pipeline:
  streaming: false
  job_name: nightly-logs
engine:
  fail_fast: true
  log_level: INFO
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """YAML de override local (apenas as chaves alteradas)."""
    return """\
engine:
  fail_fast: false
  log_level: DEBUG
"""


# =====================================================
# Translation fixtures
# =====================================================

@pytest.fixture
def batch_options():
    from dataflow_translator.core.config.options import PipelineOptions

    return PipelineOptions(streaming=False, job_name="test-job", log_level="DEBUG")


@pytest.fixture
def streaming_options():
    from dataflow_translator.core.config.options import PipelineOptions

    return PipelineOptions(streaming=True, job_name="test-job")


@pytest.fixture
def ctx(batch_options):
    """TranslationContext novo, em modo batch."""
    from dataflow_translator.core.pipeline.context import TranslationContext

    return TranslationContext(options=batch_options)


@pytest.fixture
def streaming_ctx(streaming_options):
    from dataflow_translator.core.pipeline.context import TranslationContext

    return TranslationContext(options=streaming_options)


@pytest.fixture
def lines():
    """Coleção lógica de linhas de texto (StringUtf8Coder)."""
    from dataflow_translator.core.pipeline.types import PCollectionRef

    return PCollectionRef(name="lines")


@pytest.fixture
def read_transform(lines):
    from dataflow_translator.core.pipeline.types import ReadTransform

    return ReadTransform(
        name="ReadLogs",
        filepattern="gs://my-bucket/logs/2024-*.txt",
        output=lines,
        needs_validation=True,
    )


@pytest.fixture
def write_transform_factory(lines):
    """
    Factory de WriteTransform com defaults canônicos.

    Os testes sobrescrevem apenas os campos relevantes ao cenário.
    """
    from dataflow_translator.core.pipeline.types import WriteTransform

    def _make(**overrides):
        fields = {
            "name": "WriteLogs",
            "filename_prefix": "gs://out/run",
            "input": lines,
            "shard_template": "",
            "filename_suffix": ".txt",
            "num_shards": 1,
        }
        fields.update(overrides)
        return WriteTransform(**fields)

    return _make


@pytest.fixture
def bound_ctx(ctx, lines):
    """Contexto onde `lines` já foi produzida por um Step externo (s0)."""
    ctx.register_output(lines, "s0", "out")
    return ctx
