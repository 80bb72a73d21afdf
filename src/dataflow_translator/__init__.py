# src/dataflow_translator/__init__.py
"""
Dataflow Translator — tradução de transforms de I/O de texto em Steps.

Este pacote converte descritores declarativos e independentes de backend
(leitura de fonte de texto, escrita em destino de texto) na representação
normalizada de "Step" consumida pelo serviço distribuído de execução de
pipelines.

Princípios centrais:
    - A tradução é uma função pura de (descritor, contexto)
    - Restrições do backend são gates de validação explícitos
    - O formato do Step (nomes, tipos e ordem das propriedades) é bit-exato

Arquitetura em alto nível:
    - core.paths        → validação de localizações gs://
    - core.pipeline     → descritores, Step, TranslationContext e registry
    - core.translators  → ReadTranslator / WriteTranslator
    - core.engine       → ordem de tradução e política fail-fast
    - core.traceability → JobSpec persistível

Limites explícitos:
    - Não lê nem escreve dados no storage
    - Não submete nem executa jobs
    - Não aplica retry ou otimização de plano
"""

from .core.config import PipelineOptions, load_config
from .core.engine import PipelineTranslator
from .core.pipeline import (
    PCollectionRef,
    ReadTransform,
    TranslationContext,
    WriteTransform,
    default_registry,
)

__all__ = [
    "PipelineOptions",
    "load_config",
    "PipelineTranslator",
    "PCollectionRef",
    "ReadTransform",
    "TranslationContext",
    "WriteTransform",
    "default_registry",
]
