# src/dataflow_translator/core/config/__init__.py
"""
Camada de configuração do Dataflow Translator.

Este pacote carrega, mescla, identifica e interpreta as opções que governam
uma tradução (modo streaming, nome do job, política fail-fast e nível de log).

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução da configuração final via deep-merge determinístico
    - Interpretação tipada em `PipelineOptions`
    - Hash canônico para identificar o job produzido

Limites explícitos:
    - Não traduz transforms
    - Não interage com o serviço de execução
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidOptionError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_config
from .merge import deep_merge
from .options import PipelineOptions

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidOptionError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "PipelineOptions",
]
