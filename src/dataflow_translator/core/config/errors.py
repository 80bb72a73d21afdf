# src/dataflow_translator/core/config/errors.py
"""
Exceções da camada de configuração do Dataflow Translator.

As exceções aqui definidas representam falhas estruturais ao carregar,
mesclar ou interpretar as opções de tradução. São sempre fatais: nenhuma
tradução ocorre com configuração inválida.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de tradução de transform
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração.

    Permite captura genérica de erros de configuração e distinção clara
    entre falhas de opções e falhas de tradução (`TranslationException`).
    """


class DefaultsNotFoundError(ConfigError):
    """O arquivo de configuração base (defaults) não existe."""


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo não suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz da configuração não é um dicionário."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"pipeline": {"streaming": false}}
        - override: {"pipeline": "batch"}

    Nenhum merge parcial é produzido em caso de conflito.
    """


class InvalidOptionError(ConfigError):
    """
    Uma opção de pipeline possui tipo ou valor inválido.

    Exemplo:
        - pipeline.streaming: "yes"   (esperado bool)
        - engine.log_level: "TRACE"   (fora do conjunto aceito)
    """
