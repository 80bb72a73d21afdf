# src/dataflow_translator/core/translators/__init__.py
"""
Tradutores de transforms para Steps do serviço de execução.

- base    → `TransformTranslator` (Protocol)
- text_io → `ReadTranslator` (ParallelRead) e `WriteTranslator` (ParallelWrite)
"""

from .base import TransformTranslator
from .text_io import (
    SUPPORTED_SHARD_TEMPLATES,
    TEXT_FORMAT,
    ReadTranslator,
    WriteTranslator,
)

__all__ = [
    "TransformTranslator",
    "SUPPORTED_SHARD_TEMPLATES",
    "TEXT_FORMAT",
    "ReadTranslator",
    "WriteTranslator",
]
