# src/dataflow_translator/core/paths/__init__.py
"""
Resolução e validação de localizações de storage.

API pública:
    - GcsPath                            → localização resolvida (bucket + object)
    - resolve                            → string de localização → GcsPath
    - has_wildcard_after_last_delimiter  → gate de wildcards para leitura paralela

Nenhuma função deste pacote realiza I/O.
"""

from .gcs import (
    GCS_READ_PATTERN,
    GcsPath,
    has_wildcard_after_last_delimiter,
    resolve,
)

__all__ = [
    "GCS_READ_PATTERN",
    "GcsPath",
    "has_wildcard_after_last_delimiter",
    "resolve",
]
