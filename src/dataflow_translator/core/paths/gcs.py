"""
Validador de localizações de storage (GCS).

Este módulo resolve strings de localização independentes de backend em
paths nativos do backend (`GcsPath`) e certifica que eles são estruturalmente
admissíveis pelas regras do serviço de execução.

Regras do backend:
    - apenas o esquema `gs` é aceito (storage de esquema único)
    - o bucket segue a regra de nomes do storage
    - em padrões de leitura, todo wildcard deve ocorrer após o último `/`

Princípios fundamentais:
    - Validação puramente textual (expressões regulares)
    - Nenhuma consulta ao storage, nenhum I/O
    - Falhas são tipadas (`MalformedLocationError`)

Invariantes:
    - Um `GcsPath` válido sempre possui bucket não vazio
    - `str(GcsPath.from_uri(uri))` é a forma canônica de `uri`
    - O mesmo input sempre produz o mesmo resultado

Limites explícitos:
    - Não verifica existência de buckets ou objetos
    - Não expande wildcards
    - Não conhece outros esquemas (file://, s3://)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from dataflow_translator.core.exceptions import MalformedLocationError


GCS_SCHEME = "gs"

GCS_URI = re.compile(r"(?P<scheme>[^:/]+)://(?P<bucket>[^/]*)(?:/(?P<object>.*))?", re.DOTALL)

GCS_BUCKET_NAME = re.compile(r"[a-z0-9][-_.a-z0-9]{1,220}[a-z0-9]")

# Prefixo sem wildcards até o último '/', seguido de um segmento final livre de '/'.
GCS_READ_PATTERN = re.compile(r"(?P<prefix>[^*?\[]*/)?(?P<wildcard>[^/]*)", re.DOTALL)

# Porção do object anterior ao primeiro wildcard.
GLOB_PREFIX = re.compile(r"(?P<prefix>[^*?\[]*)[*?\[].*", re.DOTALL)


@dataclass(frozen=True)
class GcsPath:
    """
    Localização resolvida no storage do backend (scheme + bucket + object).

    Criada uma vez por chamada de tradução e descartada após a construção
    do Step; não possui identidade além do valor.
    """

    bucket: str
    object: str = ""

    @classmethod
    def from_uri(cls, uri: Any) -> "GcsPath":
        """
        Interpreta `gs://<bucket>[/<object>]` como GcsPath.

        Raises:
            MalformedLocationError: Se `uri` não for uma URI GCS bem formada.
        """
        if not isinstance(uri, str) or not uri:
            raise MalformedLocationError(
                message=f"Invalid GCS URI: {uri!r}",
                details={"location": uri if isinstance(uri, str) else repr(uri)},
                hint="Informe uma localização no formato gs://<bucket>/<object>.",
            )

        m = GCS_URI.fullmatch(uri)
        if m is None or m.group("scheme") != GCS_SCHEME:
            raise MalformedLocationError(
                message=f"Invalid GCS URI: {uri}",
                details={"location": uri, "expected_scheme": GCS_SCHEME},
                hint="Apenas paths gs:// são aceitos pelo serviço de execução.",
            )

        bucket = m.group("bucket")
        if not GCS_BUCKET_NAME.fullmatch(bucket):
            raise MalformedLocationError(
                message=f"Invalid GCS bucket name in URI: {uri}",
                details={"location": uri, "bucket": bucket},
                hint="Nomes de bucket usam apenas minúsculas, dígitos, '-', '_' e '.' (3 a 222 caracteres).",
            )

        obj = m.group("object") or ""
        if any(c in obj for c in "\r\n"):
            raise MalformedLocationError(
                message=f"Invalid GCS object name in URI: {uri!r}",
                details={"location": uri},
                hint="Nomes de objeto não podem conter quebras de linha.",
            )

        return cls(bucket=bucket, object=obj)

    @property
    def prefix(self) -> str:
        """Porção do object anterior ao primeiro wildcard (o object inteiro se não houver)."""
        m = GLOB_PREFIX.fullmatch(self.object)
        return m.group("prefix") if m else self.object

    def __str__(self) -> str:
        return f"{GCS_SCHEME}://{self.bucket}/{self.object}"


def resolve(location: Any) -> GcsPath:
    """Resolve uma string de localização em GcsPath (ver `GcsPath.from_uri`)."""
    return GcsPath.from_uri(location)


def has_wildcard_after_last_delimiter(path: GcsPath) -> bool:
    """
    Indica se todos os wildcards do object ocorrem após o último '/'.

    O agendador de leitura paralela do serviço particiona o trabalho por
    prefixos delimitados por '/', então só suporta fan-out confinado ao
    último segmento. Um object sem wildcards é trivialmente válido.
    """
    return GCS_READ_PATTERN.fullmatch(path.object) is not None
