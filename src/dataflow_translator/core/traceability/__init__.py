# src/dataflow_translator/core/traceability/__init__.py
"""
Descrição persistível do job traduzido.

API pública:
    - JobSpec   → job name + hash das opções + Steps no formato de fio
    - save_job  → persistência em JSON
    - load_job  → restauração do JSON
"""

from .job import JobSpec, load_job, save_job

__all__ = ["JobSpec", "load_job", "save_job"]
