# src/dataflow_translator/core/__init__.py
"""
Core do Dataflow Translator.

Componentes principais:
    - paths        → resolução e validação de localizações gs://
    - coders       → descritores canônicos de encoding (value-only)
    - pipeline     → descritores de transforms, Step, contexto e registry
    - translators  → tradutores de leitura e escrita de texto
    - config       → opções de tradução (YAML/JSON, merge, hashing)
    - engine       → planejamento e orquestração da tradução de um pipeline
    - traceability → JobSpec serializável

Princípios fundamentais:
    - Tradução é síncrona, sem I/O e sem estado compartilhado
    - Toda validação precede a primeira escrita de um Step
    - Erros são tipados e fatais antes da submissão
"""
