# src/dataflow_translator/core/engine/planner.py
"""
Planejador da ordem de tradução (DAG de transforms).

As dependências não são declaradas: são derivadas dos dados. Um transform
depende do transform que produz cada uma das coleções que ele consome.

Decisões arquiteturais:
    - Ordenação topológica determinística (Kahn modificado)
    - Empates são resolvidos por ordem lexicográfica de `transform.name`
    - Erros estruturais são fatais e ocorrem antes de qualquer tradução

Invariantes:
    - Nenhum transform aparece antes do produtor de seus inputs
    - Todos os transforms aparecem exatamente uma vez
    - A mesma entrada sempre produz a mesma ordem

Limites explícitos:
    - Não traduz transforms
    - Não interage com TranslationContext
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Set


class UnknownDependencyError(ValueError):
    """Um transform consome uma coleção que nenhum transform do grafo produz."""


class CycleDetectedError(ValueError):
    """O grafo de dependências entre transforms contém um ciclo."""


def transform_dependencies(transforms: Iterable[Any]) -> Dict[str, List[str]]:
    """
    Deriva, para cada transform, os nomes dos transforms dos quais depende.

    Raises:
        ValueError: Se algum transform possuir nome inválido ou duplicado,
            ou se uma coleção possuir mais de um produtor.
        UnknownDependencyError: Se um input não for produzido no grafo.
    """
    by_name: Dict[str, Any] = {}
    for t in transforms:
        name = getattr(t, "name", None)
        if not isinstance(name, str) or not name.strip():
            raise ValueError("transform.name must be a non-empty string")
        if name in by_name:
            raise ValueError(f"Duplicate transform name: {name}")
        by_name[name] = t

    producer_of: Dict[Any, str] = {}
    for name, t in by_name.items():
        for pc in t.outputs():
            if pc in producer_of:
                raise ValueError(
                    f"Collection '{pc.name}' is produced by both '{producer_of[pc]}' and '{name}'"
                )
            producer_of[pc] = name

    deps: Dict[str, List[str]] = {}
    for name, t in by_name.items():
        d: List[str] = []
        for pc in t.inputs():
            if pc not in producer_of:
                raise UnknownDependencyError(
                    f"Transform '{name}' consumes unknown collection '{pc.name}'"
                )
            if producer_of[pc] not in d:
                d.append(producer_of[pc])
        deps[name] = d
    return deps


def plan_translation(transforms: Iterable[Any]) -> List[Any]:
    """
    Valida o grafo e produz a ordem de tradução.

    Args:
        transforms (Iterable[Any]): Descritores de transforms do pipeline.

    Returns:
        List[Any]: Descritores em ordem topológica determinística.

    Raises:
        ValueError: Nomes inválidos/duplicados ou coleção com dois produtores.
        UnknownDependencyError: Input sem produtor no grafo.
        CycleDetectedError: Ciclo no grafo de dependências.
    """
    transform_list = list(transforms)
    deps = transform_dependencies(transform_list)
    by_name = {t.name: t for t in transform_list}

    incoming_count: Dict[str, int] = {name: len(d) for name, d in deps.items()}
    outgoing: Dict[str, Set[str]] = {name: set() for name in deps}
    for name, dlist in deps.items():
        for dep in dlist:
            outgoing[dep].add(name)

    ready: List[str] = sorted(name for name, c in incoming_count.items() if c == 0)
    order: List[str] = []

    while ready:
        name = ready.pop(0)
        order.append(name)
        for child in sorted(outgoing[name]):
            incoming_count[child] -= 1
            if incoming_count[child] == 0:
                ready.append(child)
                ready.sort()

    if len(order) != len(by_name):
        raise CycleDetectedError("Cycle detected in transform dependency graph")

    return [by_name[name] for name in order]
