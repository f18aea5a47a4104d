# src/scriptmeta/core/engine/planner.py
"""
Planejador de execução de Stages.

Produz a ordem linear em que os Stages são aplicados a um Module.

Política de ordenação (v1):
    - prioridade decrescente (maior valor roda antes)
    - empate → ordem de registro (ordenação estável)

Validações estruturais (falhas fatais, antes de qualquer execução):
    - `id` não vazio e único
    - `priority` numérica (int/float, não bool) e não NaN
    - `process` chamável

Invariantes:
    - Todos os Stages válidos aparecem exatamente uma vez
    - A mesma lista de entrada produz sempre a mesma ordem
"""

from __future__ import annotations

import math
from typing import Iterable, List, Set

from scriptmeta.core.pipeline.stage import Stage


class InvalidStageError(ValueError):
    """Stage estruturalmente inválido para planejamento."""


def _validate(stage: Stage, seen: Set[str]) -> None:
    stage_id = getattr(stage, "id", None)
    if not isinstance(stage_id, str) or not stage_id.strip():
        raise InvalidStageError("stage.id must be a non-empty string")
    if stage_id in seen:
        raise InvalidStageError(f"Duplicate stage id: {stage_id}")

    priority = getattr(stage, "priority", None)
    if isinstance(priority, bool) or not isinstance(priority, (int, float)) or math.isnan(priority):
        raise InvalidStageError(f"stage {stage_id} has an invalid priority: {priority!r}")

    if not callable(getattr(stage, "process", None)):
        raise InvalidStageError(f"stage {stage_id} does not define process(module)")


def plan_stages(stages: Iterable[Stage]) -> List[Stage]:
    """Valida e ordena Stages por prioridade decrescente (estável)."""
    listed = list(stages)
    seen: Set[str] = set()
    for stage in listed:
        _validate(stage, seen)
        seen.add(stage.id)

    return sorted(listed, key=lambda s: -float(s.priority))
