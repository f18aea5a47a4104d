# src/scriptmeta/core/pipeline/registry.py
"""
Registro estrutural de Stages do pipeline.

O `StageRegistry` substitui qualquer descoberta dinâmica de plugins: a
lista de Stages é construída explicitamente (tipicamente uma vez, no
início do processo) e a ordem de registro é preservada, pois ela é o
critério de desempate entre Stages de mesma prioridade.

Invariantes:
    - Cada Stage registrado possui um `id` único e não vazio
    - A lista de Stages reflete exatamente a ordem de registro

Limites explícitos:
    - Não ordena por prioridade (ver core.engine.planner)
    - Não executa Stages
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .stage import Stage


class DuplicateStageIdError(ValueError):
    """Dois Stages com o mesmo `id` no mesmo registry."""


@dataclass
class StageRegistry:
    """Registro canônico de Stages, em ordem de registro."""

    _stages: Dict[str, Stage] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, stage: Stage) -> None:
        stage_id = getattr(stage, "id", None)
        if not isinstance(stage_id, str) or not stage_id.strip():
            raise ValueError("stage.id must be a non-empty string")

        if stage_id in self._stages:
            raise DuplicateStageIdError(f"Duplicate stage id: {stage_id}")

        self._stages[stage_id] = stage
        self._order.append(stage_id)

    def extend(self, stages: Iterable[Stage]) -> None:
        for stage in stages:
            self.add(stage)

    def get(self, stage_id: str) -> Stage:
        return self._stages[stage_id]

    def list(self) -> List[Stage]:
        return [self._stages[sid] for sid in self._order]
