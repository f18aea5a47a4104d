# src/scriptmeta/core/pipeline/types.py
"""
Tipos canônicos do pipeline de preparação de scripts.

Componentes principais:
    - StageStatus → enum de estados finais (SUCCESS, SKIPPED, DECLINED)
    - StageResult → resultado imutável de um Stage para um Module
    - PipelineResult → resultados agregados, na ordem de execução

Invariantes:
    - Enums possuem valores textuais canônicos
    - StageResult é imutável
    - Tipos não dependem do runner
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class StageStatus(str, Enum):
    """
    Estados finais possíveis de um Stage.

    - SUCCESS: `process` terminou sem erro
    - SKIPPED: Stage desabilitado por configuração
    - DECLINED: `process` levantou exceção; o Stage é tratado como no-op
      e o pipeline continua
    """
    SUCCESS = "success"
    SKIPPED = "skipped"
    DECLINED = "declined"


@dataclass(frozen=True)
class StageResult:
    """
    Resultado imutável da aplicação de um Stage.

    Campos:
        - stage_id: identificador do Stage
        - priority: prioridade efetiva usada no planejamento
        - status: estado final
        - summary: resumo textual
        - resolved: inputs que passaram a resolvidos durante este Stage
        - payload: dados adicionais (ex.: `error` quando DECLINED)
    """
    stage_id: str
    priority: float
    status: StageStatus
    summary: str
    resolved: List[str] = field(default_factory=list)
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class PipelineResult:
    """Resultado agregado de uma execução do pipeline (ordem de execução preservada)."""

    stages: Dict[str, StageResult] = field(default_factory=dict)

    def order(self) -> List[str]:
        return list(self.stages.keys())
