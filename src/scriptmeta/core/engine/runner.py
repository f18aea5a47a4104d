# src/scriptmeta/core/engine/runner.py
"""
Runner do pipeline de preparação de scripts.

Aplica uma lista de Stages a um ScriptModule, em ordem de prioridade
decrescente (ver planner.plan_stages).

Políticas:
    - Stage desabilitado em config (`stages.<id>.enabled: false`) → SKIPPED
    - Exceção em `process` → DECLINED; o erro vira ScriptErrorPayload,
      é registrado como warning no contexto e o runner **continua**
    - Cada Stage é aplicado no máximo uma vez por `run`

O runner não verifica inputs obrigatórios: essa checagem é feita pelo
engine de execução via `ScriptModule.check_required_inputs()` (ou pelo
atalho `prepare`).
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Set

from scriptmeta.core.context import ScriptContext
from scriptmeta.core.errors import payload_from_exception
from scriptmeta.core.pipeline.stage import Stage
from scriptmeta.core.pipeline.types import PipelineResult, StageResult, StageStatus
from scriptmeta.core.script.module import ScriptModule

from .planner import plan_stages


class PipelineRunner:
    """Runner canônico (planner + execução linear de Stages)."""

    def __init__(self, *, stages: Sequence[Stage], ctx: ScriptContext):
        self.stages: List[Stage] = plan_stages(stages)
        self.ctx = ctx

    def _is_enabled(self, stage_id: str) -> bool:
        stages_cfg = (self.ctx.config or {}).get("stages", {}) or {}
        stage_cfg = stages_cfg.get(stage_id, {}) or {}
        return bool(stage_cfg.get("enabled", True))

    @staticmethod
    def _resolved(module: ScriptModule) -> Set[str]:
        return {i.name for i in module.info.inputs() if module.is_input_resolved(i.name)}

    def run(self, module: ScriptModule) -> PipelineResult:
        results: Dict[str, StageResult] = {}

        for stage in self.stages:
            sid = stage.id

            if not self._is_enabled(sid):
                results[sid] = StageResult(
                    stage_id=sid,
                    priority=stage.priority,
                    status=StageStatus.SKIPPED,
                    summary="skipped by config",
                )
                continue

            before = self._resolved(module)
            try:
                stage.process(module)
            except Exception as e:
                error = payload_from_exception(e)
                self.ctx.add_warning(source=sid, message=f"stage declined: {error.message}")
                results[sid] = StageResult(
                    stage_id=sid,
                    priority=stage.priority,
                    status=StageStatus.DECLINED,
                    summary=error.message,
                    resolved=self._newly_resolved(module, before),
                    payload={"error": error.to_dict()},
                )
                continue

            newly = self._newly_resolved(module, before)
            results[sid] = StageResult(
                stage_id=sid,
                priority=stage.priority,
                status=StageStatus.SUCCESS,
                summary="ok",
                resolved=newly,
            )

        self.ctx.log(
            source=module.info.identifier,
            level="info",
            message="pipeline completed",
            order=list(results.keys()),
            unresolved=module.unresolved_inputs(),
        )
        return PipelineResult(stages=results)

    def prepare(self, module: ScriptModule, presets: Optional[Mapping[str, Any]] = None) -> PipelineResult:
        """Aplica presets, roda o pipeline e exige os inputs obrigatórios.

        Raises:
            UnresolvedInputError: se algum input obrigatório ficar pendente.
        """
        if presets:
            module.set_inputs(presets)
        result = self.run(module)
        module.check_required_inputs()
        return result

    def _newly_resolved(self, module: ScriptModule, before: Set[str]) -> List[str]:
        return [
            i.name for i in module.info.inputs()
            if module.is_input_resolved(i.name) and i.name not in before
        ]
