"""
Stage: inputs.headless_harvest
==============================

Substituto não interativo do harvester de UI: aceita como final o valor
já populado de cada input pendente.

Regras:
- Input pendente com valor → resolvido
- Input pendente sem valor → continua pendente (o engine decide se é
  obrigatório via `check_required_inputs`)
- Roda depois de load/validate e antes da persistência
"""

from __future__ import annotations

from scriptmeta.core.context import ScriptContext
from scriptmeta.core.pipeline.priority import Priority
from scriptmeta.core.script.module import ScriptModule


class HeadlessHarvestStage:
    """Resolve inputs pendentes que já possuem valor."""

    id = "inputs.headless_harvest"
    priority = Priority.VERY_LOW

    def __init__(self, ctx: ScriptContext):
        self.ctx = ctx

    def process(self, module: ScriptModule) -> None:
        pending = []
        for item in module.info.inputs():
            if module.is_input_resolved(item.name):
                continue
            if module.has_input_value(item.name):
                module.resolve_input(item.name)
            else:
                pending.append(item.name)

        if pending:
            self.ctx.log(source=self.id, level="info", message="inputs left pending", inputs=pending)
