"""
Stage: inputs.validate
======================

Confere os valores populados contra as restrições declaradas na diretiva
(`min`, `max`, `choices`).

Regras:
- Cada violação gera um warning no contexto (não fatal)
- Valor violador de um input **não resolvido** é removido do Module,
  para que nenhum Stage posterior o aceite
- Inputs resolvidos nunca são alterados (apenas warning)
- Comparações impossíveis entre tipos são ignoradas
"""

from __future__ import annotations

from typing import Any, List

from scriptmeta.core.context import ScriptContext
from scriptmeta.core.pipeline.priority import Priority
from scriptmeta.core.script.item import ParameterItem
from scriptmeta.core.script.module import ScriptModule


class ValidateInputsStage:
    """Valida inputs populados contra min/max/choices."""

    id = "inputs.validate"
    priority = Priority.LOW

    def __init__(self, ctx: ScriptContext):
        self.ctx = ctx

    def process(self, module: ScriptModule) -> None:
        for item in module.info.inputs():
            if not module.has_input_value(item.name):
                continue

            problems = self.violations(item, module.get_input(item.name))
            for problem in problems:
                self.ctx.add_warning(source=self.id, message=f"{item.name}: {problem}")

            if problems and not module.is_input_resolved(item.name):
                module.clear_input(item.name)

    @staticmethod
    def violations(item: ParameterItem, value: Any) -> List[str]:
        problems: List[str] = []
        if value is None:
            return problems

        if item.choices and value not in item.choices:
            problems.append(f"{value!r} is not one of {item.choices!r}")

        try:
            if item.minimum is not None and value < item.minimum:
                problems.append(f"{value!r} is below the minimum {item.minimum!r}")
            if item.maximum is not None and value > item.maximum:
                problems.append(f"{value!r} is above the maximum {item.maximum!r}")
        except TypeError:
            pass

        return problems
