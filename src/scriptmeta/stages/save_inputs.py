"""
Stage: inputs.save
==================

Persiste o valor atual de cada input marcado como `persist=true`, para
que a próxima execução do script comece desse valor.

Roda por último na cadeia, depois de todos os Stages que populam ou
resolvem inputs, de modo que o valor salvo é o valor final da execução,
independentemente de ter vindo de preset, auto-fill, store ou default.

Regras:
- Efeito colateral apenas: nunca altera o Module
- Chave = `persistKey` do item, ou o nome do item
- Valores ausentes (None) não são salvos
- Valores que não são dados simples (ex.: instâncias de serviço) são
  ignorados com um evento de debug
- Sem store → no-op
"""

from __future__ import annotations

from typing import Optional

from scriptmeta.core.context import ScriptContext
from scriptmeta.core.pipeline.priority import Priority
from scriptmeta.core.script.item import ParameterItem
from scriptmeta.core.script.module import ScriptModule
from scriptmeta.persistence.prefs_store import ValueStore, to_storable


class SaveInputsStage:
    """Salva valores de inputs persistidos no store."""

    id = "inputs.save"
    priority = Priority.VERY_LOW - 1

    def __init__(self, ctx: ScriptContext, store: Optional[ValueStore] = None):
        self.ctx = ctx
        self.store = store

    def process(self, module: ScriptModule) -> None:
        if self.store is None:
            return

        for item in module.info.inputs():
            self._save_value(module, item)

    def _save_value(self, module: ScriptModule, item: ParameterItem) -> None:
        if not item.persisted:
            return

        value = module.get_input(item.name)
        if value is None:
            return
        if to_storable(value) is None:
            self.ctx.log(
                source=self.id,
                level="debug",
                message="value not persistable",
                input=item.name,
                value_type=type(value).__name__,
            )
            return

        self.store.save(item.get_persist_key(), value)
