"""
Stage: inputs.load
==================

Popula inputs ainda vazios com o último valor persistido ou, na falta
dele, com o valor default declarado na diretiva (`value=`).

Regras:
- Nunca toca inputs resolvidos ou que já possuem valor
- Nunca resolve: o valor carregado é apenas uma proposta
- Valor persistido só é usado se o item tiver `persisted=True`
- Valor persistido é convertido para o tipo do item; se a conversão
  falhar, um warning é registrado e o default é usado
- Sem store → apenas defaults
"""

from __future__ import annotations

from typing import Any, Optional

from scriptmeta.core.context import ScriptContext
from scriptmeta.core.pipeline.priority import Priority
from scriptmeta.core.script.item import ParameterItem
from scriptmeta.core.script.module import ScriptModule
from scriptmeta.core.script.types import ConversionError
from scriptmeta.persistence.prefs_store import ValueStore


class LoadInputsStage:
    """Popula inputs com valores persistidos ou defaults declarados."""

    id = "inputs.load"
    priority = Priority.HIGH

    def __init__(self, ctx: ScriptContext, store: Optional[ValueStore] = None):
        self.ctx = ctx
        self.store = store

    def process(self, module: ScriptModule) -> None:
        for item in module.info.inputs():
            if module.is_input_resolved(item.name) or module.has_input_value(item.name):
                continue

            value = self._stored_value(item)
            if value is None:
                value = item.default_value
            if value is not None:
                module.set_input(item.name, value)

    def _stored_value(self, item: ParameterItem) -> Any:
        if self.store is None or not item.persisted:
            return None

        stored = self.store.load(item.get_persist_key())
        if stored is None:
            return None
        try:
            return self.ctx.converter.convert(stored, item.type)
        except ConversionError:
            self.ctx.add_warning(
                source=self.id,
                message=f"ignoring persisted value for {item.name}: {stored!r}",
            )
            return None
