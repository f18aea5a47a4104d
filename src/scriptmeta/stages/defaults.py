"""
Lista padrão de Stages.

A lista é construída explicitamente (sem descoberta de plugins). O store
de persistência vem do argumento `store` ou, se ausente, de
`persistence.path` na configuração do contexto.

Ordem efetiva (prioridade decrescente):
    service.autofill → inputs.load → inputs.validate
    → inputs.headless_harvest → inputs.save
"""

from __future__ import annotations

from typing import List, Optional

from scriptmeta.core.context import ScriptContext
from scriptmeta.core.pipeline.registry import StageRegistry
from scriptmeta.core.pipeline.stage import Stage
from scriptmeta.persistence.prefs_store import PrefsStore, ValueStore

from .headless_harvest import HeadlessHarvestStage
from .load_inputs import LoadInputsStage
from .save_inputs import SaveInputsStage
from .service_autofill import ServiceAutofillStage
from .validate_inputs import ValidateInputsStage


def build_default_stages(ctx: ScriptContext, store: Optional[ValueStore] = None) -> List[Stage]:
    if store is None:
        path = ((ctx.config or {}).get("persistence", {}) or {}).get("path")
        if path:
            store = PrefsStore(path=path)

    registry = StageRegistry()
    registry.extend(
        [
            ServiceAutofillStage(ctx),
            LoadInputsStage(ctx, store),
            ValidateInputsStage(ctx),
            HeadlessHarvestStage(ctx),
            SaveInputsStage(ctx, store),
        ]
    )
    return registry.list()
