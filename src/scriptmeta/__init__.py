# src/scriptmeta/__init__.py
"""
scriptmeta: metadata de parâmetros de scripts e pipeline de preparação.

Scripts declaram seus inputs/outputs em comentários no topo do arquivo:

    # @int(min=1, max=10, label="Count") count
    # @OUTPUT String message

O scriptmeta extrai essas declarações (ScriptInfo), liga-as a uma execução
concreta (ScriptModule) e aplica um pipeline ordenado de Stages que
resolve, popula, valida e persiste os valores antes da execução.

Fluxo:
    fonte → ScriptInfo → ParameterItems → ScriptModule
          → PipelineRunner (Stages por prioridade) → engine externo
"""

from .core.context import ScriptContext
from .core.engine.runner import PipelineRunner
from .core.script.info import ScriptInfo
from .core.script.item import ItemIO, ItemVisibility, ParameterItem
from .core.script.module import RETURN_VALUE, ScriptModule

__all__ = [
    "ScriptContext",
    "ScriptInfo",
    "ScriptModule",
    "ParameterItem",
    "ItemIO",
    "ItemVisibility",
    "PipelineRunner",
    "RETURN_VALUE",
]
