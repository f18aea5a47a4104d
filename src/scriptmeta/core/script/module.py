"""
ScriptModule: ligação entre um ScriptInfo e os valores de uma execução.

Um ScriptModule pertence exclusivamente à execução que o criou. Ele guarda:
    - o mapa nome → valor atual de inputs e outputs
    - o mapa nome → resolvido (bool) dos inputs

Estados de um input:
    - ausente:     sem valor no mapa
    - populado:    com valor, ainda não confirmado (não resolvido)
    - resolvido:   valor final para esta execução

Contrato com os Stages (cooperativo, não imposto em runtime):
    - Nenhum Stage "desresolve" um input resolvido por outro Stage
    - Stages ignoram inputs já resolvidos

Contrato com o engine de execução:
    - `check_required_inputs()` deve passar antes da execução começar
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping

from ..exceptions import UnresolvedInputError

if TYPE_CHECKING:
    from .info import ScriptInfo


# Nome reservado para o valor retornado pelo próprio script.
RETURN_VALUE = "result"


class ScriptModule:
    """Valores de inputs/outputs de uma execução de script."""

    def __init__(self, info: "ScriptInfo"):
        self.info = info
        self._inputs: Dict[str, Any] = {}
        self._outputs: Dict[str, Any] = {}
        self._resolved: Dict[str, bool] = {}

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------
    def get_input(self, name: str) -> Any:
        self._require_input(name)
        return self._inputs.get(name)

    def get_inputs(self) -> Dict[str, Any]:
        return dict(self._inputs)

    def has_input_value(self, name: str) -> bool:
        self._require_input(name)
        return name in self._inputs

    def set_input(self, name: str, value: Any) -> None:
        self._require_input(name)
        self._inputs[name] = value

    def set_inputs(self, presets: Mapping[str, Any]) -> None:
        """Define e resolve valores fornecidos pelo chamador (presets)."""
        for name, value in presets.items():
            self.set_input(name, value)
            self.resolve_input(name)

    def clear_input(self, name: str) -> None:
        self._require_input(name)
        if self.is_input_resolved(name):
            raise ValueError(f"input already resolved: {name}")
        self._inputs.pop(name, None)

    def resolve_input(self, name: str) -> None:
        self._require_input(name)
        self._resolved[name] = True

    def is_input_resolved(self, name: str) -> bool:
        self._require_input(name)
        return self._resolved.get(name, False)

    def unresolved_inputs(self) -> List[str]:
        return [i.name for i in self.info.inputs() if not self.is_input_resolved(i.name)]

    def check_required_inputs(self) -> None:
        """Falha se algum input obrigatório não estiver resolvido.

        Raises:
            UnresolvedInputError: com a lista de inputs pendentes em details.
        """
        pending = [
            i.name for i in self.info.inputs()
            if i.required and not self.is_input_resolved(i.name)
        ]
        if pending:
            raise UnresolvedInputError(
                f"Unresolved required input(s): {', '.join(pending)}",
                details={"script": self.info.identifier, "inputs": pending},
                hint="Forneça presets ou habilite um Stage que resolva esses inputs.",
            )

    # ------------------------------------------------------------------
    # Outputs
    # ------------------------------------------------------------------
    def get_output(self, name: str) -> Any:
        self._require_output(name)
        return self._outputs.get(name)

    def get_outputs(self) -> Dict[str, Any]:
        return dict(self._outputs)

    def set_output(self, name: str, value: Any) -> None:
        self._require_output(name)
        self._outputs[name] = value

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _require_input(self, name: str) -> None:
        if self.info.get_input(name) is None:
            raise KeyError(name)

    def _require_output(self, name: str) -> None:
        if self.info.get_output(name) is None:
            raise KeyError(name)
