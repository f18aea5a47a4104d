"""
Parameter Item: metadata de um input/output de script.

Um ParameterItem é criado uma única vez durante a extração de parâmetros
(ScriptInfo.parse_parameters) e não é alterado depois disso. O **valor**
de um parâmetro nunca vive no item: ele pertence ao ScriptModule da
execução corrente (ver `get_value` / `set_value`).

Componentes:
    - ItemIO         → direção do parâmetro (INPUT, OUTPUT, BOTH)
    - ItemVisibility → nível de visibilidade para UIs
    - ParameterItem  → registro mutável durante a construção

Invariantes:
    - `name` é único dentro de um ScriptInfo
    - min/max/default/choices são do mesmo tipo que `type`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from .module import ScriptModule


class ItemIO(str, Enum):
    """Direção de um parâmetro do script."""
    INPUT = "INPUT"
    OUTPUT = "OUTPUT"
    BOTH = "BOTH"


class ItemVisibility(str, Enum):
    """
    Visibilidade de um parâmetro.

    - NORMAL: exibido e persistido normalmente
    - TRANSIENT: exibido, mas não incluído em históricos
    - INVISIBLE: não exibido em UIs
    - MESSAGE: texto informativo, não é um valor editável
    """
    NORMAL = "NORMAL"
    TRANSIENT = "TRANSIENT"
    INVISIBLE = "INVISIBLE"
    MESSAGE = "MESSAGE"


@dataclass
class ParameterItem:
    """Metadata de um único input/output declarado no preâmbulo do script."""

    name: str
    type: type
    io_kind: ItemIO = ItemIO.INPUT

    label: Optional[str] = None
    description: Optional[str] = None
    visibility: ItemVisibility = ItemVisibility.NORMAL
    widget_style: Optional[str] = None
    column_count: Optional[int] = None
    callback: Optional[str] = None
    initializer: Optional[str] = None

    persisted: bool = True
    persist_key: Optional[str] = None
    required: bool = True
    autofill: bool = True

    default_value: Any = None
    minimum: Any = None
    soft_minimum: Any = None
    maximum: Any = None
    soft_maximum: Any = None
    step_size: Optional[float] = None
    choices: List[Any] = field(default_factory=list)

    def is_input(self) -> bool:
        return self.io_kind in (ItemIO.INPUT, ItemIO.BOTH)

    def is_output(self) -> bool:
        return self.io_kind in (ItemIO.OUTPUT, ItemIO.BOTH)

    def get_persist_key(self) -> str:
        return self.persist_key or self.name

    def get_value(self, module: "ScriptModule") -> Any:
        if self.is_input():
            return module.get_input(self.name)
        return module.get_output(self.name)

    def set_value(self, module: "ScriptModule", value: Any) -> None:
        if self.is_input():
            module.set_input(self.name, value)
        if self.is_output():
            module.set_output(self.name, value)
