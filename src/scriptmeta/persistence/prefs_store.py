"""Persistência de valores de inputs entre execuções (v1).

Inputs marcados como `persist=true` têm seu último valor salvo, de modo
que a próxima execução do mesmo script comece do valor anterior. Este
módulo implementa Stores minimalistas, sem acoplamento com o runner.

Decisões (v1):
- Formato: YAML (mapa plano chave → valor)
- A chave é `ParameterItem.get_persist_key()` (persistKey ou o nome)
- Apenas dados simples são aceitos (str, int, float, bool, listas deles)
- Cada `save` reescreve o arquivo inteiro

Limites explícitos:
- Não conhece ScriptModule nem ParameterItem
- Não converte valores de volta para o tipo do item (ver LoadInputsStage)
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePath
from typing import Any, Dict, List, Optional, Protocol, Union, runtime_checkable

import yaml


_SCALARS = (str, int, float, bool)


def to_storable(value: Any) -> Optional[Any]:
    """Retorna a forma persistível de `value`, ou None se não for dado simples."""
    if type(value) in _SCALARS:
        return value
    if isinstance(value, Enum):
        return to_storable(value.value)
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, (list, tuple)):
        items = [to_storable(v) for v in value]
        if all(type(v) in _SCALARS for v in items):
            return items
    return None


@runtime_checkable
class ValueStore(Protocol):
    """Contrato mínimo de um store de valores persistidos."""

    def load(self, key: str, default: Any = None) -> Any:
        ...

    def save(self, key: str, value: Any) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class MemoryPrefsStore:
    """Store em memória (testes e execuções efêmeras)."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(initial or {})

    def load(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def save(self, key: str, value: Any) -> None:
        storable = to_storable(value)
        if storable is None:
            raise TypeError(f"value for {key!r} is not persistable: {type(value).__name__}")
        self._values[key] = storable

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._values.keys())


class PrefsStore:
    """Store canônica (v1) em arquivo YAML."""

    def __init__(self, *, path: Union[str, Path]):
        self.path = Path(path)

    # ------------------------------------------------------------------
    # Load / Save
    # ------------------------------------------------------------------
    def load(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def save(self, key: str, value: Any) -> None:
        storable = to_storable(value)
        if storable is None:
            raise TypeError(f"value for {key!r} is not persistable: {type(value).__name__}")
        data = self._read()
        data[key] = storable
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def keys(self) -> List[str]:
        return list(self._read().keys())

    # ------------------------------------------------------------------
    # Arquivo
    # ------------------------------------------------------------------
    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"prefs root must be a mapping: {self.path}")
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=True, allow_unicode=True)


__all__ = ["PrefsStore", "MemoryPrefsStore", "ValueStore", "to_storable"]
