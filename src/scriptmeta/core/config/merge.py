# src/scriptmeta/core/config/merge.py
"""
Deep-merge de configuração (defaults + override local).

Regras por chave (v1):
    - chave nova, base None ou override None → valor do override
    - dict sobre dict → merge recursivo
    - list → substituída inteira
    - escalares do mesmo tipo → override vence
    - tipos diferentes → ConfigTypeConflictError

Nenhum dos dicionários de entrada é mutado.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def _merge_value(key: str, current: Any, incoming: Any) -> Any:
    if current is None or incoming is None:
        return deepcopy(incoming)
    if isinstance(current, dict) and isinstance(incoming, dict):
        return deep_merge(current, incoming)
    if isinstance(incoming, list) or type(current) is type(incoming):
        return deepcopy(incoming)
    raise ConfigTypeConflictError(
        f"Tipos incompatíveis em '{key}': "
        f"{type(current).__name__} (base) x {type(incoming).__name__} (override)"
    )


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Retorna um novo dict com `override` aplicado sobre `base`."""
    if not (isinstance(base, dict) and isinstance(override, dict)):
        raise ConfigTypeConflictError(
            f"deep_merge espera dois dicts, recebeu "
            f"{type(base).__name__} e {type(override).__name__}"
        )

    merged = deepcopy(base)
    for key, incoming in override.items():
        merged[key] = _merge_value(key, merged.get(key), incoming) if key in merged else deepcopy(incoming)
    return merged
