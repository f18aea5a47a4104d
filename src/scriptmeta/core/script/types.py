"""
Resolução de tipos e conversão de valores textuais.

O parser de diretivas não conhece tipos concretos: ele recebe nomes de tipo
(`int`, `String`, `pathlib.Path`) e valores textuais (`"10"`, `"true"`) e
delega a resolução/conversão a duas capacidades externas:

    - TypeLookup → nome textual de tipo → classe Python
    - Converter  → valor (normalmente str) → instância do tipo alvo

Este módulo define os protocolos dessas capacidades e as implementações
padrão usadas pelo ScriptContext quando nenhuma outra é injetada.

Limites explícitos:
    - Não valida semântica de domínio (min/max, choices)
    - Não registra eventos; falhas são comunicadas via exceção/None
"""

from __future__ import annotations

import importlib
from enum import Enum
from pathlib import Path, PurePath
from typing import Any, Dict, Optional, Protocol, runtime_checkable


class ConversionError(ValueError):
    """Valor não pode ser convertido para o tipo alvo."""


@runtime_checkable
class TypeLookup(Protocol):
    """Capacidade de resolver um nome textual de tipo para uma classe."""

    def lookup(self, name: str) -> Optional[type]:
        """Retorna a classe correspondente ou None quando não há match."""
        ...


@runtime_checkable
class Converter(Protocol):
    """Capacidade de converter valores para um tipo alvo."""

    def convert(self, value: Any, target: type) -> Any:
        """Converte `value` para `target` ou levanta ConversionError."""
        ...


# Aliases aceitos em preâmbulos de script (estilo Java e estilo Python).
_TYPE_ALIASES: Dict[str, type] = {
    "int": int,
    "Integer": int,
    "long": int,
    "Long": int,
    "short": int,
    "Short": int,
    "byte": int,
    "Byte": int,
    "float": float,
    "Float": float,
    "double": float,
    "Double": float,
    "Number": float,
    "bool": bool,
    "boolean": bool,
    "Boolean": bool,
    "str": str,
    "String": str,
    "char": str,
    "Character": str,
    "object": object,
    "Object": object,
    "File": Path,
    "Path": Path,
    "list": list,
    "dict": dict,
}

_TRUE_TOKENS = {"true", "yes", "on", "1"}
_FALSE_TOKENS = {"false", "no", "off", "0"}


class DefaultTypeLookup:
    """TypeLookup padrão: aliases, tipos registrados e caminhos pontuados.

    Ordem de resolução:
        1. tipos registrados explicitamente via `register`
        2. aliases conhecidos (`int`, `String`, `File`, ...)
        3. caminho pontuado importável (`pathlib.Path`)
        4. alias do nome simples de um caminho pontuado (`java.lang.String`)

    O passo 3 importa o módulo nomeado no preâmbulo, com os efeitos
    colaterais de import desse módulo. Caminhos com segmentos que não são
    identificadores (`.Foo`, `a..B`, `1x.Y`) não são importados.
    """

    def __init__(self) -> None:
        self._registered: Dict[str, type] = {}

    def register(self, name: str, cls: type) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("type name must be a non-empty string")
        self._registered[name] = cls

    def lookup(self, name: str) -> Optional[type]:
        if name in self._registered:
            return self._registered[name]
        if name in _TYPE_ALIASES:
            return _TYPE_ALIASES[name]
        if "." not in name:
            return None

        module_name, _, attr = name.rpartition(".")
        if not all(part.isidentifier() for part in name.split(".")):
            return None
        try:
            module = importlib.import_module(module_name)
        except (ImportError, ValueError):
            module = None
        if module is not None:
            found = getattr(module, attr, None)
            if isinstance(found, type):
                return found

        return self._registered.get(attr) or _TYPE_ALIASES.get(attr)


class DefaultConverter:
    """Converter padrão para os tipos que aparecem em diretivas.

    Regras:
        - `object` (ou instância já do tipo alvo) → valor inalterado
        - bool aceita true/false, yes/no, on/off, 1/0 (case-insensitive)
        - Enum aceita o nome do membro (case-insensitive) ou o valor
        - Demais tipos são construídos a partir do valor (`int("3")`)
    """

    def convert(self, value: Any, target: type) -> Any:
        if target is None or target is object:
            return value

        if isinstance(value, target) and not (target is int and isinstance(value, bool)):
            return value

        if isinstance(target, type) and issubclass(target, Enum):
            return self._to_enum(value, target)

        if target is bool:
            return self._to_bool(value)

        if isinstance(value, str) and target in (int, float):
            value = value.strip()

        if isinstance(target, type) and issubclass(target, PurePath) and not isinstance(value, (str, PurePath)):
            raise ConversionError(f"cannot convert {value!r} to {target.__name__}")

        try:
            return target(value)
        except (TypeError, ValueError) as e:
            raise ConversionError(f"cannot convert {value!r} to {getattr(target, '__name__', target)}") from e

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _to_bool(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return bool(value)
        text = str(value).strip().lower()
        if text in _TRUE_TOKENS:
            return True
        if text in _FALSE_TOKENS:
            return False
        raise ConversionError(f"cannot convert {value!r} to bool")

    def _to_enum(self, value: Any, target: type) -> Any:
        if isinstance(value, target):
            return value
        text = str(value).strip()
        for member in target:
            if member.name.lower() == text.lower():
                return member
        for member in target:
            if str(member.value) == text:
                return member
        raise ConversionError(f"cannot convert {value!r} to {target.__name__}")
