"""
Parsing da cláusula de atributos de uma diretiva.

Uma diretiva pode carregar uma cláusula entre parênteses com pares
`key=value` separados por vírgula:

    // @int(min=1, max=10, label="Count") count
    // @String(choices={"red", "green"}) color

Este módulo contém as duas passadas de parsing textual:

    - parse_attrs   → texto entre parênteses → mapa key → value (str)
    - parse_choices → valor bruto de `choices` → lista ordenada tipada

Valores aceitos em parse_attrs:
    - string entre aspas duplas ou simples
    - lista entre chaves `{...}`
    - token nu (qualquer sequência sem espaço, vírgula, aspas, chaves,
      parênteses ou `=`), o que inclui números como `-1` e `0.5`

Limites explícitos:
    - Não conhece o vocabulário de chaves (ver directive.ATTRIBUTE_SETTERS)
    - Não converte valores, exceto em parse_choices via Converter
"""

from __future__ import annotations

import re
from typing import Any, Dict, List

from ..exceptions import DirectiveSyntaxError, DuplicateAttributeError, InvalidChoiceError
from .types import ConversionError, Converter


CHOICES_KEY = "choices"

_ATTR_PATTERN = re.compile(
    r"""([^,=\s]+)\s*=\s*("[^"]*"|'[^']*'|\{[^}]*\}|[^\s,=(){}"']+)"""
)
_SEPARATORS = re.compile(r"[\s,]*")
_CHOICE_PATTERN = re.compile(r"""("[^"]*"|'[^']*'|[^,\s{}]+)""")


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _check_gap(text: str, start: int, end: int) -> None:
    gap = text[start:end]
    if not _SEPARATORS.fullmatch(gap):
        raise DirectiveSyntaxError(
            f"Invalid attribute: {gap.strip(' ,')}",
            details={"attributes": text, "fragment": gap.strip()},
            hint="Use pares key=value separados por vírgula.",
        )


def parse_attrs(text: str) -> Dict[str, str]:
    """Converte a cláusula de atributos em um mapa key → value.

    A ordem das chaves no mapa segue a ordem no texto. Aspas externas são
    removidas de todos os valores, exceto de `choices`, cujo texto bruto é
    preservado para parse_choices.

    Raises:
        DirectiveSyntaxError: se houver texto que não forma um par key=value.
        DuplicateAttributeError: se uma chave (case-insensitive) se repetir.
    """
    attrs: Dict[str, str] = {}
    seen: Dict[str, str] = {}

    pos = 0
    for match in _ATTR_PATTERN.finditer(text):
        _check_gap(text, pos, match.start())
        pos = match.end()

        key, value = match.group(1), match.group(2)
        folded = key.lower()
        if folded in seen:
            raise DuplicateAttributeError(
                f"Duplicate key: {key}",
                details={"key": key, "attributes": text},
            )
        seen[folded] = key

        if folded != CHOICES_KEY:
            value = _strip_quotes(value)
        attrs[key] = value

    _check_gap(text, pos, len(text))
    return attrs


def parse_choices(raw: str, target: type, converter: Converter) -> List[Any]:
    """Converte o valor bruto de `choices` em uma lista ordenada de `target`.

    Aceita `{1, 2, 3}`, `{"a b", 'c'}` e também uma string única entre
    aspas contendo a lista (`"a,b"`).

    Raises:
        InvalidChoiceError: se algum token não converter para `target`.
    """
    body = raw.strip()
    if len(body) >= 2 and body[0] == body[-1] and body[0] in "\"'":
        body = body[1:-1]

    choices: List[Any] = []
    for match in _CHOICE_PATTERN.finditer(body):
        token = _strip_quotes(match.group(0))
        try:
            choices.append(converter.convert(token, target))
        except ConversionError as e:
            raise InvalidChoiceError(
                f"Invalid choice: {token}",
                details={
                    "choice": token,
                    "choices": raw,
                    "type": getattr(target, "__name__", str(target)),
                },
            ) from e
    return choices
