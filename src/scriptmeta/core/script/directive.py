"""
Parser de uma linha de diretiva.

Recebe o texto que segue o marcador `@` e produz um ParameterItem
completamente populado. Sintaxes aceitas:

    <type> <name>
    <type>(<attrs>) <name>
    <ioKind> <type> <name>
    <ioKind>(<attrs>) <type> <name>

onde `<ioKind>` é INPUT, OUTPUT ou BOTH e `<attrs>` segue attributes.parse_attrs.

A aplicação de atributos usa uma tabela fechada (ATTRIBUTE_SETTERS) de
chave → setter tipado. Chaves fora da tabela são erro fatal.

Limites explícitos:
    - Não registra o item no ScriptInfo (responsabilidade do extrator)
    - Não lê a fonte do script
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..exceptions import DirectiveSyntaxError, UnknownAttributeError, UnknownTypeError
from .attributes import parse_attrs, parse_choices
from .item import ItemIO, ItemVisibility, ParameterItem
from .types import ConversionError, Converter, TypeLookup


_WHITESPACE = re.compile(r"[ \t\n]+")

# Assinatura dos avisos não fatais: (item, mensagem).
WarningSink = Callable[[ParameterItem, str], None]


@dataclass(frozen=True)
class ParsedDirective:
    """Resultado do parsing de uma diretiva."""

    item: ParameterItem
    var_name: str


class DirectiveParser:
    """Converte o texto de uma diretiva em ParameterItem."""

    def __init__(
        self,
        *,
        type_lookup: TypeLookup,
        converter: Converter,
        on_warning: Optional[WarningSink] = None,
    ):
        self.type_lookup = type_lookup
        self.converter = converter
        self.on_warning = on_warning

    def parse(self, directive: str) -> ParsedDirective:
        """Faz o parsing de uma diretiva (texto após o `@`).

        Raises:
            DirectiveSyntaxError: tokens insuficientes ou atributos malformados.
            DuplicateAttributeError: chave repetida na cláusula.
            UnknownTypeError: nome de tipo não resolvido.
            UnknownAttributeError: chave fora do vocabulário.
            InvalidChoiceError: token de choices não conversível.
        """
        l_paren = directive.find("(")
        r_paren = directive.rfind(")")
        if r_paren < l_paren:
            raise self._invalid(directive)

        if l_paren < 0:
            words, attrs = directive, {}
        else:
            words = directive[:l_paren] + " " + directive[r_paren + 1:]
            attrs = parse_attrs(directive[l_paren + 1:r_paren])

        tokens = [t for t in _WHITESPACE.split(words.strip()) if t]
        if not tokens:
            raise self._invalid(directive)

        io_kind = self._io_kind(tokens[0])
        if io_kind is not None:
            if len(tokens) < 3:
                raise self._invalid(directive)
            # o ioKind posicional prevalece sobre um `type=` na cláusula
            attrs = {k: v for k, v in attrs.items() if k.lower() != "type"}
            attrs["type"] = io_kind.value
            type_name, var_name = tokens[1], tokens[2]
        else:
            if len(tokens) < 2:
                raise self._invalid(directive)
            type_name, var_name = tokens[0], tokens[1]

        cls = self.type_lookup.lookup(type_name)
        if cls is None:
            raise UnknownTypeError(
                f"Unknown type: {type_name}",
                details={"type": type_name, "directive": directive.strip()},
                hint="Use um tipo conhecido ou registre-o no TypeLookup do contexto.",
            )

        item = ParameterItem(name=var_name, type=cls)
        for key, value in attrs.items():
            self.assign(item, key, value)
        return ParsedDirective(item=item, var_name=var_name)

    def assign(self, item: ParameterItem, key: str, value: str) -> None:
        """Aplica um atributo ao item via ATTRIBUTE_SETTERS."""
        setter = ATTRIBUTE_SETTERS.get(key.lower())
        if setter is None:
            raise UnknownAttributeError(
                f"Invalid attribute name: {key}",
                details={"key": key, "item": item.name},
                hint="Chaves válidas: " + ", ".join(sorted(ATTRIBUTE_NAMES)),
            )
        setter(self, item, value)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def convert(self, item: ParameterItem, key: str, value: str, target: type) -> Any:
        try:
            return self.converter.convert(value, target)
        except ConversionError as e:
            raise DirectiveSyntaxError(
                f"Invalid value for attribute {key}: {value}",
                details={"key": key, "value": value, "item": item.name},
            ) from e

    def warn(self, item: ParameterItem, message: str) -> None:
        if self.on_warning is not None:
            self.on_warning(item, message)

    def _io_kind(self, token: str) -> Optional[ItemIO]:
        try:
            return self.converter.convert(token, ItemIO)
        except ConversionError:
            return None

    @staticmethod
    def _invalid(directive: str) -> DirectiveSyntaxError:
        return DirectiveSyntaxError(
            f"Invalid parameter: {directive.strip()}",
            details={"directive": directive.strip()},
            hint="Sintaxe: [INPUT|OUTPUT|BOTH] <type>[(<attrs>)] <name>",
        )


# ---------------------------------------------------------------------------
# Setters (tabela fechada de atributos)
# ---------------------------------------------------------------------------

def _set_callback(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.callback = value


def _set_choices(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.choices = parse_choices(value, item.type, p.converter)


def _set_columns(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.column_count = p.convert(item, "columns", value, int)


def _set_description(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.description = value


def _set_initializer(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.initializer = value


def _set_io_kind(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.io_kind = p.convert(item, "type", value, ItemIO)


def _set_label(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.label = value


def _set_max(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.maximum = p.convert(item, "max", value, item.type)


def _set_min(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.minimum = p.convert(item, "min", value, item.type)


def _set_name(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.name = value


def _set_persist(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.persisted = p.convert(item, "persist", value, bool)


def _set_persist_key(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.persist_key = value


def _set_required(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.required = p.convert(item, "required", value, bool)


def _set_soft_max(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.soft_maximum = p.convert(item, "softMax", value, item.type)


def _set_soft_min(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.soft_minimum = p.convert(item, "softMin", value, item.type)


def _set_step_size(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    try:
        item.step_size = float(value)
    except ValueError:
        p.warn(item, f"Script parameter {item.name} has an invalid stepSize: {value}")


def _set_style(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.widget_style = value


def _set_visibility(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.visibility = p.convert(item, "visibility", value, ItemVisibility)


def _set_value(p: DirectiveParser, item: ParameterItem, value: str) -> None:
    item.default_value = p.convert(item, "value", value, item.type)


Setter = Callable[[DirectiveParser, ParameterItem, str], None]

# Chaves em minúsculas; o lookup é case-insensitive.
ATTRIBUTE_SETTERS: Dict[str, Setter] = {
    "callback": _set_callback,
    "choices": _set_choices,
    "columns": _set_columns,
    "description": _set_description,
    "initializer": _set_initializer,
    "type": _set_io_kind,
    "label": _set_label,
    "max": _set_max,
    "min": _set_min,
    "name": _set_name,
    "persist": _set_persist,
    "persistkey": _set_persist_key,
    "required": _set_required,
    "softmax": _set_soft_max,
    "softmin": _set_soft_min,
    "stepsize": _set_step_size,
    "style": _set_style,
    "visibility": _set_visibility,
    "value": _set_value,
}

ATTRIBUTE_NAMES = (
    "callback", "choices", "columns", "description", "initializer", "type",
    "label", "max", "min", "name", "persist", "persistKey", "required",
    "softMax", "softMin", "stepSize", "style", "visibility", "value",
)
