"""
ScriptInfo: metadata de parâmetros extraída do preâmbulo de um script.

Scripts declaram inputs e outputs em linhas de comentário no topo do
arquivo, em um formato inspirado em anotações de parâmetro:

    // @<type> <varName>
    // @<type>(<attr1>=<value1>, ..., <attrN>=<valueN>) <varName>
    // @<IOType> <type> <varName>
    // @<IOType>(<attr1>=<value1>, ..., <attrN>=<valueN>) <type> <varName>

onde `//` é o marcador de comentário da linguagem do script (qualquer
sequência de caracteres não-palavra serve: `#`, `//`, `%`, `--`).

Exemplos:
    # @Dataset dataset
    # @double(type=OUTPUT) result
    # @BOTH ImageDisplay display
    # @INPUT(persist=false, visibility=INVISIBLE) boolean verbose

Regra de varredura (heurística, preservada como está):
    - linha casando `^[^\\w]*@` → diretiva (texto após o primeiro `@`)
    - linha com qualquer caractere de palavra fora desse padrão → fim do
      preâmbulo, a varredura para
    - demais linhas (vazias, só comentário) são ignoradas

Limitações conhecidas da heurística:
    - uma linha de código que começa com `@` (decorators em Python) é
      tratada como diretiva
    - marcadores de comentário com letras (`REM`, `rem`) encerram o preâmbulo

Cache de parsing:
    - `ensure_parsed()` faz o parsing apenas se o cache estiver inválido
    - `invalidate()` marca o cache como inválido
    - `parse_parameters()` sempre reconstrói a lista do zero
    - Acessores (`inputs()`, `outputs()`, ...) chamam `ensure_parsed()`

Falhas de leitura ou de parsing nunca sobem para o chamador: são
registradas no ScriptContext e em `last_error`, e a lista parcial de itens
coletados até a falha é mantida.
"""

from __future__ import annotations

import io
import re
from pathlib import Path
from typing import Dict, Iterator, List, Optional, TextIO

from ..context import ScriptContext
from ..errors import ScriptErrorPayload, payload_from_exception, source_read_error
from ..exceptions import DirectiveSyntaxError, ScriptException, SourceReadError
from .directive import DirectiveParser
from .item import ItemIO, ParameterItem
from .module import RETURN_VALUE, ScriptModule
from .version import compute_version


_DIRECTIVE_LINE = re.compile(r"[^\w]*@")
_WORD = re.compile(r"\w")


class ScriptInfo:
    """Metadata sobre um script: caminho, conteúdo e parâmetros declarados."""

    def __init__(
        self,
        ctx: ScriptContext,
        path: str,
        reader: Optional[TextIO] = None,
    ):
        self.ctx = ctx
        self.path = str(path)

        self._content: Optional[str] = None
        if reader is not None:
            try:
                self._content = reader.read()
            except (OSError, UnicodeDecodeError) as e:
                self.ctx.log(
                    source=self.identifier,
                    level="error",
                    message=f"Error reading script: {self.path}",
                    error=source_read_error(path=self.path, reason=str(e)).to_dict(),
                )

        self._inputs: Dict[str, ParameterItem] = {}
        self._outputs: Dict[str, ParameterItem] = {}
        self._return_value_declared = False
        self._parsed = False
        self.last_error: Optional[ScriptErrorPayload] = None

    @classmethod
    def from_string(cls, ctx: ScriptContext, path: str, content: str) -> "ScriptInfo":
        """Cria um ScriptInfo para conteúdo em memória (`path` é um pseudo-path)."""
        return cls(ctx, path, io.StringIO(content))

    # ------------------------------------------------------------------
    # Identidade
    # ------------------------------------------------------------------
    @property
    def identifier(self) -> str:
        return "script:" + self.path

    @property
    def location(self) -> str:
        return Path(self.path).resolve().as_uri()

    @property
    def version(self) -> Optional[str]:
        def _log(exc: Exception) -> None:
            self.ctx.log(
                source=self.identifier,
                level="error",
                message="Error computing script version",
                reason=str(exc),
            )

        try:
            return compute_version(self.path, on_error=_log)
        except OSError as e:
            _log(e)
            return None

    @property
    def content(self) -> Optional[str]:
        """Conteúdo em memória; None quando o script vive em disco."""
        return self._content

    # ------------------------------------------------------------------
    # Cache de parsing
    # ------------------------------------------------------------------
    def ensure_parsed(self) -> None:
        if not self._parsed:
            self.parse_parameters()

    def invalidate(self) -> None:
        self._parsed = False

    def parse_parameters(self) -> None:
        """Reconstrói do zero a lista de parâmetros a partir do preâmbulo."""
        self._inputs = {}
        self._outputs = {}
        self._return_value_declared = False
        self.last_error = None
        self._parsed = True

        parser = DirectiveParser(
            type_lookup=self.ctx.type_lookup,
            converter=self.ctx.converter,
            on_warning=lambda item, message: self.ctx.add_warning(source=self.identifier, message=message),
        )

        try:
            for line in self._source_lines():
                if _DIRECTIVE_LINE.match(line):
                    self._parse_param(parser, line[line.index("@") + 1:])
                elif _WORD.search(line):
                    break

            if not self._return_value_declared:
                self._add_return_value()

        except ScriptException as e:
            self.last_error = payload_from_exception(e)
            message = (
                f"Error reading script: {self.path}"
                if isinstance(e, SourceReadError)
                else f"Invalid parameter syntax for script: {self.path}"
            )
            self.ctx.log(
                source=self.identifier,
                level="error",
                message=message,
                error=self.last_error.to_dict(),
            )
            return

        self.ctx.log(
            source=self.identifier,
            level="info",
            message="parameters parsed",
            inputs=len(self._inputs),
            outputs=len(self._outputs),
        )

    # ------------------------------------------------------------------
    # Acessores
    # ------------------------------------------------------------------
    def inputs(self) -> List[ParameterItem]:
        self.ensure_parsed()
        return list(self._inputs.values())

    def outputs(self) -> List[ParameterItem]:
        self.ensure_parsed()
        return list(self._outputs.values())

    def get_input(self, name: str) -> Optional[ParameterItem]:
        self.ensure_parsed()
        return self._inputs.get(name)

    def get_output(self, name: str) -> Optional[ParameterItem]:
        self.ensure_parsed()
        return self._outputs.get(name)

    def is_return_value_declared(self) -> bool:
        self.ensure_parsed()
        return self._return_value_declared

    def create_module(self) -> ScriptModule:
        self.ensure_parsed()
        return ScriptModule(self)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _source_lines(self) -> Iterator[str]:
        if self._content is not None:
            yield from self._content.splitlines()
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                for line in f:
                    yield line.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(
                f"Error reading script: {self.path}",
                details={"path": self.path, "reason": str(e)},
                hint="Verifique se o arquivo do script existe e pode ser lido.",
            ) from e

    def _parse_param(self, parser: DirectiveParser, directive: str) -> None:
        parsed = parser.parse(directive)
        self._register(parsed.item)
        if parsed.item.name == RETURN_VALUE:
            self._return_value_declared = True

    def _add_return_value(self) -> None:
        self._register(ParameterItem(name=RETURN_VALUE, type=object, io_kind=ItemIO.OUTPUT))

    def _register(self, item: ParameterItem) -> None:
        if (item.is_input() and item.name in self._inputs) or (
            item.is_output() and item.name in self._outputs
        ):
            raise DirectiveSyntaxError(
                f"Duplicate parameter: {item.name}",
                details={"name": item.name, "script": self.path},
            )
        if item.is_input():
            self._inputs[item.name] = item
        if item.is_output():
            self._outputs[item.name] = item
