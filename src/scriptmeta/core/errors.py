"""
scriptmeta: Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do scriptmeta.
Erros de extração de parâmetros e de Stages do pipeline não sobem para o
chamador: eles são convertidos em payloads e registrados no ScriptContext.
Por isso o payload precisa ser:

- explícito
- serializável
- rastreável
- acionável

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .exceptions import (
    DirectiveSyntaxError,
    DuplicateAttributeError,
    InvalidChoiceError,
    ScriptException,
    SourceReadError,
    UnknownAttributeError,
    UnknownTypeError,
    UnresolvedInputError,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScriptErrorPayload:
    """
    Payload canônico de erro do scriptmeta.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao autor do script (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Parsing de diretivas
DIRECTIVE_SYNTAX_ERROR = "DIRECTIVE_SYNTAX_ERROR"
DUPLICATE_ATTRIBUTE = "DUPLICATE_ATTRIBUTE"
UNKNOWN_ATTRIBUTE = "UNKNOWN_ATTRIBUTE"
UNKNOWN_TYPE = "UNKNOWN_TYPE"
INVALID_CHOICE = "INVALID_CHOICE"

# Fonte
SOURCE_READ_ERROR = "SOURCE_READ_ERROR"

# Pipeline / Execução
UNRESOLVED_REQUIRED_INPUT = "UNRESOLVED_REQUIRED_INPUT"
STAGE_EXECUTION_ERROR = "STAGE_EXECUTION_ERROR"


_CODES_BY_EXCEPTION = {
    DirectiveSyntaxError: DIRECTIVE_SYNTAX_ERROR,
    DuplicateAttributeError: DUPLICATE_ATTRIBUTE,
    UnknownAttributeError: UNKNOWN_ATTRIBUTE,
    UnknownTypeError: UNKNOWN_TYPE,
    InvalidChoiceError: INVALID_CHOICE,
    SourceReadError: SOURCE_READ_ERROR,
    UnresolvedInputError: UNRESOLVED_REQUIRED_INPUT,
}


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def payload_from_exception(exc: BaseException) -> ScriptErrorPayload:
    """Converte uma exceção em ScriptErrorPayload (serializável, acionável).

    Regras:
    - ScriptException: o código vem do catálogo; message/details/hint são
      preservados.
    - Outras exceções: encapsuladas como STAGE_EXECUTION_ERROR, sem expor
      stack trace.
    """
    if isinstance(exc, ScriptException):
        return ScriptErrorPayload(
            type=_CODES_BY_EXCEPTION.get(type(exc), exc.__class__.__name__),
            message=exc.message or "Erro de parsing",
            details=dict(exc.details or {}),
            hint=exc.hint,
        )

    return ScriptErrorPayload(
        type=STAGE_EXECUTION_ERROR,
        message=str(exc) or "Erro inesperado durante o processamento",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o log do contexto e os serviços injetados no Stage",
    )


def source_read_error(
    *,
    path: str,
    reason: str,
    hint: str = "Verifique se o arquivo do script existe e pode ser lido.",
) -> ScriptErrorPayload:
    return ScriptErrorPayload(
        type=SOURCE_READ_ERROR,
        message="Falha ao ler o script",
        details={"path": path, "reason": reason},
        hint=hint,
    )

