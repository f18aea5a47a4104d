"""
scriptmeta: Canonical Exceptions (v1)

Este módulo define as exceções tipadas internas do scriptmeta.

Objetivo:
- Permitir que o parser de diretivas, o extrator de metadata e os Stages
  levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para ScriptErrorPayload
- Evitar ValueError/RuntimeError genéricos nos pontos críticos do parsing

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- A mensagem é curta e humana; o texto da diretiva ofensora vai em `details`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ScriptException(Exception):
    """Base class para exceções internas do scriptmeta.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Parsing de diretivas
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectiveSyntaxError(ScriptException):
    """Diretiva ou cláusula de atributos malformada."""


@dataclass(frozen=True)
class DuplicateAttributeError(ScriptException):
    """A mesma chave aparece duas vezes na cláusula de atributos."""


@dataclass(frozen=True)
class UnknownAttributeError(ScriptException):
    """Chave de atributo fora do vocabulário fechado."""


@dataclass(frozen=True)
class UnknownTypeError(ScriptException):
    """O nome de tipo não foi resolvido pelo TypeLookup."""


@dataclass(frozen=True)
class InvalidChoiceError(ScriptException):
    """Um token de `choices` não pôde ser convertido para o tipo do item."""


# ---------------------------------------------------------------------------
# Fonte do script
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SourceReadError(ScriptException):
    """O texto do script não está disponível (arquivo ausente, I/O)."""


# ---------------------------------------------------------------------------
# Fronteira com o engine de execução
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UnresolvedInputError(ScriptException):
    """Inputs obrigatórios não foram resolvidos antes da execução."""
