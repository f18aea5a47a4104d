# src/scriptmeta/core/pipeline/stage.py
"""
Contrato canônico de Stage do pipeline de preparação de scripts.

Um Stage é uma unidade de pré-processamento aplicada a um ScriptModule
antes da execução do script. Cada Stage inspeciona os inputs do Module e
decide, de forma independente, para quais deles pode contribuir.

Responsabilidades de um Stage:
    - popular e/ou resolver inputs do Module
    - ou produzir efeitos colaterais externos (ex.: persistir valores)
    - tratar a ausência de um serviço necessário como no-op

Princípios fundamentais:
    - Stages não conhecem o runner nem os outros Stages
    - A ordem é dada exclusivamente por `priority` (maior roda antes)
    - Stages não guardam estado por Module
    - Conformidade é garantida por duck typing (@runtime_checkable)

Invariantes:
    - Cada Stage possui um `id` único
    - `process` é chamado no máximo uma vez por Module
    - Um input resolvido nunca volta a ser pendente

Limites explícitos:
    - Não executa o script
    - Não define ordem de execução além da própria prioridade
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..script.module import ScriptModule


@runtime_checkable
class Stage(Protocol):
    """
    Contrato canônico de um Stage.

    Atributos obrigatórios:
        - id: identificador único e estável do Stage
        - priority: prioridade numérica (maior valor roda antes)

    Decisões arquiteturais:
        - O protocolo não impõe herança, apenas conformidade estrutural
        - `process` não retorna valor: o efeito é sobre o Module
        - Exceções são tratadas pelo runner como "Stage declinou"
    """
    id: str
    priority: float

    def process(self, module: ScriptModule) -> None:
        """Processa o Module (popula/resolve inputs ou gera efeitos externos)."""
        ...
