# src/scriptmeta/core/context.py
"""
Contexto compartilhado do scriptmeta.

Este módulo define o `ScriptContext`, a estrutura canônica que reúne as
capacidades externas usadas pelo extrator de parâmetros e pelos Stages do
pipeline, além do canal de diagnóstico estruturado.

O ScriptContext atua como o único meio permitido de:
    - resolver nomes de tipo (TypeLookup)
    - converter valores textuais (Converter)
    - localizar instâncias de serviços para auto-fill
    - registrar logs estruturados
    - coletar warnings não fatais por origem

Princípios fundamentais:
    - Nenhum estado global: cada aplicação cria seu próprio contexto
    - Comunicação explícita e rastreável
    - Estrutura simples e testável

Invariantes:
    - Logs sempre incluem `context_id` e `source`
    - Warnings são agrupados por `source`
    - Serviços são consultados na ordem de registro

Limites explícitos:
    - Não faz parsing de scripts
    - Não executa Stages
    - Não persiste dados automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .script.types import Converter, DefaultConverter, DefaultTypeLookup, TypeLookup


@dataclass
class ScriptContext:
    """
    Contexto compartilhado entre ScriptInfo, ScriptModule e Stages.

    Campos canônicos:
    - context_id: identificador do contexto (aparece em todos os eventos)
    - created_at: timestamp UTC de criação
    - config: configuração resolvida (ver core.config.load_config)
    - type_lookup / converter: capacidades externas de tipos
    - services: instâncias disponíveis para auto-fill de inputs

    Decisões arquiteturais:
        - O contexto não é dono de nenhum Module
        - Logs são eventos estruturados, não strings livres
        - Serviços são objetos quaisquer; o match é por isinstance
    """
    context_id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    config: Dict[str, Any] = field(default_factory=dict)
    type_lookup: TypeLookup = field(default_factory=DefaultTypeLookup)
    converter: Converter = field(default_factory=DefaultConverter)
    services: List[Any] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Services
    # -----------------------------
    def add_service(self, service: Any) -> None:
        self.services.append(service)

    def get_service(self, cls: type) -> Optional[Any]:
        for service in self.services:
            if isinstance(service, cls):
                return service
        return None

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, source: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "context_id": self.context_id,
            "source": source,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, source: str, message: str) -> None:
        if source not in self.warnings:
            self.warnings[source] = []
        self.warnings[source].append(message)
        self.log(source=source, level="warning", message=message)

    def events_for(self, source: str, *, level: Optional[str] = None) -> List[Dict[str, Any]]:
        return [
            e for e in self.events
            if e["source"] == source and (level is None or e["level"] == level)
        ]
