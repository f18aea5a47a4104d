"""
Stage: service.autofill
=======================

Preenche automaticamente inputs cujo tipo declarado é satisfeito por uma
instância de serviço disponível no ScriptContext.

Regras:
- Apenas inputs com `autofill=True` e ainda não resolvidos
- O tipo declarado precisa ser específico: inputs do tipo genérico
  `object` nunca são auto-preenchidos (qualquer serviço casaria)
- O match é `isinstance(service, item.type)`; o primeiro serviço
  registrado que casar vence
- Input preenchido por serviço é **resolvido** (valor final da execução)
- Sem serviços no contexto → no-op
"""

from __future__ import annotations

from scriptmeta.core.context import ScriptContext
from scriptmeta.core.pipeline.priority import Priority
from scriptmeta.core.script.module import ScriptModule


class ServiceAutofillStage:
    """Resolve inputs a partir das instâncias de serviço do contexto."""

    id = "service.autofill"
    priority = Priority.VERY_HIGH

    def __init__(self, ctx: ScriptContext):
        self.ctx = ctx

    def process(self, module: ScriptModule) -> None:
        if not self.ctx.services:
            return

        for item in module.info.inputs():
            if not item.autofill or module.is_input_resolved(item.name):
                continue
            if item.type is object:
                continue

            service = self.ctx.get_service(item.type)
            if service is None:
                continue

            module.set_input(item.name, service)
            module.resolve_input(item.name)
            self.ctx.log(
                source=self.id,
                level="info",
                message="input auto-filled",
                input=item.name,
                service=type(service).__name__,
            )
