# tests/conftest.py
"""
Fixtures compartilhados para testes do scriptmeta.

Este módulo define fixtures reutilizáveis que fornecem:
- um ScriptContext determinístico
- uma fábrica de ScriptInfo a partir de texto em memória
- um Stage dummy para testes do planner/runner
- configurações YAML mínimas

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas
    - O Stage dummy usa duck typing em vez de herança

Invariantes:
    - Nenhuma fixture executa o pipeline
    - Nenhuma fixture realiza I/O fora de tmp_path
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def defaults_yaml() -> str:
    """
    YAML de configuração base, semelhante a `config/scriptmeta.defaults.yaml`.

    Returns:
        str: Conteúdo YAML dos defaults.
    """
    return """
stages:
  service.autofill:
    enabled: true
  inputs.save:
    enabled: true
persistence:
  path: null
"""


@pytest.fixture
def local_yaml() -> str:
    """YAML de override local: desabilita a persistência e define o store."""
    return """
stages:
  inputs.save:
    enabled: false
persistence:
  path: prefs/values.yaml
"""


# =====================================================
# Script fixtures
# =====================================================

@pytest.fixture
def script_ctx():
    """
    ScriptContext determinístico para testes.

    Decisões arquiteturais:
        - `context_id` e `created_at` fixos
        - Config vazia (todos os Stages habilitados)
        - TypeLookup/Converter padrão

    Returns:
        ScriptContext: contexto isolado, sem serviços registrados.
    """
    from scriptmeta.core.context import ScriptContext

    return ScriptContext(
        context_id="ctx-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config={},
        meta={"source": "pytest"},
    )


@pytest.fixture
def make_info(script_ctx):
    """
    Fábrica de ScriptInfo em memória.

    Uso:
        info = make_info("# @int x\\nprint(x)\\n")
        info = make_info(text, path="macro.ijm")
    """
    from scriptmeta.core.script.info import ScriptInfo

    def _make(content: str, path: str = "script.py"):
        return ScriptInfo.from_string(script_ctx, path, content)

    return _make


@pytest.fixture
def DummyStage():
    """
    Fixture factory que fornece uma implementação mínima e duck-typed de Stage.

    A classe retornada:
    - expõe `id` e `priority`
    - registra a ordem de execução em uma lista compartilhada (`calls`)
    - opcionalmente popula e resolve um input (`target`) se ele ainda não
      estiver resolvido, respeitando o contrato cooperativo dos Stages
    - opcionalmente levanta uma exceção (`fail`)

    Returns:
        type: Classe _DummyStage que pode ser instanciada pelos testes.
    """

    class _DummyStage:
        def __init__(self, stage_id, priority, calls=None, target=None, value=None, fail=False):
            self.id = stage_id
            self.priority = priority
            self.calls = calls if calls is not None else []
            self.target = target
            self.value = value
            self.fail = fail
            self.touched = False

        def process(self, module):
            self.calls.append(self.id)
            if self.fail:
                raise RuntimeError(f"{self.id} failed")
            if self.target is None or module.is_input_resolved(self.target):
                return
            self.touched = True
            module.set_input(self.target, self.value)
            module.resolve_input(self.target)

    return _DummyStage
