# tests/core/test_context_events.py
"""
Testes de logging estruturado, warnings e serviços no ScriptContext.

Os testes asseguram que:
- eventos de log são registrados de forma estruturada
- cada evento contém `context_id`, `source`, `level` e timestamp
- warnings são agrupados por origem e também viram eventos
- serviços são localizados por isinstance, na ordem de registro

Decisões arquiteturais:
    - Logs não são strings livres, mas eventos estruturados
    - Warnings são sinais não fatais
"""

from datetime import datetime

import pytest

try:
    from scriptmeta.core.context import ScriptContext
    from scriptmeta.core.script.types import DefaultConverter, DefaultTypeLookup
except Exception as e:  # noqa: BLE001
    ScriptContext = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing ScriptContext. Implement:\n"
            "- src/scriptmeta/core/context.py (log, add_warning, events, warnings, get_service)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_log_event_shape(script_ctx):
    """
    Verifica a estrutura mínima de um evento de log.

    Invariantes:
        - Campos extras são preservados sem perda
        - O timestamp é ISO 8601 com fuso
    """
    _require_imports()
    script_ctx.log(source="inputs.load", level="info", message="loaded", inputs=["a"])

    assert len(script_ctx.events) == 1
    event = script_ctx.events[0]
    assert event["context_id"] == "ctx-test-001"
    assert event["source"] == "inputs.load"
    assert event["level"] == "info"
    assert event["message"] == "loaded"
    assert event["inputs"] == ["a"]
    assert datetime.fromisoformat(event["timestamp"]).tzinfo is not None


def test_warnings_are_grouped_and_logged(script_ctx):
    _require_imports()
    script_ctx.add_warning(source="a", message="w1")
    script_ctx.add_warning(source="a", message="w2")
    script_ctx.add_warning(source="b", message="w3")

    assert script_ctx.warnings == {"a": ["w1", "w2"], "b": ["w3"]}
    assert [e["message"] for e in script_ctx.events_for("a", level="warning")] == ["w1", "w2"]


def test_events_for_filters_by_source_and_level(script_ctx):
    _require_imports()
    script_ctx.log(source="x", level="info", message="1")
    script_ctx.log(source="x", level="error", message="2")
    script_ctx.log(source="y", level="error", message="3")

    assert [e["message"] for e in script_ctx.events_for("x")] == ["1", "2"]
    assert [e["message"] for e in script_ctx.events_for("x", level="error")] == ["2"]


def test_services_match_by_isinstance():
    _require_imports()

    class Base:
        pass

    class Child(Base):
        pass

    ctx = ScriptContext(context_id="svc")
    child = Child()
    ctx.add_service("plain string")
    ctx.add_service(child)

    assert ctx.get_service(Base) is child
    assert ctx.get_service(str) == "plain string"
    assert ctx.get_service(int) is None


def test_defaults():
    _require_imports()
    ctx = ScriptContext(context_id="d")
    assert ctx.config == {}
    assert ctx.services == []
    assert isinstance(ctx.type_lookup, DefaultTypeLookup)
    assert isinstance(ctx.converter, DefaultConverter)
    assert ctx.created_at.tzinfo is not None
