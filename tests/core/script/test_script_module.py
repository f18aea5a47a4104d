# tests/core/script/test_script_module.py
"""
Testes do ScriptModule (valores e estado de resolução de uma execução).
"""

import pytest

try:
    from scriptmeta.core.script.module import RETURN_VALUE
    from scriptmeta.core.exceptions import UnresolvedInputError
except Exception as e:  # noqa: BLE001
    RETURN_VALUE = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing ScriptModule. Implement:\n"
            "- src/scriptmeta/core/script/module.py (ScriptModule, RETURN_VALUE)\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.fixture
def module(make_info):
    _require_imports()
    info = make_info(
        "# @int count\n"
        "# @INPUT(required=false) String note\n"
        "# @OUTPUT double total\n"
    )
    return info.create_module()


def test_input_states(module):
    """
    Verifica os estados ausente → populado → resolvido.

    Invariantes:
        - Popular um input não o resolve
        - A resolução é explícita
    """
    assert module.has_input_value("count") is False
    assert module.get_input("count") is None

    module.set_input("count", 3)
    assert module.has_input_value("count") is True
    assert module.is_input_resolved("count") is False

    module.resolve_input("count")
    assert module.is_input_resolved("count") is True
    assert module.get_inputs() == {"count": 3}


def test_set_inputs_resolves_presets(module):
    module.set_inputs({"count": 5, "note": "hi"})
    assert module.is_input_resolved("count")
    assert module.is_input_resolved("note")
    assert module.unresolved_inputs() == []


def test_clear_input_only_when_unresolved(module):
    module.set_input("count", 1)
    module.clear_input("count")
    assert module.has_input_value("count") is False

    module.set_input("count", 2)
    module.resolve_input("count")
    with pytest.raises(ValueError):
        module.clear_input("count")
    assert module.get_input("count") == 2


def test_unknown_names_raise_key_error(module):
    with pytest.raises(KeyError):
        module.set_input("missing", 1)
    with pytest.raises(KeyError):
        module.get_input("total")
    with pytest.raises(KeyError):
        module.set_output("count", 1)
    with pytest.raises(KeyError):
        module.is_input_resolved("nope")
    with pytest.raises(KeyError):
        module.resolve_input("nope")


def test_outputs(module):
    module.set_output("total", 2.5)
    module.set_output(RETURN_VALUE, "done")
    assert module.get_output("total") == 2.5
    assert module.get_outputs() == {"total": 2.5, RETURN_VALUE: "done"}


def test_item_value_accessors(module):
    count = module.info.get_input("count")
    total = module.info.get_output("total")

    count.set_value(module, 7)
    total.set_value(module, 1.5)

    assert count.get_value(module) == 7
    assert total.get_value(module) == 1.5


def test_check_required_inputs(module):
    """
    Verifica a checagem de inputs obrigatórios antes da execução.

    Invariantes:
        - Inputs `required=false` nunca bloqueiam
        - Populado mas não resolvido ainda é pendente
    """
    module.set_input("count", 1)
    with pytest.raises(UnresolvedInputError) as exc:
        module.check_required_inputs()
    assert exc.value.details["inputs"] == ["count"]
    assert exc.value.details["script"] == "script:script.py"

    module.resolve_input("count")
    module.check_required_inputs()
    assert module.unresolved_inputs() == ["note"]


def test_modules_are_independent(make_info):
    _require_imports()
    info = make_info("# @int count\n")
    first = info.create_module()
    second = info.create_module()

    first.set_input("count", 1)
    first.resolve_input("count")

    assert second.has_input_value("count") is False
    assert second.is_input_resolved("count") is False
