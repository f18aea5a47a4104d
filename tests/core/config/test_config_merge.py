# tests/core/config/test_config_merge.py
"""
Testes do deep-merge de configuração.

Invariantes:
    - Nenhum input é mutado
    - dicts são combinados recursivamente, listas são sobrescritas
    - conflitos de tipo são falhas explícitas
"""

import pytest

try:
    from scriptmeta.core.config.merge import deep_merge
    from scriptmeta.core.config.errors import ConfigTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing merge module. Implement:\n"
            "- src/scriptmeta/core/config/merge.py (deep_merge)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_recursive_merge_does_not_mutate_inputs():
    _require_imports()
    base = {"stages": {"inputs.save": {"enabled": True}, "inputs.load": {"enabled": True}}}
    override = {"stages": {"inputs.save": {"enabled": False}}}

    merged = deep_merge(base, override)

    assert merged == {"stages": {"inputs.save": {"enabled": False}, "inputs.load": {"enabled": True}}}
    assert base["stages"]["inputs.save"]["enabled"] is True
    assert override == {"stages": {"inputs.save": {"enabled": False}}}


def test_lists_are_replaced():
    _require_imports()
    assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}


def test_null_base_accepts_any_override():
    _require_imports()
    assert deep_merge({"persistence": {"path": None}}, {"persistence": {"path": "p.yaml"}}) == {
        "persistence": {"path": "p.yaml"}
    }


def test_null_override_clears_value():
    _require_imports()
    assert deep_merge({"persistence": {"path": "p.yaml"}}, {"persistence": {"path": None}}) == {
        "persistence": {"path": None}
    }


def test_new_keys_are_added():
    _require_imports()
    assert deep_merge({"a": 1}, {"b": {"c": 2}}) == {"a": 1, "b": {"c": 2}}


@pytest.mark.parametrize(
    "base, override",
    [
        ({"stages": {"inputs.save": {"enabled": True}}}, {"stages": {"inputs.save": "off"}}),
        ({"a": 1}, {"a": "1"}),
        ({"a": True}, {"a": 1}),
    ],
)
def test_type_conflicts(base, override):
    _require_imports()
    with pytest.raises(ConfigTypeConflictError):
        deep_merge(base, override)


def test_root_must_be_dicts():
    _require_imports()
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"a": 1}, ["a"])
