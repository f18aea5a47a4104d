# tests/core/test_error_payloads.py
"""
Testes do padrão canônico de erros (exceções tipadas → ScriptErrorPayload).

Os testes asseguram que:
- cada exceção tipada mapeia para um código estável do catálogo
- exceções genéricas viram STAGE_EXECUTION_ERROR sem expor stack trace
- o payload é serializável via `to_dict`
"""

import json

import pytest

try:
    from scriptmeta.core import errors
    from scriptmeta.core.exceptions import (
        DirectiveSyntaxError,
        DuplicateAttributeError,
        InvalidChoiceError,
        ScriptException,
        SourceReadError,
        UnknownAttributeError,
        UnknownTypeError,
        UnresolvedInputError,
    )
except Exception as e:  # noqa: BLE001
    errors = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing error modules. Implement:\n"
            "- src/scriptmeta/core/exceptions.py (typed exceptions)\n"
            "- src/scriptmeta/core/errors.py (ScriptErrorPayload, payload_from_exception)\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize(
    "exc_cls, code",
    [
        ("DirectiveSyntaxError", "DIRECTIVE_SYNTAX_ERROR"),
        ("DuplicateAttributeError", "DUPLICATE_ATTRIBUTE"),
        ("UnknownAttributeError", "UNKNOWN_ATTRIBUTE"),
        ("UnknownTypeError", "UNKNOWN_TYPE"),
        ("InvalidChoiceError", "INVALID_CHOICE"),
        ("SourceReadError", "SOURCE_READ_ERROR"),
        ("UnresolvedInputError", "UNRESOLVED_REQUIRED_INPUT"),
    ],
)
def test_typed_exceptions_map_to_catalog(exc_cls, code):
    _require_imports()
    cls = {
        "DirectiveSyntaxError": DirectiveSyntaxError,
        "DuplicateAttributeError": DuplicateAttributeError,
        "UnknownAttributeError": UnknownAttributeError,
        "UnknownTypeError": UnknownTypeError,
        "InvalidChoiceError": InvalidChoiceError,
        "SourceReadError": SourceReadError,
        "UnresolvedInputError": UnresolvedInputError,
    }[exc_cls]
    exc = cls("boom", details={"k": "v"}, hint="fix it")

    assert isinstance(exc, ScriptException)
    assert str(exc) == "boom"

    payload = errors.payload_from_exception(exc)
    assert payload.type == code
    assert payload.to_dict() == {"type": code, "message": "boom", "details": {"k": "v"}, "hint": "fix it"}


def test_generic_exception_becomes_stage_execution_error():
    _require_imports()
    payload = errors.payload_from_exception(KeyError("missing"))

    assert payload.type == errors.STAGE_EXECUTION_ERROR
    assert payload.details == {"exception_class": "KeyError"}
    json.dumps(payload.to_dict())


def test_source_read_error_factory():
    _require_imports()
    payload = errors.source_read_error(path="a.py", reason="No such file")

    assert payload.type == errors.SOURCE_READ_ERROR
    assert payload.details == {"path": "a.py", "reason": "No such file"}
    assert payload.hint
