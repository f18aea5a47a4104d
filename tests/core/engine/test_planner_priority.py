# tests/core/engine/test_planner_priority.py
"""
Testes do planner de Stages (ordenação por prioridade).

Os testes asseguram que:
- Stages são ordenados por prioridade decrescente
- empates preservam a ordem de registro
- Stages estruturalmente inválidos são rejeitados antes de qualquer execução

Invariantes:
    - Todos os Stages válidos aparecem exatamente uma vez
    - A mesma entrada produz sempre a mesma ordem
"""

import math

import pytest

try:
    from scriptmeta.core.engine.planner import InvalidStageError, plan_stages
except Exception as e:  # noqa: BLE001
    plan_stages = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing planner. Implement:\n"
            "- src/scriptmeta/core/engine/planner.py (plan_stages, InvalidStageError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def _ids(stages):
    return [s.id for s in stages]


def test_orders_by_descending_priority(DummyStage):
    _require_imports()
    stages = [DummyStage("low", 1), DummyStage("high", 10), DummyStage("mid", 5)]
    assert _ids(plan_stages(stages)) == ["high", "mid", "low"]


def test_ties_keep_registration_order(DummyStage):
    """
    Verifica o desempate estável.

    Invariantes:
        - Stages de mesma prioridade mantêm a ordem de entrada
    """
    _require_imports()
    stages = [
        DummyStage("a", 0),
        DummyStage("b", 3),
        DummyStage("c", 0),
        DummyStage("d", 3),
        DummyStage("e", -2.5),
    ]
    assert _ids(plan_stages(stages)) == ["b", "d", "a", "c", "e"]


def test_plan_is_deterministic(DummyStage):
    _require_imports()
    stages = [DummyStage(str(i), i % 3) for i in range(9)]
    assert _ids(plan_stages(stages)) == _ids(plan_stages(stages))


def test_plan_does_not_mutate_input(DummyStage):
    _require_imports()
    stages = [DummyStage("a", 1), DummyStage("b", 2)]
    plan_stages(stages)
    assert _ids(stages) == ["a", "b"]


def test_empty_plan():
    _require_imports()
    assert plan_stages([]) == []


def test_rejects_duplicate_ids(DummyStage):
    _require_imports()
    with pytest.raises(InvalidStageError):
        plan_stages([DummyStage("a", 1), DummyStage("a", 2)])


@pytest.mark.parametrize("priority", [None, "10", True, math.nan])
def test_rejects_invalid_priority(DummyStage, priority):
    _require_imports()
    with pytest.raises(InvalidStageError):
        plan_stages([DummyStage("a", priority)])


def test_rejects_stage_without_process():
    _require_imports()

    class NoProcess:
        id = "np"
        priority = 1.0

    with pytest.raises(InvalidStageError):
        plan_stages([NoProcess()])
