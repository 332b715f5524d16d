import asyncio

import pytest

from app.core import AppError, ErrorCode
from app.mapping.assembler import MatrixAssembler, compute_averages
from app.mapping.reasoning import ReasoningSynthesizer
from app.mapping.types import CourseOutcome


def test_compute_averages():
    matrix = {
        "CO1": {"PO1": 3, "PO2": None, "PO3": 2},
        "CO2": {"PO1": 1, "PO2": None, "PO3": 2},
        "CO3": {"PO1": 2, "PO2": None, "PO3": 1},
    }
    averages = compute_averages(matrix, ["PO1", "PO2", "PO3"])

    assert averages == {"PO1": 2.0, "PO2": None, "PO3": 1.67}


def test_compute_averages_ignores_invalid_values():
    matrix = {"CO1": {"PO1": 0}, "CO2": {"PO1": "3"}, "CO3": {"PO1": 4}, "CO4": {"PO1": "x"}, "CO5": {"PO1": True}}
    assert compute_averages(matrix, ["PO1"]) == {"PO1": 3.0}


def test_compute_averages_rounds_half_up():
    # 2.125 -> 2.13 (banker's rounding would give 2.12)
    matrix = {f"CO{i}": {"PO1": v} for i, v in enumerate([3, 2, 2, 2, 2, 2, 2, 2], start=1)}
    assert compute_averages(matrix, ["PO1"]) == {"PO1": 2.13}


def test_build_matrix_end_to_end(assembler, make_co):
    cos = [
        make_co("CO1", "alpha bravo charlie echo", 3),
        make_co("CO2", "lima and mike", 4),
        make_co("CO3", "zebra", 1),
        make_co("CO4", "unrelated wording", 6),
    ]
    result = asyncio.run(assembler.build_matrix(cos))

    assert result.po_ids == ["PO1", "PO2"]
    assert result.pso_ids == ["PSO1"]

    assert result.matrix["CO1"] == {"PO1": 3, "PO2": None, "PSO1": None}
    assert result.matrix["CO2"] == {"PO1": None, "PO2": 3, "PSO1": None}
    assert result.matrix["CO3"] == {"PO1": 1, "PO2": None, "PSO1": None}
    assert result.matrix["CO4"] == {"PO1": None, "PO2": None, "PSO1": None}

    reasoning = result.reasoning["CO2"]["PO2"]
    assert "2/3" in reasoning
    assert "66.7%" in reasoning
    assert "mapping strength of 3 (High)" in reasoning

    assert result.averages == {"PO1": 2.0, "PO2": 3.0, "PSO1": None}
    assert result.mapped_cells == 3


def test_every_value_has_reasoning(assembler, make_co):
    result = asyncio.run(assembler.build_matrix([make_co("CO1", "alpha india"), make_co("CO2", "hotel")]))

    for co_id, row in result.matrix.items():
        for oid, value in row.items():
            assert (value is None) == (result.reasoning[co_id][oid] is None)
            assert (value is None) == (result.justifications[co_id][oid] is None)


def test_concurrent_enrichment_is_bounded(catalog, make_co):
    state = {"active": 0, "peak": 0}

    class CountingEnricher:
        async def justify(self, *args, **kwargs):
            state["active"] += 1
            state["peak"] = max(state["peak"], state["active"])
            await asyncio.sleep(0.01)
            state["active"] -= 1
            return None

    assembler = MatrixAssembler(catalog, ReasoningSynthesizer(CountingEnricher()), concurrency=2)
    cos = [make_co(f"CO{i}", "alpha lima india") for i in range(1, 5)]

    result = asyncio.run(assembler.build_matrix(cos))

    assert result.mapped_cells == 12
    assert state["peak"] <= 2


@pytest.mark.parametrize(
    "cos",
    [
        [],
        [CourseOutcome(id="CO1", description="a", cognitive_level=3), CourseOutcome(id="CO1", description="b", cognitive_level=3)],
        [CourseOutcome(id="CO1", description="a", cognitive_level=7)],
        [CourseOutcome(id=" ", description="a", cognitive_level=3)],
    ],
)
def test_invalid_course_outcomes_rejected(assembler, cos):
    with pytest.raises(AppError) as exc:
        asyncio.run(assembler.build_matrix(cos))
    assert exc.value.code == ErrorCode.VALIDATION_ERROR
    assert exc.value.status_code == 422
