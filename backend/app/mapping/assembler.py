"""
assembler.py
- Purpose: Build the full CO x (PO + PSO) correlation matrix for one request.

Flow per (CO, outcome) pair: matcher -> classifier -> reasoning synthesizer.
Matching and classification run inline; syntheses (which may call the LLM)
run concurrently, bounded by a semaphore. A cell is only filled once its
justification exists, so the matrix never carries a value without reasoning.
"""

from __future__ import annotations

import asyncio
import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional, Sequence

from app.catalog.models import Catalog, Outcome
from app.core.request_context import set_context
from app.mapping.classifier import classify
from app.mapping.matcher import match
from app.mapping.reasoning import ReasoningSynthesizer
from app.mapping.types import CourseOutcome, Justification, MatchSet, MatrixResult
from app.schemas.syllabus_schema import SyllabusData
from app.validations.outcome_validators import validate_course_outcomes

logger = logging.getLogger("app.mapping.assembler")

_VALID_CORRELATIONS = (1.0, 2.0, 3.0)
_TWO_PLACES = Decimal("0.01")


def _as_correlation(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    return int(num) if num in _VALID_CORRELATIONS else None


def compute_averages(
    matrix: Mapping[str, Mapping[str, Any]], outcome_ids: Sequence[str]
) -> dict[str, Optional[float]]:
    """Column mean over cells that are exactly 1, 2 or 3; None for empty columns."""
    averages: dict[str, Optional[float]] = {}
    for oid in outcome_ids:
        values = [v for v in (_as_correlation(row.get(oid)) for row in matrix.values()) if v is not None]
        if not values:
            averages[oid] = None
            continue
        mean = Decimal(sum(values)) / Decimal(len(values))
        averages[oid] = float(mean.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))
    return averages


class MatrixAssembler:
    def __init__(self, catalog: Catalog, synthesizer: ReasoningSynthesizer, *, concurrency: int = 4):
        self.catalog = catalog
        self.synthesizer = synthesizer
        self.concurrency = max(1, concurrency)

    async def build_matrix(
        self,
        course_outcomes: Sequence[CourseOutcome],
        syllabus: SyllabusData | None = None,
    ) -> MatrixResult:
        validate_course_outcomes(course_outcomes)

        po_ids = list(self.catalog.po_ids)
        pso_ids = list(self.catalog.pso_ids)
        outcome_ids = [*po_ids, *pso_ids]

        matrix: dict[str, dict[str, Optional[int]]] = {}
        reasoning: dict[str, dict[str, Optional[str]]] = {}
        justifications: dict[str, dict[str, Optional[Justification]]] = {}
        for co in course_outcomes:
            matrix[co.id] = {oid: None for oid in outcome_ids}
            reasoning[co.id] = {oid: None for oid in outcome_ids}
            justifications[co.id] = {oid: None for oid in outcome_ids}

        pending: list[tuple[CourseOutcome, Outcome, int, MatchSet]] = []
        for co in course_outcomes:
            for oid in outcome_ids:
                outcome = self.catalog.outcomes[oid]
                match_set = match(co.description, outcome)
                if not match_set:
                    continue
                result = classify(co.cognitive_level, outcome, match_set)
                if result.value is None:
                    continue
                pending.append((co, outcome, result.value, match_set))

        semaphore = asyncio.Semaphore(self.concurrency)

        async def _synthesize(co: CourseOutcome, outcome: Outcome, value: int, match_set: MatchSet):
            async with semaphore:
                # runs in its own task context; does not leak to siblings
                set_context(co_id=co.id, outcome_id=outcome.id)
                return await self.synthesizer.synthesize(co, outcome, value, match_set, syllabus)

        results = await asyncio.gather(*(_synthesize(*p) for p in pending))

        for (co, outcome, value, _), justification in zip(pending, results):
            if justification is None:
                continue
            matrix[co.id][outcome.id] = value
            reasoning[co.id][outcome.id] = justification.to_text()
            justifications[co.id][outcome.id] = justification

        result = MatrixResult(
            matrix=matrix,
            reasoning=reasoning,
            justifications=justifications,
            po_ids=po_ids,
            pso_ids=pso_ids,
            averages=compute_averages(matrix, outcome_ids),
        )

        logger.info(
            "matrix.built",
            extra={
                "course_outcomes": len(course_outcomes),
                "outcomes": len(outcome_ids),
                "candidate_cells": len(pending),
                "mapped_cells": result.mapped_cells,
                "enriched_cells": sum(
                    1 for row in justifications.values() for j in row.values() if j is not None and j.enriched
                ),
            },
        )
        return result
