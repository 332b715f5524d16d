"""
reasoning.py
- Purpose: Build the justification for a mapped (CO, outcome) cell.

Segments, in order:
1. alignment statement (generative if available, else deterministic template)
2. quantitative justification (PI coverage; only when the outcome has PIs)
3. qualitative justification (matched PIs the CO aligns with)

The result is a structured ``Justification``; prose is produced by
``Justification.to_text()`` for display only.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Protocol

from app.catalog.models import Outcome
from app.mapping.classifier import collect_matched_pis, measure_coverage, strength_label
from app.mapping.types import (
    CourseOutcome,
    Justification,
    MatchSet,
    QualitativeJustification,
    QuantitativeJustification,
)
from app.schemas.syllabus_schema import SyllabusData, SyllabusUnit
from app.syllabus.relevance import RankedUnit, find_relevant_units

logger = logging.getLogger("app.mapping.reasoning")


class AlignmentEnricher(Protocol):
    async def justify(
        self,
        co: CourseOutcome,
        outcome: Outcome,
        correlation_value: int,
        match_set: MatchSet,
        syllabus: SyllabusData | None = None,
        top_unit: SyllabusUnit | None = None,
    ) -> str | None: ...


RelevanceLookup = Callable[[str, Optional[SyllabusData]], list[RankedUnit]]


def template_statement(
    co: CourseOutcome,
    outcome_id: str,
    competency_description: str,
    matched_pi_ids: list[str],
    top_unit: SyllabusUnit | None = None,
) -> str:
    syllabus_clause = f" as covered in Unit {top_unit.number}" if top_unit is not None else ""
    competency = (competency_description or "relevant competency").lower()
    return (
        f"CO {co.number} aligned with {outcome_id} based on {competency} "
        f"addressing PIs {', '.join(matched_pi_ids)}{syllabus_clause}."
    )


class ReasoningSynthesizer:
    def __init__(
        self,
        enricher: AlignmentEnricher | None = None,
        *,
        relevance_lookup: RelevanceLookup = find_relevant_units,
        enrichment_timeout_seconds: float | None = None,
    ):
        self.enricher = enricher
        self.relevance_lookup = relevance_lookup
        self.enrichment_timeout_seconds = enrichment_timeout_seconds

    def _top_unit(self, co: CourseOutcome, syllabus: SyllabusData | None) -> SyllabusUnit | None:
        if syllabus is None or not syllabus.units:
            return None
        ranked = self.relevance_lookup(co.description, syllabus)
        return ranked[0].unit if ranked else None

    async def _enriched_statement(
        self,
        co: CourseOutcome,
        outcome: Outcome,
        correlation_value: int,
        match_set: MatchSet,
        syllabus: SyllabusData | None,
        top_unit: SyllabusUnit | None,
    ) -> str | None:
        if self.enricher is None:
            return None
        call = self.enricher.justify(co, outcome, correlation_value, match_set, syllabus, top_unit)
        try:
            if self.enrichment_timeout_seconds:
                text = await asyncio.wait_for(call, timeout=self.enrichment_timeout_seconds)
            else:
                text = await call
        except Exception:
            # any enrichment failure degrades to the template
            logger.warning(
                "reasoning.enrichment_failed",
                extra={"co": co.id, "outcome": outcome.id},
                exc_info=True,
            )
            return None
        text = (text or "").strip()
        return text or None

    async def synthesize(
        self,
        co: CourseOutcome,
        outcome: Outcome,
        correlation_value: int,
        match_set: MatchSet,
        syllabus: SyllabusData | None = None,
    ) -> Justification | None:
        if not match_set:
            return None

        primary = match_set[0]
        if not primary.matched_pis:
            logger.warning(
                "reasoning.primary_without_pis",
                extra={"co": co.id, "outcome": outcome.id, "competency": primary.competency_id},
            )
            return None

        matched_ids = collect_matched_pis(match_set)
        top_unit = self._top_unit(co, syllabus)

        statement = await self._enriched_statement(co, outcome, correlation_value, match_set, syllabus, top_unit)
        enriched = statement is not None
        if statement is None:
            statement = template_statement(
                co, outcome.id, primary.competency_description, matched_ids, top_unit
            )

        coverage = measure_coverage(outcome, match_set)
        quantitative = None
        if coverage.percent is not None:
            quantitative = QuantitativeJustification(
                matched=coverage.matched,
                total=coverage.total,
                percent=coverage.percent,
                value=correlation_value,
                strength=strength_label(coverage.percent),
                matched_pis=tuple(sorted(coverage.matched_pis)),
                all_pis=tuple(sorted(coverage.all_pis)),
            )

        qualitative = QualitativeJustification(matched_pis=tuple(sorted(set(matched_ids))))

        return Justification(
            outcome_id=outcome.id,
            alignment_statement=statement,
            quantitative=quantitative,
            qualitative=qualitative,
            enriched=enriched,
            syllabus_unit=top_unit.number if top_unit is not None else None,
        )
