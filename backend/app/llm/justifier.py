"""
justifier.py
- Purpose: Generative alignment statement for one mapped (CO, outcome) cell.
- Contract: returns a sentence, or None when enrichment is disabled,
  unavailable, times out or comes back empty. Never raises LLM errors; the
  caller falls back to the deterministic template.
"""

from __future__ import annotations

import logging
import re

from app.catalog.models import Outcome
from app.llm.client import LLMClient
from app.llm.errors import LLMError
from app.mapping.levels import describe_level
from app.mapping.types import CourseOutcome, MatchSet
from app.schemas.syllabus_schema import SyllabusData, SyllabusUnit

logger = logging.getLogger("app.llm.justifier")

PROMPT_NAME = "justify_mapping"
MAX_SYLLABUS_UNITS = 5
UNIT_SNIPPET_CHARS = 200


def _unit_line(unit: SyllabusUnit) -> str:
    return f"Unit {unit.number}: {unit.title} - {(unit.content or unit.title)[:UNIT_SNIPPET_CHARS]}"


def _syllabus_context(syllabus: SyllabusData | None, top_unit: SyllabusUnit | None) -> str:
    if top_unit is not None:
        return f"- Most relevant syllabus unit: {_unit_line(top_unit)}"
    if syllabus is not None and syllabus.units:
        units = "; ".join(_unit_line(u) for u in syllabus.units[:MAX_SYLLABUS_UNITS])
        return f"- Course syllabus units: {units}"
    return ""


def clean_statement(text: str) -> str:
    """First non-empty line, outer quotes dropped, whitespace collapsed."""
    for line in (text or "").splitlines():
        line = line.strip().strip('"').strip("“”").strip()
        if line:
            return re.sub(r"\s+", " ", line)
    return ""


class GenerativeJustifier:
    def __init__(self, client: LLMClient, *, prompt_version: str = "v1"):
        self.client = client
        self.prompt_version = prompt_version

    @property
    def available(self) -> bool:
        return self.client.enabled

    async def justify(
        self,
        co: CourseOutcome,
        outcome: Outcome,
        correlation_value: int,
        match_set: MatchSet,
        syllabus: SyllabusData | None = None,
        top_unit: SyllabusUnit | None = None,
    ) -> str | None:
        if not self.available or not match_set:
            return None

        primary = match_set[0]
        if not primary.matched_pis:
            return None
        pi = primary.matched_pis[0]

        variables = {
            "co_id": co.id,
            "co_number": co.number,
            "co_description": co.description,
            "co_level": describe_level(co.cognitive_level),
            "outcome_id": outcome.id,
            "outcome_title": outcome.title,
            "outcome_level": describe_level(outcome.cognitive_level),
            "correlation_value": correlation_value,
            "competency_id": primary.competency_id,
            "competency_description": primary.competency_description,
            "pi_id": pi.pi_id,
            "pi_description": pi.pi_description,
            "syllabus_context": _syllabus_context(syllabus, top_unit),
        }

        try:
            resp = await self.client.generate(
                purpose="justify_mapping",
                prompt_name=PROMPT_NAME,
                prompt_version=self.prompt_version,
                variables=variables,
                response_mime_type=None,
            )
        except LLMError as e:
            logger.warning(
                "justification.llm_unavailable",
                extra={"co": co.id, "outcome": outcome.id, "error_type": type(e).__name__, "error": str(e)},
            )
            return None

        return clean_statement(resp.output_text) or None
