"""
matcher.py
- Purpose: Decide which competencies / PIs of one outcome a CO's text addresses.
- Rule: plain substring keyword matching. A single keyword of 4+ characters is
  enough; there is no minimum hit count.
"""

from __future__ import annotations

import re
from functools import lru_cache

from app.catalog.models import Outcome
from app.mapping.types import CompetencyMatch, MatchedPI, MatchSet

MIN_KEYWORD_LENGTH = 4

_NON_WORD = re.compile(r"[^\w]")


@lru_cache(maxsize=4096)
def extract_keywords(text: str) -> tuple[str, ...]:
    """
    lowercase -> split on whitespace -> strip non-word chars -> drop tokens
    shorter than MIN_KEYWORD_LENGTH. Order kept, duplicates dropped.
    """
    out: list[str] = []
    for token in (text or "").lower().split():
        keyword = _NON_WORD.sub("", token)
        if len(keyword) >= MIN_KEYWORD_LENGTH and keyword not in out:
            out.append(keyword)
    return tuple(out)


def _mentions_any(co_text_lower: str, keywords: tuple[str, ...]) -> bool:
    return any(k in co_text_lower for k in keywords)


def match(co_text: str, outcome: Outcome) -> MatchSet:
    co_lower = (co_text or "").lower()
    if not co_lower.strip():
        return ()

    matches: list[CompetencyMatch] = []
    for comp_id, comp in outcome.competencies.items():
        competency_hit = _mentions_any(co_lower, extract_keywords(comp.description))

        matched_pis = [
            MatchedPI(pi_id=pi_id, pi_description=desc)
            for pi_id, desc in comp.performance_indicators.items()
            if _mentions_any(co_lower, extract_keywords(desc))
        ]

        if not competency_hit and not matched_pis:
            continue

        # Competency matched on its own description: first PI stands in
        if not matched_pis:
            first = comp.first_pi
            if first is not None:
                matched_pis = [MatchedPI(pi_id=first[0], pi_description=first[1])]

        matches.append(
            CompetencyMatch(
                competency_id=comp_id,
                competency_description=comp.description,
                matched_pis=tuple(matched_pis),
            )
        )

    return tuple(matches)
