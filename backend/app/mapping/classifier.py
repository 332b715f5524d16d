"""
classifier.py
- Purpose: Turn a MatchSet plus cognitive levels into a correlation value (1-3).

Two estimators:
- qualitative: CO cognitive level vs outcome cognitive level
- quantitative: share of the outcome's PIs covered by the MatchSet
  (>60% -> 3, 40-60% -> 2, <40% -> 1)

Reconciliation: quantitative wins when defined, with two guard rails:
- CO two or more levels below the outcome -> forced to 1
- CO one level below and quantitative == 3 -> capped at 2
"""

from __future__ import annotations

from typing import Optional

from app.catalog.models import Outcome
from app.mapping.types import Classification, Coverage, MatchSet

HIGH_COVERAGE_PERCENT = 60.0
MEDIUM_COVERAGE_PERCENT = 40.0

STRENGTH_LABELS = {3: "High", 2: "Medium", 1: "Low"}


def qualitative_correlation(co_level: int, outcome_level: int) -> int:
    if co_level > outcome_level:
        return 3
    if co_level == outcome_level:
        return 2
    return 1


def coverage_band(percent: float) -> int:
    if percent > HIGH_COVERAGE_PERCENT:
        return 3
    if percent >= MEDIUM_COVERAGE_PERCENT:
        return 2
    return 1


def strength_label(percent: float) -> str:
    return STRENGTH_LABELS[coverage_band(percent)]


def quantitative_correlation(matched: int, total: int) -> Optional[int]:
    if total <= 0:
        return None
    return coverage_band(matched * 100 / total)


def reconcile(co_level: int, outcome_level: int, quantitative: Optional[int]) -> int:
    if quantitative is None:
        return qualitative_correlation(co_level, outcome_level)
    if co_level <= outcome_level - 2:
        return 1
    if co_level < outcome_level and quantitative == 3:
        return 2
    return quantitative


def collect_matched_pis(match_set: MatchSet) -> list[str]:
    """Distinct PI ids across the whole MatchSet, first-seen order."""
    seen: list[str] = []
    for m in match_set:
        for pi in m.matched_pis:
            if pi.pi_id and pi.pi_id not in seen:
                seen.append(pi.pi_id)
    return seen


def measure_coverage(outcome: Outcome, match_set: MatchSet) -> Coverage:
    return Coverage(
        matched_pis=tuple(collect_matched_pis(match_set)),
        all_pis=tuple(outcome.all_pi_ids()),
    )


def classify(co_level: int, outcome: Outcome, match_set: MatchSet) -> Classification:
    coverage = measure_coverage(outcome, match_set)
    qualitative = qualitative_correlation(co_level, outcome.cognitive_level)

    if not match_set:
        return Classification(value=None, qualitative=qualitative, quantitative=None, coverage=coverage)

    quantitative = quantitative_correlation(coverage.matched, coverage.total)
    return Classification(
        value=reconcile(co_level, outcome.cognitive_level, quantitative),
        qualitative=qualitative,
        quantitative=quantitative,
        coverage=coverage,
    )
