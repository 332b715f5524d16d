"""app/syllabus/relevance.py

Rank syllabus units against a CO by keyword overlap. Pure and synchronous.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from app.schemas.syllabus_schema import SyllabusData, SyllabusUnit

TOP_UNITS = 3

STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "as", "is", "was", "are", "were", "be",
        "been", "being", "have", "has", "had", "do", "does", "did", "will",
        "would", "should", "could", "may", "might", "must", "can", "this",
        "that", "these", "those", "it", "its", "they", "them", "their",
    }
)

_PUNCT = re.compile(r"[^\w\s]")


@dataclass(frozen=True)
class RankedUnit:
    unit: SyllabusUnit
    match_score: int
    relevance: float


def extract_keywords(text: str) -> list[str]:
    words = _PUNCT.sub(" ", (text or "").lower()).split()
    out: list[str] = []
    for w in words:
        if len(w) > 3 and w not in STOP_WORDS and w not in out:
            out.append(w)
    return out


def rank_units(co_text: str, units: Iterable[SyllabusUnit]) -> list[RankedUnit]:
    keywords = extract_keywords(co_text)
    if not keywords:
        return []

    ranked: list[RankedUnit] = []
    for unit in units:
        unit_text = f"{unit.title} {unit.content or ''}".lower()
        score = sum(1 for k in keywords if k in unit_text)
        if score > 0:
            ranked.append(RankedUnit(unit=unit, match_score=score, relevance=score / len(keywords)))

    # stable: ties keep syllabus order
    ranked.sort(key=lambda r: r.match_score, reverse=True)
    return ranked


def find_relevant_units(co_text: str, syllabus: SyllabusData | None, *, limit: int = TOP_UNITS) -> list[RankedUnit]:
    if syllabus is None or not syllabus.units:
        return []
    return rank_units(co_text, syllabus.units)[:limit]
