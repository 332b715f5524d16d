# app/mapping/types.py
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional


_CO_PREFIX = re.compile(r"^\s*CO[\s_-]*", re.IGNORECASE)


@dataclass(frozen=True)
class CourseOutcome:
    id: str
    description: str
    cognitive_level: int

    @property
    def number(self) -> str:
        """Numeric suffix used in prose: CO3 -> 3."""
        return _CO_PREFIX.sub("", self.id, count=1) or self.id


@dataclass(frozen=True)
class MatchedPI:
    pi_id: str
    pi_description: str


@dataclass(frozen=True)
class CompetencyMatch:
    competency_id: str
    competency_description: str
    matched_pis: tuple[MatchedPI, ...]


# Ordered by catalog declaration; empty tuple == no mapping.
MatchSet = tuple[CompetencyMatch, ...]


@dataclass(frozen=True)
class Coverage:
    matched_pis: tuple[str, ...]  # distinct, first-seen order
    all_pis: tuple[str, ...]      # catalog order

    @property
    def matched(self) -> int:
        return len(self.matched_pis)

    @property
    def total(self) -> int:
        return len(self.all_pis)

    @property
    def percent(self) -> Optional[float]:
        if not self.all_pis:
            return None
        # multiply first so 3/5 is exactly 60.0
        return self.matched * 100 / self.total


@dataclass(frozen=True)
class Classification:
    value: Optional[int]
    qualitative: int
    quantitative: Optional[int]
    coverage: Coverage


# ----------------------------
# Structured justification
# ----------------------------
@dataclass(frozen=True)
class QuantitativeJustification:
    matched: int
    total: int
    percent: float
    value: int
    strength: str
    matched_pis: tuple[str, ...]  # sorted
    all_pis: tuple[str, ...]      # sorted

    def to_text(self, outcome_id: str) -> str:
        pct = f"{self.percent:.1f}"
        return (
            f"Quantitative (Primary): CO aligns with {self.matched} out of {self.total} PIs of {outcome_id} "
            f"(Ratio: {self.matched}/{self.total} = {pct}% coverage). "
            f"Matched PIs: [{', '.join(self.matched_pis)}]. "
            f"Total PIs for {outcome_id}: [{', '.join(self.all_pis)}]. "
            f"This {pct}% coverage determines mapping strength of {self.value} ({self.strength}) "
            f"according to AICTE Examination Reform Policy."
        )


@dataclass(frozen=True)
class QualitativeJustification:
    matched_pis: tuple[str, ...]  # sorted, deduplicated

    def to_text(self, outcome_id: str) -> str:
        return (
            f"Qualitative: CO aligns with the following Performance Indicators (PIs) of {outcome_id}: "
            f"{', '.join(self.matched_pis)}."
        )


@dataclass(frozen=True)
class Justification:
    outcome_id: str
    alignment_statement: str
    quantitative: Optional[QuantitativeJustification] = None
    qualitative: Optional[QualitativeJustification] = None
    enriched: bool = False
    syllabus_unit: Optional[str] = None

    def to_text(self) -> str:
        parts = [self.alignment_statement]
        if self.quantitative is not None:
            parts.append(self.quantitative.to_text(self.outcome_id))
        if self.qualitative is not None:
            parts.append(self.qualitative.to_text(self.outcome_id))
        return " ".join(p for p in parts if p)


@dataclass
class MatrixResult:
    matrix: dict[str, dict[str, Optional[int]]]
    reasoning: dict[str, dict[str, Optional[str]]]
    justifications: dict[str, dict[str, Optional[Justification]]]
    po_ids: list[str]
    pso_ids: list[str]
    averages: dict[str, Optional[float]] = field(default_factory=dict)

    @property
    def mapped_cells(self) -> int:
        return sum(1 for row in self.matrix.values() for v in row.values() if v is not None)
