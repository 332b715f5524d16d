"""app/catalog/models.py

Immutable reference-catalog types. Built once at startup by
``app.catalog.loader`` and shared read-only by every request.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class Competency:
    id: str
    description: str
    performance_indicators: Mapping[str, str]  # pi_id -> description, catalog order

    @property
    def first_pi(self) -> tuple[str, str] | None:
        for pi_id, desc in self.performance_indicators.items():
            return pi_id, desc
        return None


@dataclass(frozen=True)
class Outcome:
    id: str
    title: str
    cognitive_level: int
    competencies: Mapping[str, Competency]  # competency_id -> Competency, catalog order
    description: str = ""

    @property
    def kind(self) -> str:
        return "PSO" if self.id.upper().startswith("PSO") else "PO"

    def all_pi_ids(self) -> list[str]:
        return [pi_id for comp in self.competencies.values() for pi_id in comp.performance_indicators]

    @property
    def total_pis(self) -> int:
        return sum(len(comp.performance_indicators) for comp in self.competencies.values())


@dataclass(frozen=True)
class Catalog:
    outcomes: Mapping[str, Outcome]
    po_ids: tuple[str, ...]
    pso_ids: tuple[str, ...]

    @property
    def outcome_ids(self) -> list[str]:
        return [*self.po_ids, *self.pso_ids]

    def get(self, outcome_id: str) -> Outcome | None:
        return self.outcomes.get(outcome_id)

    def to_dict(self) -> dict[str, Any]:
        def _outcome(o: Outcome) -> dict[str, Any]:
            return {
                "title": o.title,
                "description": o.description,
                "cognitiveLevel": o.cognitive_level,
                "competencies": {
                    cid: {
                        "description": c.description,
                        "performanceIndicators": dict(c.performance_indicators),
                    }
                    for cid, c in o.competencies.items()
                },
            }

        return {
            "pos": {oid: _outcome(self.outcomes[oid]) for oid in self.po_ids},
            "psos": {oid: _outcome(self.outcomes[oid]) for oid in self.pso_ids},
        }


def freeze(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))
