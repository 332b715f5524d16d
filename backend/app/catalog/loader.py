"""app/catalog/loader.py

Validate an external outcome catalog and build the immutable ``Catalog``.

Input shape (JSON-compatible):
    {outcome_id: {title, description?, cognitiveLevel,
                  competencies: {competency_id: {description,
                                                 performanceIndicators: {pi_id: description}}}}}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from pydantic import TypeAdapter, ValidationError

from app.catalog.cse_catalog import CSE_CATALOG
from app.catalog.models import Catalog, Competency, Outcome, freeze
from app.core import AppError, ErrorCode, ErrorReason, internal_error
from app.schemas.catalog_schema import OutcomeEntry

logger = logging.getLogger("app.catalog")

_CATALOG_ADAPTER = TypeAdapter(dict[str, OutcomeEntry])


def _invalid(message: str, details: dict | None = None) -> AppError:
    return internal_error(ErrorReason.CATALOG_INVALID, code=ErrorCode.CATALOG_INVALID, message=message, details=details)


def build_catalog(raw: Mapping[str, Any]) -> Catalog:
    try:
        entries = _CATALOG_ADAPTER.validate_python(dict(raw))
    except ValidationError as e:
        raise _invalid("Outcome catalog failed validation", {"errors": e.errors(include_url=False, include_context=False, include_input=False)}) from e

    if not entries:
        raise _invalid("Outcome catalog is empty")

    seen_pis: dict[str, str] = {}
    outcomes: dict[str, Outcome] = {}
    po_ids: list[str] = []
    pso_ids: list[str] = []

    for outcome_id, entry in entries.items():
        competencies: dict[str, Competency] = {}
        for comp_id, comp in entry.competencies.items():
            for pi_id in comp.performance_indicators:
                if pi_id in seen_pis:
                    raise _invalid(
                        f"Duplicate performance indicator id {pi_id!r}",
                        {"pi_id": pi_id, "outcomes": [seen_pis[pi_id], outcome_id]},
                    )
                seen_pis[pi_id] = outcome_id

            competencies[comp_id] = Competency(
                id=comp_id,
                description=comp.description,
                performance_indicators=freeze(comp.performance_indicators),
            )

        outcome = Outcome(
            id=outcome_id,
            title=entry.title,
            cognitive_level=entry.cognitive_level,
            competencies=freeze(competencies),
            description=entry.description or "",
        )
        outcomes[outcome_id] = outcome
        (pso_ids if outcome.kind == "PSO" else po_ids).append(outcome_id)

    return Catalog(outcomes=freeze(outcomes), po_ids=tuple(po_ids), pso_ids=tuple(pso_ids))


def load_catalog(path: str | None = None) -> Catalog:
    """
    Load the reference catalog once at process start.
    Uses the built-in CSE catalog unless a JSON file path is given.
    """
    if not path:
        catalog = build_catalog(CSE_CATALOG)
        source = "builtin:cse"
    else:
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise _invalid(f"Could not read catalog file: {path}") from e
        if not isinstance(raw, dict):
            raise _invalid("Catalog file must contain a JSON object")
        catalog = build_catalog(raw)
        source = str(path)

    logger.info(
        "catalog.loaded",
        extra={"source": source, "pos": len(catalog.po_ids), "psos": len(catalog.pso_ids)},
    )
    return catalog
