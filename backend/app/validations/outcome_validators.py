"""
outcome_validators.py
- Purpose: Preconditions for a matrix computation.
- Design: The core refuses bad input up front instead of building a partial matrix.
"""

from typing import Sequence

from app.core import AppError, ErrorReason, unprocessable
from app.mapping.levels import MAX_LEVEL, MIN_LEVEL
from app.mapping.types import CourseOutcome


def _invalid(reason: ErrorReason, message: str, details: dict | None = None) -> AppError:
    return unprocessable(reason, message=message, details=details)


def validate_course_outcomes(course_outcomes: Sequence[CourseOutcome]) -> None:
    if not course_outcomes:
        raise _invalid(ErrorReason.MISSING_FIELDS, "At least one course outcome is required")

    seen: set[str] = set()
    for co in course_outcomes:
        co_id = (co.id or "").strip()
        if not co_id:
            raise _invalid(ErrorReason.INVALID_INPUT, "Course outcome id is required")
        if co_id in seen:
            raise _invalid(ErrorReason.INVALID_INPUT, f"Duplicate course outcome id {co_id!r}", {"co_id": co_id})
        seen.add(co_id)

        level = co.cognitive_level
        if isinstance(level, bool) or not isinstance(level, int) or not MIN_LEVEL <= level <= MAX_LEVEL:
            raise _invalid(
                ErrorReason.INVALID_COGNITIVE_LEVEL,
                f"Cognitive level for {co_id} must be an integer between {MIN_LEVEL} and {MAX_LEVEL}",
                {"co_id": co_id, "cognitive_level": str(level)},
            )

        if not isinstance(co.description, str):
            raise _invalid(ErrorReason.INVALID_INPUT, f"Description for {co_id} must be text", {"co_id": co_id})
