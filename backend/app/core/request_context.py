"""
Request context helpers.

We keep a small context (request_id, course_code, co_id, outcome_id) in
ContextVars. The HTTP middleware and the matrix assembler set these values so
logs from a single matrix computation (including enrichment calls running
concurrently) stay correlatable.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_course_code: ContextVar[Optional[str]] = ContextVar("course_code", default=None)
_co_id: ContextVar[Optional[str]] = ContextVar("co_id", default=None)
_outcome_id: ContextVar[Optional[str]] = ContextVar("outcome_id", default=None)


def set_context(
    *,
    request_id: Optional[str] = None,
    course_code: Optional[str] = None,
    co_id: Optional[str] = None,
    outcome_id: Optional[str] = None,
) -> None:
    if request_id is not None:
        _request_id.set(request_id)
    if course_code is not None:
        _course_code.set(course_code)
    if co_id is not None:
        _co_id.set(co_id)
    if outcome_id is not None:
        _outcome_id.set(outcome_id)


def clear_context() -> None:
    _request_id.set(None)
    _course_code.set(None)
    _co_id.set(None)
    _outcome_id.set(None)


def get_context() -> Dict[str, Any]:
    ctx: Dict[str, Any] = {}
    rid = _request_id.get()
    course = _course_code.get()
    co = _co_id.get()
    outcome = _outcome_id.get()

    if rid:
        ctx["request_id"] = rid
    if course:
        ctx["course_code"] = course
    if co:
        ctx["co_id"] = co
    if outcome:
        ctx["outcome_id"] = outcome
    return ctx
