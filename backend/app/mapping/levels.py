"""Cognitive (Bloom / K-level) scale helpers."""

from __future__ import annotations

MIN_LEVEL = 1
MAX_LEVEL = 6

LEVEL_NAMES: dict[int, str] = {
    1: "Remember",
    2: "Understand",
    3: "Apply",
    4: "Analyze",
    5: "Evaluate",
    6: "Create",
}


def parse_cognitive_level(value: int | str) -> int:
    """
    Accept 3, "3" or "K3" (any case) and return the integer level.
    Raises ValueError for anything non-numeric or outside 1..6.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid cognitive level: {value!r}")
    if isinstance(value, int):
        level = value
    else:
        raw = str(value or "").strip().upper()
        if raw.startswith("K"):
            raw = raw[1:]
        if not raw.isdigit():
            raise ValueError(f"Invalid cognitive level: {value!r}")
        level = int(raw)

    if level < MIN_LEVEL or level > MAX_LEVEL:
        raise ValueError(f"Cognitive level out of range (1-6): {value!r}")
    return level


def describe_level(level: int) -> str:
    return f"K{level} ({LEVEL_NAMES.get(level, 'Unknown')})"
