"""app/syllabus/parse.py

Split extracted syllabus text into units (unit-wise, not topic-wise).

Recognised headers (after trimming each line):
- "Unit 3: Trees and Graphs", "Module 2 - Sorting", "Chapter 4. Hashing"
- "3. Trees and Graphs", "3: Trees and Graphs"
- "Unit 3" (bare header)
"""

from __future__ import annotations

import re

from app.schemas.syllabus_schema import SyllabusData, SyllabusUnit

_TITLED_HEADER = re.compile(r"^(module|unit|chapter)\s+(\d+)[:.\s-]+(.+)", re.IGNORECASE)
_NUMBERED_HEADER = re.compile(r"^(\d+)[:.]\s+(.+)")
_BARE_HEADER = re.compile(r"^(unit|module|chapter)\s+(\d+)\s*$", re.IGNORECASE)

# Lines that start another section; never folded into a unit's content.
_SECTION_START = re.compile(r"^(module|unit|chapter|course|outcome|reference)", re.IGNORECASE)

SUMMARY_MIN_PARAGRAPH_CHARS = 50
SUMMARY_PARAGRAPHS = 3


def _header(line: str) -> tuple[str, str] | None:
    m = _TITLED_HEADER.match(line)
    if m:
        return m.group(2), m.group(3).strip()
    m = _NUMBERED_HEADER.match(line)
    if m:
        return m.group(1), m.group(2).strip()
    m = _BARE_HEADER.match(line)
    if m:
        return m.group(2), line
    return None


def extract_summary(text: str) -> str:
    paragraphs = [p.strip() for p in re.split(r"\n\s*\n", text or "")]
    paragraphs = [p for p in paragraphs if len(p) > SUMMARY_MIN_PARAGRAPH_CHARS]
    return "\n\n".join(paragraphs[:SUMMARY_PARAGRAPHS])


def extract_syllabus_units(text: str) -> SyllabusData:
    units: list[SyllabusUnit] = []
    current: dict | None = None

    for raw in (text or "").splitlines():
        line = raw.strip()
        if not line:
            continue

        header = _header(line)
        if header:
            if current:
                units.append(SyllabusUnit(**current))
            number, title = header
            # header line is part of the unit's searchable content
            current = {"number": number, "title": title, "content": line}
            continue

        if current and not _SECTION_START.match(line):
            current["content"] += " " + line

    if current:
        units.append(SyllabusUnit(**current))

    return SyllabusData(units=units, full_text=text or "", summary=extract_summary(text))
