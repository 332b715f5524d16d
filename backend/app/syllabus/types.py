"""app/syllabus/types.py

Lightweight dataclasses for syllabus extraction outputs.
Extraction is deterministic (no LLM).
"""


from dataclasses import dataclass

PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MSWORD = "application/msword"
TEXT = "text/plain"

ALLOWED_CONTENT_TYPES = frozenset({PDF, DOCX, MSWORD, TEXT})


@dataclass(frozen=True)
class ExtractedSyllabus:
    text: str
    strategy: str  # "pymupdf" | "pypdf" | "python-docx" | "plain"
    page_count: int | None = None
