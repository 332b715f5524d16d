"""app/syllabus/extract.py

Deterministic syllabus file -> text extraction.

PDF strategy:
1) PyMuPDF (fitz)
2) pypdf (weak fallback)
DOCX via python-docx, TXT decoded as UTF-8.
"""

from __future__ import annotations

import io
import logging

import fitz
from docx import Document
from pypdf import PdfReader

from app.core import AppError, ErrorCode, ErrorReason
from app.syllabus.types import DOCX, MSWORD, PDF, TEXT, ExtractedSyllabus

logger = logging.getLogger("app.syllabus.extract")


def _extraction_failed(message: str) -> AppError:
    return AppError(
        code=ErrorCode.SYLLABUS_EXTRACTION_FAILED,
        reason=ErrorReason.SYLLABUS_UNREADABLE.value,
        message=message,
        status_code=422,
    )


def _pdf_with_pymupdf(data: bytes) -> ExtractedSyllabus:
    doc = fitz.open(stream=data, filetype="pdf")
    try:
        texts = [doc.load_page(i).get_text("text") or "" for i in range(doc.page_count)]
        return ExtractedSyllabus(text="\n".join(texts), strategy="pymupdf", page_count=doc.page_count)
    finally:
        doc.close()


def _pdf_with_pypdf(data: bytes) -> ExtractedSyllabus:
    reader = PdfReader(io.BytesIO(data))
    texts = [(p.extract_text() or "") for p in reader.pages]
    return ExtractedSyllabus(text="\n".join(texts), strategy="pypdf", page_count=len(reader.pages))


def _extract_pdf(data: bytes) -> ExtractedSyllabus:
    try:
        return _pdf_with_pymupdf(data)
    except Exception:
        logger.warning("syllabus.pymupdf_failed", exc_info=True)

    try:
        return _pdf_with_pypdf(data)
    except Exception as e:
        raise _extraction_failed(f"Failed to extract text from syllabus PDF: {e}") from e


def _extract_docx(data: bytes) -> ExtractedSyllabus:
    try:
        doc = Document(io.BytesIO(data))
    except Exception as e:
        raise _extraction_failed(f"Failed to read Word document: {e}") from e

    lines = [p.text for p in doc.paragraphs]
    # unit tables are common in syllabi; keep one line per row
    for table in doc.tables:
        for row in table.rows:
            cells = [c.text.strip() for c in row.cells if c.text.strip()]
            if cells:
                lines.append(" ".join(cells))
    return ExtractedSyllabus(text="\n".join(lines), strategy="python-docx")


def extract_syllabus_text(data: bytes, content_type: str) -> ExtractedSyllabus:
    if not data:
        raise AppError(
            code=ErrorCode.FILE_MISSING,
            reason=ErrorReason.FILE_MISSING.value,
            message="Empty syllabus file",
            status_code=400,
        )

    ct = (content_type or "").lower()
    if ct == PDF:
        out = _extract_pdf(data)
    elif ct in (DOCX, MSWORD):
        out = _extract_docx(data)
    elif ct == TEXT:
        out = ExtractedSyllabus(text=data.decode("utf-8", errors="replace"), strategy="plain")
    else:
        raise AppError(
            code=ErrorCode.INVALID_FILE_TYPE,
            reason=ErrorReason.UNSUPPORTED_FILE_TYPE.value,
            status_code=415,
            details={"content_type": ct},
        )

    logger.info(
        "syllabus.extracted",
        extra={"strategy": out.strategy, "chars": len(out.text), "page_count": out.page_count},
    )
    return out
