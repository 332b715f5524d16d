import asyncio
import io

import pytest
from docx import Document
from fastapi import UploadFile
from starlette.datastructures import Headers

from app.core import AppError, ErrorCode
from app.schemas.syllabus_schema import SyllabusData, SyllabusUnit
from app.services.syllabus_service import SyllabusService
from app.syllabus.extract import extract_syllabus_text
from app.syllabus.parse import extract_summary, extract_syllabus_units
from app.syllabus.relevance import extract_keywords, find_relevant_units, rank_units

SYLLABUS_TEXT = """Course: Data Structures

Unit 1: Introduction to Algorithms
Asymptotic notation and recurrence relations.
Course outcomes are listed separately.

Module 2 - Trees and Graphs
Binary search trees, traversal and shortest paths.

3. Hashing
Hash tables and collision resolution.

Unit 4
Sorting and searching techniques.
"""


def test_extract_units():
    data = extract_syllabus_units(SYLLABUS_TEXT)

    assert [u.number for u in data.units] == ["1", "2", "3", "4"]
    assert data.units[0].title == "Introduction to Algorithms"
    assert data.units[1].title == "Trees and Graphs"
    assert data.units[2].title == "Hashing"
    assert data.units[3].title == "Unit 4"

    # section lines are not folded into unit content
    assert "Course outcomes" not in data.units[0].content
    assert "recurrence relations" in data.units[0].content
    assert "shortest paths" in data.units[1].content
    assert data.full_text == SYLLABUS_TEXT


def test_no_units_found():
    data = extract_syllabus_units("Just some prose without any headers.")
    assert data.units == []


def test_extract_summary_keeps_long_paragraphs():
    long_para = "x" * 60
    text = f"short\n\n{long_para}\n\n{long_para}1\n\n{long_para}2\n\n{long_para}3"
    summary = extract_summary(text)
    assert summary.split("\n\n") == [long_para, f"{long_para}1", f"{long_para}2"]


def test_relevance_keywords_drop_stop_words():
    assert extract_keywords("Apply the trees, with graphs and THEIR data") == ["apply", "trees", "graphs", "data"]


def test_rank_units_orders_by_score_and_keeps_ties_stable():
    units = [
        SyllabusUnit(number="1", title="Trees", content="binary trees"),
        SyllabusUnit(number="2", title="Graphs", content="graph traversal trees"),
        SyllabusUnit(number="3", title="Sorting", content="quick sort"),
        SyllabusUnit(number="4", title="Heaps", content="trees again"),
    ]
    ranked = rank_units("Apply trees and graph traversal", units)

    assert [r.unit.number for r in ranked] == ["2", "1", "4"]
    assert ranked[0].match_score == 3
    assert ranked[0].relevance == pytest.approx(3 / 4)


def test_find_relevant_units_limits_and_handles_missing():
    units = [SyllabusUnit(number=str(i), title=f"trees {i}") for i in range(5)]
    assert len(find_relevant_units("trees", SyllabusData(units=units))) == 3
    assert find_relevant_units("trees", None) == []
    assert find_relevant_units("the and", SyllabusData(units=units)) == []


def test_extract_plain_text():
    out = extract_syllabus_text("Unit 1: Intro".encode("utf-8"), "text/plain")
    assert out.text == "Unit 1: Intro"
    assert out.strategy == "plain"


def test_extract_docx_paragraphs_and_tables():
    doc = Document()
    doc.add_paragraph("Unit 1: Graphs")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Unit 2"
    table.rows[0].cells[1].text = "Trees"
    buf = io.BytesIO()
    doc.save(buf)

    out = extract_syllabus_text(
        buf.getvalue(), "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    )
    assert "Unit 1: Graphs" in out.text
    assert "Unit 2 Trees" in out.text


def test_extract_rejects_empty_and_unknown_types():
    with pytest.raises(AppError) as exc:
        extract_syllabus_text(b"", "text/plain")
    assert exc.value.code == ErrorCode.FILE_MISSING

    with pytest.raises(AppError) as exc:
        extract_syllabus_text(b"data", "image/png")
    assert exc.value.status_code == 415


def test_corrupt_pdf_is_unreadable():
    with pytest.raises(AppError) as exc:
        extract_syllabus_text(b"not a pdf at all", "application/pdf")
    assert exc.value.code == ErrorCode.SYLLABUS_EXTRACTION_FAILED
    assert exc.value.status_code == 422


def _upload(data: bytes, filename: str, content_type: str) -> UploadFile:
    return UploadFile(
        file=io.BytesIO(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


def test_service_parses_upload():
    svc = SyllabusService(max_bytes=1024 * 1024)
    data = asyncio.run(svc.parse_upload(_upload(SYLLABUS_TEXT.encode(), "ds.txt", "text/plain")))
    assert len(data.units) == 4


def test_service_rejects_oversized_upload():
    svc = SyllabusService(max_bytes=10)
    with pytest.raises(AppError) as exc:
        asyncio.run(svc.parse_upload(_upload(SYLLABUS_TEXT.encode(), "ds.txt", "text/plain")))
    assert exc.value.code == ErrorCode.FILE_TOO_LARGE
    assert exc.value.status_code == 413
