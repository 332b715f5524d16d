"""app/export/docx_export.py

Render a computed matrix as a Word document (python-docx):
title, course info, colour-coded CO x PO/PSO table with an average row,
legend, then the reasoning grouped by CO.
"""

from __future__ import annotations

import io
import re

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn

from app.schemas.matrix_schema import MatrixResponse

HEADER_PO_FILL = "4472C4"
HEADER_PSO_FILL = "5B9BD5"
ROW_LABEL_FILL = "D9E1F2"
AVERAGE_FILL = "E2EFDA"

VALUE_FILLS = {
    3: "C6EFCE",  # light green
    2: "FFEB9C",  # light yellow
    1: "FFC7CE",  # light red
}
EMPTY_FILL = "F2F2F2"

LEGEND = [
    "3 - High: more than 60% of the outcome's PIs covered",
    "2 - Medium: 40-60% of PIs covered, or high coverage one cognitive level short",
    "1 - Low: under 40% of PIs covered, or CO two or more cognitive levels below the outcome",
    "- - No correlation",
]


def _numeric_key(identifier: str) -> tuple[int, str]:
    m = re.search(r"\d+", identifier or "")
    return (int(m.group()) if m else 10**6, identifier)


def _shade(cell, fill: str) -> None:
    tc_pr = cell._tc.get_or_add_tcPr()
    shd = OxmlElement("w:shd")
    shd.set(qn("w:val"), "clear")
    shd.set(qn("w:color"), "auto")
    shd.set(qn("w:fill"), fill)
    tc_pr.append(shd)


def _write_cell(cell, text: str, *, fill: str, bold: bool = False) -> None:
    cell.text = ""
    para = cell.paragraphs[0]
    para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    run = para.add_run(text)
    run.bold = bold
    _shade(cell, fill)


def _matrix_table(doc, result: MatrixResponse, po_ids: list[str], pso_ids: list[str], co_ids: list[str]) -> None:
    columns = [*po_ids, *pso_ids]
    table = doc.add_table(rows=1, cols=len(columns) + 1)
    table.style = "Table Grid"

    header = table.rows[0].cells
    _write_cell(header[0], "CO / Outcome", fill=HEADER_PO_FILL, bold=True)
    for i, oid in enumerate(columns, start=1):
        _write_cell(header[i], oid, fill=HEADER_PSO_FILL if oid in pso_ids else HEADER_PO_FILL, bold=True)

    for co_id in co_ids:
        row = table.add_row().cells
        _write_cell(row[0], co_id, fill=ROW_LABEL_FILL)
        values = result.matrix.get(co_id, {})
        for i, oid in enumerate(columns, start=1):
            value = values.get(oid)
            _write_cell(
                row[i],
                str(value) if value is not None else "-",
                fill=VALUE_FILLS.get(value, EMPTY_FILL),
                bold=True,
            )

    avg_row = table.add_row().cells
    _write_cell(avg_row[0], "Average", fill=ROW_LABEL_FILL)
    for i, oid in enumerate(columns, start=1):
        avg = result.averages.get(oid)
        _write_cell(avg_row[i], f"{avg:.2f}" if avg is not None else "-", fill=AVERAGE_FILL, bold=True)


def _reasoning_section(doc, result: MatrixResponse, po_ids: list[str], pso_ids: list[str], co_ids: list[str]) -> None:
    doc.add_heading("Reasoning & Justification", level=2)

    written = 0
    for co_id in co_ids:
        row = result.reasoning.get(co_id) or {}
        entries = [
            (oid, kind, row[oid])
            for ids, kind in ((po_ids, "PO"), (pso_ids, "PSO"))
            for oid in ids
            if row.get(oid)
        ]
        if not entries:
            continue

        doc.add_heading(f"{co_id} Mappings:", level=3)
        for oid, kind, text in entries:
            value = result.matrix.get(co_id, {}).get(oid)
            label = doc.add_paragraph()
            label.add_run(f"{co_id} → {oid} ({kind}) (Level {value}):").bold = True
            doc.add_paragraph(text or "No reasoning provided.")
            written += 1

    if not written:
        doc.add_paragraph("No mappings found. No reasoning to display.")


def render_matrix_docx(result: MatrixResponse, course_name: str, course_code: str) -> bytes:
    po_ids = sorted(result.po_ids, key=_numeric_key)
    pso_ids = sorted(result.pso_ids, key=_numeric_key)
    co_ids = sorted(result.matrix.keys(), key=_numeric_key)

    doc = Document()
    title = doc.add_heading("CO-PO-PSO Mapping Matrix", level=0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    doc.add_paragraph(f"Course: {course_name}")
    doc.add_paragraph(f"Course Code: {course_code}")

    doc.add_heading("CO-PO-PSO Matrix", level=2)
    _matrix_table(doc, result, po_ids, pso_ids, co_ids)

    doc.add_heading("Legend:", level=2)
    for line in LEGEND:
        doc.add_paragraph(line)

    _reasoning_section(doc, result, po_ids, pso_ids, co_ids)

    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


def export_filename(course_code: str) -> str:
    safe = re.sub(r"[^A-Za-z0-9_-]+", "_", (course_code or "course").strip()) or "course"
    return f"{safe}_CO_PO_PSO_Matrix.docx"
