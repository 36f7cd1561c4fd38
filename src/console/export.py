# src/console/export.py
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Any, List, Mapping, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Table, TableStyle

from src.console.fields import FIELDS

XLSX_FILENAME = "EmployeeData.xlsx"
PDF_FILENAME = "Employee_Report.pdf"
SHEET_TITLE = "Employees"
REPORT_TITLE = "Employee Report"

Record = Mapping[str, Any]


class ExportError(Exception):
    pass


def _cell(record: Record, key: str) -> str:
    value = record.get(key)
    if value is None and key == "sex":
        value = record.get("gender")
    return "" if value is None else str(value)


def _rows(records: Sequence[Record]) -> List[List[str]]:
    return [[_cell(r, f.key) for f in FIELDS] for r in records]


def export_workbook(records: Sequence[Record]) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    headers = [f.label for f in FIELDS]
    ws.append(headers)
    header_fill = PatternFill(start_color="4338CA", end_color="4338CA", fill_type="solid")
    for col in range(1, len(headers) + 1):
        cell = ws.cell(row=1, column=col)
        cell.font = Font(bold=True, color="FFFFFF")
        cell.fill = header_fill

    for row in _rows(records):
        ws.append(row)

    for idx, header in enumerate(headers, start=1):
        longest = max([len(header)] + [len(_cell(r, FIELDS[idx - 1].key)) for r in records])
        ws.column_dimensions[get_column_letter(idx)].width = min(longest + 2, 40)
    ws.freeze_panes = "A2"

    out = BytesIO()
    wb.save(out)
    return out.getvalue()


def export_pdf(records: Sequence[Record]) -> bytes:
    """An empty collection gives a header-only table, like the workbook."""
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=landscape(A4),
        leftMargin=10 * mm,
        rightMargin=10 * mm,
        topMargin=12 * mm,
        bottomMargin=12 * mm,
        title=REPORT_TITLE,
    )
    styles = getSampleStyleSheet()
    cell_style = styles["BodyText"].clone("EmployeeCell", fontSize=6, leading=7)
    head_style = cell_style.clone("EmployeeHead", fontName="Helvetica-Bold", textColor=colors.white)

    data = [[Paragraph(f.label, head_style) for f in FIELDS]]
    for row in _rows(records):
        data.append([Paragraph(_escape(v), cell_style) for v in row])

    col_width = doc.width / len(FIELDS)
    table = Table(data, colWidths=[col_width] * len(FIELDS), repeatRows=1)
    style = [
        ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor("#4338CA")),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('GRID', (0, 0), (-1, -1), 0.25, colors.grey),
    ]
    if records:
        style.append(('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.HexColor("#EEF2FF")]))
    table.setStyle(TableStyle(style))

    elements = [Paragraph(REPORT_TITLE, styles["Title"]), table]
    doc.build(elements)
    return buffer.getvalue()


def _escape(text: str) -> str:
    # Paragraph parses a small XML markup
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


_EXPORTERS = {
    "xlsx": (export_workbook, XLSX_FILENAME),
    "pdf": (export_pdf, PDF_FILENAME),
}


def write_export(kind: str, records: Sequence[Record], directory: Path | str = ".") -> Path:
    """Write an export into ``directory`` under its fixed file name and return the path."""
    try:
        render, filename = _EXPORTERS[kind]
    except KeyError:
        raise ExportError(f"Unknown export format '{kind}' (expected one of {sorted(_EXPORTERS)})")
    path = Path(directory) / filename
    path.write_bytes(render(records))
    return path
