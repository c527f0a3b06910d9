import io
from pathlib import Path

import docx
import openpyxl
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from docextract.progress.tracker import ProgressTracker


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def ruled_table_pdf_bytes() -> bytes:
    """Generate a one-page PDF with a 3x2 table drawn with ruling lines."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    left, top, col_w, row_h = 72, 700, 120, 24
    cells = [["Name", "Qty"], ["Apple", "3"], ["Pear", "5"]]
    for r in range(len(cells) + 1):
        y = top - r * row_h
        c.line(left, y, left + 2 * col_w, y)
    for col in range(3):
        x = left + col * col_w
        c.line(x, top, x, top - len(cells) * row_h)
    for r, row in enumerate(cells):
        for col, value in enumerate(row):
            c.drawString(left + col * col_w + 6, top - (r + 1) * row_h + 8, value)
    c.save()
    return buf.getvalue()


@pytest.fixture()
def pdf_file(tmp_path: Path, multi_page_pdf_bytes: bytes) -> Path:
    path = tmp_path / "report.pdf"
    path.write_bytes(multi_page_pdf_bytes)
    return path


@pytest.fixture()
def docx_file(tmp_path: Path) -> Path:
    """A .docx with a heading paragraph, a 3x3 table and a closing paragraph."""
    document = docx.Document()
    document.add_paragraph("Quarterly summary")
    table = document.add_table(rows=3, cols=3)
    for r, row in enumerate([["Region", "Q1", "Q2"], ["North", "10", "12"], ["South", "7", "9"]]):
        for c, value in enumerate(row):
            table.cell(r, c).text = value
    document.add_paragraph("End of report")
    path = tmp_path / "summary.docx"
    document.save(str(path))
    return path


@pytest.fixture()
def xlsx_file(tmp_path: Path) -> Path:
    """Workbook with a populated Sheet1 and an empty Sheet2."""
    workbook = openpyxl.Workbook()
    sheet1 = workbook.active
    sheet1.title = "Sheet1"
    sheet1.append(["Item", "Price"])
    sheet1.append(["Tea", 4.5])
    sheet1.append([None, None])
    sheet1.append(["Coffee", 3])
    workbook.create_sheet("Sheet2")
    path = tmp_path / "prices.xlsx"
    workbook.save(str(path))
    return path


@pytest.fixture()
def text_file(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    path.write_text(" ".join(["word"] * 1000), encoding="utf-8")
    return path


@pytest.fixture()
def tracker() -> ProgressTracker:
    return ProgressTracker("job-1")
