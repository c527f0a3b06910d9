from pathlib import Path

import pytest

from docextract.pdf.exceptions import PdfReadError
from docextract.pdf.pdfplumber_adapter import PdfPlumberAdapter


def _write(tmp_path: Path, data: bytes) -> Path:
    path = tmp_path / "doc.pdf"
    path.write_bytes(data)
    return path


class TestPdfPlumberAdapter:
    def test_reads_text(self, tmp_path: Path, sample_pdf_bytes: bytes) -> None:
        pages = PdfPlumberAdapter().read_pages(_write(tmp_path, sample_pdf_bytes))

        assert "Hello PDF World" in pages.text
        assert pages.page_count == 1

    def test_multi_page(self, tmp_path: Path, multi_page_pdf_bytes: bytes) -> None:
        pages = PdfPlumberAdapter().read_pages(_write(tmp_path, multi_page_pdf_bytes))

        assert pages.page_count == 2
        assert "Page one content" in pages.text
        assert "Page two content" in pages.text

    def test_plain_text_page_has_no_tables(
        self, tmp_path: Path, sample_pdf_bytes: bytes
    ) -> None:
        pages = PdfPlumberAdapter().read_pages(_write(tmp_path, sample_pdf_bytes))

        assert pages.tables_by_page == {}

    def test_ruled_table_is_detected(
        self, tmp_path: Path, ruled_table_pdf_bytes: bytes
    ) -> None:
        pages = PdfPlumberAdapter().read_pages(_write(tmp_path, ruled_table_pdf_bytes))

        assert 1 in pages.tables_by_page
        cells = [cell for row in pages.tables_by_page[1][0] for cell in row]
        assert "Apple" in cells
        assert all(isinstance(cell, str) for cell in cells)

    def test_raises_on_invalid_file(self, tmp_path: Path) -> None:
        with pytest.raises(PdfReadError, match="pdfplumber"):
            PdfPlumberAdapter().read_pages(_write(tmp_path, b"not a pdf"))
