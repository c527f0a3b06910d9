from unittest.mock import MagicMock

import pytest

from docextract.pdf.factory import PdfReaderFactory
from docextract.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docextract.pdf.pymupdf_adapter import PyMuPdfAdapter


def _make_settings(pdf_engine: str) -> MagicMock:
    return MagicMock(pdf_engine=pdf_engine)


class TestPdfReaderFactory:
    def test_creates_pdfplumber_adapter(self) -> None:
        reader = PdfReaderFactory.create(_make_settings("pdfplumber"))
        assert isinstance(reader, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        reader = PdfReaderFactory.create(_make_settings("pymupdf"))
        assert isinstance(reader, PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        reader = PdfReaderFactory.create(_make_settings("PdfPlumber"))
        assert isinstance(reader, PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfReaderFactory.create(_make_settings("unknown"))

    def test_ignores_surrounding_whitespace(self) -> None:
        reader = PdfReaderFactory.create(_make_settings(" pymupdf "))
        assert isinstance(reader, PyMuPdfAdapter)

    def test_lists_engine_names(self) -> None:
        assert PdfReaderFactory.engine_names() == ["pdfplumber", "pymupdf"]
