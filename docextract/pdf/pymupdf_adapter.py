from pathlib import Path

import pymupdf

from docextract.pdf.base import BasePdfReader, PdfPages, clean_rows
from docextract.pdf.exceptions import PdfReadError


class PyMuPdfAdapter(BasePdfReader):
    """Reads PDF text and tables using PyMuPDF."""

    def read_pages(self, path: Path) -> PdfPages:
        try:
            with pymupdf.open(path) as doc:  # type: ignore[no-untyped-call]
                texts: list[str] = []
                tables_by_page: dict[int, list[list[list[str]]]] = {}
                for number, page in enumerate(doc, start=1):
                    texts.append(page.get_text())
                    found = page.find_tables()
                    tables = [clean_rows(t.extract()) for t in found.tables]
                    tables = [t for t in tables if t]
                    if tables:
                        tables_by_page[number] = tables
                page_count = doc.page_count
            return PdfPages(
                page_count=page_count,
                text="\n".join(texts).strip(),
                tables_by_page=tables_by_page,
            )
        except Exception as exc:
            raise PdfReadError(f"pymupdf extraction failed: {exc}") from exc
