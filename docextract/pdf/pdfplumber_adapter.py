from pathlib import Path

import pdfplumber

from docextract.pdf.base import BasePdfReader, PdfPages, clean_rows
from docextract.pdf.exceptions import PdfReadError


class PdfPlumberAdapter(BasePdfReader):
    """Reads PDF text and tables using pdfplumber."""

    def read_pages(self, path: Path) -> PdfPages:
        try:
            with pdfplumber.open(path) as pdf:
                texts: list[str] = []
                tables_by_page: dict[int, list[list[list[str]]]] = {}
                for number, page in enumerate(pdf.pages, start=1):
                    texts.append(page.extract_text() or "")
                    tables = [clean_rows(t) for t in page.extract_tables() if t]
                    if tables:
                        tables_by_page[number] = tables
                page_count = len(pdf.pages)
            return PdfPages(
                page_count=page_count,
                text="\n".join(texts).strip(),
                tables_by_page=tables_by_page,
            )
        except Exception as exc:
            raise PdfReadError(f"pdfplumber extraction failed: {exc}") from exc
