from pathlib import Path

from docextract.extraction.base import BaseExtractor, page_sequence
from docextract.extraction.file_types import FileFamily
from docextract.extraction.models import ExtractionMetadata, ExtractionResult, Table
from docextract.pdf.base import BasePdfReader
from docextract.pdf.exceptions import PdfReadError


class PageDocumentExtractor(BaseExtractor):
    """Exact pagination; tables come from the PDF engine's own detector.

    An engine reporting no tables for a page is taken at its word: there
    is no way to tell "no detector" from "no tables on this page".
    """

    family = FileFamily.PAGE_DOCUMENT
    label = "PDF"
    CONFIDENCE = 95

    def __init__(self, reader: BasePdfReader) -> None:
        self._reader = reader

    def extract(self, path: Path) -> ExtractionResult:
        try:
            pages = self._reader.read_pages(path)
        except PdfReadError as exc:
            raise self._failed(exc) from exc

        tables = [
            Table(page_number=page_number, table_index=index, data=rows)
            for page_number in sorted(pages.tables_by_page)
            for index, rows in enumerate(
                table for table in pages.tables_by_page[page_number] if table
            )
        ]
        return ExtractionResult(
            text=pages.text,
            tables=tables,
            metadata=ExtractionMetadata(
                page_count=pages.page_count,
                extraction_confidence=self.CONFIDENCE,
                processed_pages=page_sequence(pages.page_count),
            ),
        )
