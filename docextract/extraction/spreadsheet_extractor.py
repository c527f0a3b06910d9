from pathlib import Path

from docextract.extraction.base import BaseExtractor, page_sequence
from docextract.extraction.file_types import FileFamily
from docextract.extraction.models import ExtractionMetadata, ExtractionResult, Table
from docextract.office.base import BaseSpreadsheetReader, Sheet
from docextract.office.exceptions import SpreadsheetReadError


class SpreadsheetExtractor(BaseExtractor):
    """One page per sheet; one table per sheet that has any non-empty row."""

    family = FileFamily.SPREADSHEET
    label = "Excel"
    CONFIDENCE = 98

    def __init__(self, reader: BaseSpreadsheetReader) -> None:
        self._reader = reader

    def extract(self, path: Path) -> ExtractionResult:
        try:
            sheets = self._reader.read_all_cells(path)
        except SpreadsheetReadError as exc:
            raise self._failed(exc) from exc

        tables: list[Table] = []
        for index, sheet in enumerate(sheets):
            rows = [row for row in sheet.rows if any(cell != "" for cell in row)]
            if rows:
                tables.append(Table(page_number=index + 1, table_index=index, data=rows))

        return ExtractionResult(
            text="\n\n".join(_sheet_text(sheet) for sheet in sheets).strip(),
            tables=tables,
            metadata=ExtractionMetadata(
                page_count=len(sheets),
                extraction_confidence=self.CONFIDENCE,
                processed_pages=page_sequence(len(sheets)),
            ),
        )


def _sheet_text(sheet: Sheet) -> str:
    body = "\n".join("\t".join(row) for row in sheet.rows)
    return f"Sheet: {sheet.name}\n{body}"
