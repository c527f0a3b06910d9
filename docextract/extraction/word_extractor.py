from pathlib import Path

from docextract.extraction.base import BaseExtractor, estimate_page_count, page_sequence
from docextract.extraction.file_types import FileFamily
from docextract.extraction.models import ExtractionMetadata, ExtractionResult
from docextract.extraction.table_heuristic import detect_tables_in_text
from docextract.logging.logger import Log
from docextract.office.base import BaseWordReader
from docextract.office.exceptions import WordReadError


class WordDocumentExtractor(BaseExtractor):
    family = FileFamily.WORD_DOCUMENT
    label = "DOCX"
    CONFIDENCE = 95
    CONFIDENCE_WITH_WARNINGS = 85

    def __init__(self, reader: BaseWordReader) -> None:
        self._reader = reader

    def extract(self, path: Path) -> ExtractionResult:
        try:
            raw = self._reader.extract_raw_text(path)
        except WordReadError as exc:
            raise self._failed(exc) from exc

        for warning in raw.warnings:
            Log.warning(f"DOCX conversion warning for {path.name}: {warning}")

        page_count = estimate_page_count(raw.text)
        confidence = self.CONFIDENCE_WITH_WARNINGS if raw.warnings else self.CONFIDENCE
        return ExtractionResult(
            text=raw.text,
            tables=detect_tables_in_text(raw.text),
            metadata=ExtractionMetadata(
                page_count=page_count,
                extraction_confidence=confidence,
                processed_pages=page_sequence(page_count),
            ),
        )
