from pathlib import Path

from docextract.extraction.base import BaseExtractor, estimate_page_count, page_sequence
from docextract.extraction.file_types import FileFamily
from docextract.extraction.models import ExtractionMetadata, ExtractionResult


class PlainTextExtractor(BaseExtractor):
    """Reads UTF-8 text files. Never reports tables."""

    family = FileFamily.TEXT
    label = "TXT"
    CONFIDENCE = 100

    def extract(self, path: Path) -> ExtractionResult:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise self._failed(exc) from exc

        page_count = estimate_page_count(text)
        return ExtractionResult(
            text=text,
            metadata=ExtractionMetadata(
                page_count=page_count,
                extraction_confidence=self.CONFIDENCE,
                processed_pages=page_sequence(page_count),
            ),
        )
