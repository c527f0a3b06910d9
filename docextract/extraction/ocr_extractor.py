import math
from pathlib import Path

from docextract.extraction.base import BaseExtractor, estimate_page_count, page_sequence
from docextract.extraction.file_types import FileFamily
from docextract.extraction.models import ExtractionMetadata, ExtractionResult
from docextract.logging.logger import Log
from docextract.ocr.base import BaseOcrEngine
from docextract.ocr.exceptions import OcrError


class ImageExtractor(BaseExtractor):
    """Runs OCR over an image file. Never reports tables."""

    family = FileFamily.IMAGE
    label = "OCR"

    def __init__(self, engine: BaseOcrEngine, language: str = "eng") -> None:
        self._engine = engine
        self._language = language

    def extract(self, path: Path) -> ExtractionResult:
        try:
            image_bytes = path.read_bytes()
            result = self._engine.recognize(image_bytes, self._language)
        except (OSError, OcrError) as exc:
            raise self._failed(exc) from exc

        text = result.text.strip()
        page_count = estimate_page_count(text)
        Log.debug(f"OCR confidence for {path.name}: {result.confidence:.1f}")
        return ExtractionResult(
            text=text,
            metadata=ExtractionMetadata(
                page_count=page_count,
                extraction_confidence=_clamp_confidence(result.confidence),
                processed_pages=page_sequence(page_count),
            ),
        )


def _clamp_confidence(confidence: float) -> int:
    return max(0, min(100, math.floor(confidence + 0.5)))
