from docextract.config.settings import Settings
from docextract.ocr.base import BaseOcrEngine
from docextract.ocr.tesseract_adapter import TesseractAdapter


class OcrEngineFactory:
    """Creates the configured OCR engine."""

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrEngine:
        return TesseractAdapter(tesseract_cmd=settings.tesseract_cmd)
