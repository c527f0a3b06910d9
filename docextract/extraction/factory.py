from docextract.config.settings import Settings
from docextract.extraction.dispatcher import ExtractionDispatcher
from docextract.extraction.file_types import FileFamily
from docextract.extraction.ocr_extractor import ImageExtractor
from docextract.extraction.pdf_extractor import PageDocumentExtractor
from docextract.extraction.spreadsheet_extractor import SpreadsheetExtractor
from docextract.extraction.text_extractor import PlainTextExtractor
from docextract.extraction.word_extractor import WordDocumentExtractor
from docextract.ocr.factory import OcrEngineFactory
from docextract.office.factory import OfficeReaderFactory
from docextract.pdf.factory import PdfReaderFactory


def build_dispatcher(settings: Settings) -> ExtractionDispatcher:
    """Wire every format family to its extractor and configured engine."""
    return ExtractionDispatcher(
        {
            FileFamily.TEXT: PlainTextExtractor(),
            FileFamily.SPREADSHEET: SpreadsheetExtractor(
                OfficeReaderFactory.create_spreadsheet_reader()
            ),
            FileFamily.WORD_DOCUMENT: WordDocumentExtractor(
                OfficeReaderFactory.create_word_reader()
            ),
            FileFamily.PAGE_DOCUMENT: PageDocumentExtractor(
                PdfReaderFactory.create(settings)
            ),
            FileFamily.IMAGE: ImageExtractor(
                OcrEngineFactory.create(settings), language=settings.ocr_language
            ),
        }
    )
