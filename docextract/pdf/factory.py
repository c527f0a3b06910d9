from docextract.config.settings import Settings
from docextract.pdf.base import BasePdfReader
from docextract.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docextract.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfReaderFactory:
    """Maps ``settings.pdf_engine`` onto a reader; the name is case-insensitive."""

    ENGINES: dict[str, type[BasePdfReader]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def engine_names(cls) -> list[str]:
        return sorted(cls.ENGINES)

    @classmethod
    def create(cls, settings: Settings) -> BasePdfReader:
        name = settings.pdf_engine.strip().lower()
        try:
            reader_cls = cls.ENGINES[name]
        except KeyError:
            raise ValueError(
                f"Unknown PDF engine '{name}'; configure one of {', '.join(cls.engine_names())}"
            ) from None
        return reader_cls()
