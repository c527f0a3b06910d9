from docextract.extraction.dispatcher import ExtractionDispatcher
from docextract.extraction.exceptions import (
    ExtractionError,
    ExtractionFailedError,
    UnsupportedFileTypeError,
)
from docextract.extraction.file_types import FileFamily, FileType, parse_file_type
from docextract.extraction.models import ExtractionMetadata, ExtractionResult, Table
from docextract.extraction.table_heuristic import detect_tables

__all__ = [
    "ExtractionDispatcher",
    "ExtractionError",
    "ExtractionFailedError",
    "ExtractionMetadata",
    "ExtractionResult",
    "FileFamily",
    "FileType",
    "Table",
    "UnsupportedFileTypeError",
    "detect_tables",
    "parse_file_type",
]
