from collections.abc import Mapping
from pathlib import Path

from docextract.extraction.base import BaseExtractor
from docextract.extraction.file_types import FileFamily, FileType, parse_file_type
from docextract.extraction.models import ExtractionResult
from docextract.logging.logger import Log


class ExtractionDispatcher:
    """Routes a file type to the extractor of its format family.

    Every family must have an extractor; there is no fallback.
    """

    def __init__(self, extractors: Mapping[FileFamily, BaseExtractor]) -> None:
        missing = [family.name for family in FileFamily if family not in extractors]
        if missing:
            raise ValueError(f"No extractor registered for: {', '.join(missing)}")
        self._extractors = dict(extractors)

    def extractor_for(self, file_type: str | FileType) -> BaseExtractor:
        """Raises UnsupportedFileTypeError for unknown tags."""
        return self._extractors[parse_file_type(file_type).family]

    def dispatch(self, file_type: str | FileType, path: Path) -> ExtractionResult:
        extractor = self.extractor_for(file_type)
        Log.debug(f"Dispatching {path.name} to {type(extractor).__name__}")
        return extractor.extract(path)
