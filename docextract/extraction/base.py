import math
from abc import ABC, abstractmethod
from pathlib import Path

from docextract.extraction.exceptions import ExtractionFailedError
from docextract.extraction.file_types import FileFamily
from docextract.extraction.models import ExtractionResult

WORDS_PER_PAGE = 500


class BaseExtractor(ABC):
    """Contract for all format extractors."""

    family: FileFamily
    label: str

    @abstractmethod
    def extract(self, path: Path) -> ExtractionResult:
        """Extract text, tables and metadata from a file on disk.

        Raises:
            ExtractionFailedError: if the underlying engine fails.
        """

    def _failed(self, exc: BaseException) -> ExtractionFailedError:
        return ExtractionFailedError(
            f"Failed to extract {self.label} content: {exc}", cause=exc
        )


def count_words(text: str) -> int:
    return len(text.split())


def estimate_page_count(text: str) -> int:
    """Estimate pages for formats without native pagination."""
    return max(1, math.ceil(count_words(text) / WORDS_PER_PAGE))


def page_sequence(page_count: int) -> list[int]:
    return list(range(1, page_count + 1))
