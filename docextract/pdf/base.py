from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class PdfPages:
    """Raw output of a PDF engine.

    tables_by_page maps a 1-based page number to the tables the engine
    found on that page, each table being a list of rows of cell strings.
    An engine without table detection leaves it empty.
    """

    page_count: int
    text: str
    tables_by_page: dict[int, list[list[list[str]]]] = field(default_factory=dict)


class BasePdfReader(ABC):
    """Contract for all PDF reading adapters."""

    @abstractmethod
    def read_pages(self, path: Path) -> PdfPages:
        """Read page count, full text and per-page tables from a PDF file.

        Raises:
            PdfReadError: if the file cannot be parsed for any reason.
        """


def clean_rows(rows: list[list[object]]) -> list[list[str]]:
    """Normalize engine cell values to strings; empty cells become ''."""
    return [["" if cell is None else str(cell) for cell in row] for row in rows]
