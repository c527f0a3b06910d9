from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class RawText:
    text: str
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Sheet:
    name: str
    rows: list[list[str]]


class BaseWordReader(ABC):
    """Contract for word-processor document readers."""

    @abstractmethod
    def extract_raw_text(self, path: Path) -> RawText:
        """Return the document's plain text plus any conversion warnings.

        Raises:
            WordReadError: if the document cannot be opened or parsed.
        """


class BaseSpreadsheetReader(ABC):
    """Contract for workbook readers."""

    @abstractmethod
    def read_all_cells(self, path: Path) -> list[Sheet]:
        """Return every sheet in workbook order with its cells as strings.

        Rows are padded with '' to the sheet's widest row.

        Raises:
            SpreadsheetReadError: if the workbook cannot be opened or parsed.
        """
