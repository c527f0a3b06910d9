"""Line-pattern table detection for text without native table structure.

A line is a row candidate when it contains a tab or has more than two
segments separated by runs of two or more whitespace characters. Runs of
consecutive rows form a table; a run of a single row is discarded.

Known limitation: prose with incidental double spaces can be picked up,
and ruled or merged-cell tables are not detected.
"""

import re
from collections.abc import Iterable

from docextract.extraction.models import Table

_WIDE_GAP = re.compile(r"\s{2,}")
_CELL_SEPARATOR = re.compile(r"\t|\s{2,}")


def is_row_candidate(line: str) -> bool:
    return "\t" in line or len(_WIDE_GAP.split(line)) > 2


def split_cells(line: str) -> list[str]:
    return [cell for cell in _CELL_SEPARATOR.split(line) if cell.strip()]


def detect_tables(lines: Iterable[str]) -> list[Table]:
    """Detect tables in an ordered sequence of text lines.

    Every table is reported on page 1 with indexes in discovery order.
    """
    tables: list[Table] = []
    rows: list[list[str]] = []

    def flush() -> None:
        if len(rows) > 1:
            tables.append(Table(page_number=1, table_index=len(tables), data=list(rows)))
        rows.clear()

    for raw_line in lines:
        line = raw_line.strip()
        if is_row_candidate(line):
            cells = split_cells(line)
            if len(cells) > 1:
                rows.append(cells)
        elif rows:
            flush()

    flush()
    return tables


def detect_tables_in_text(text: str) -> list[Table]:
    return detect_tables(text.split("\n"))
