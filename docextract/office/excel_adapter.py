from datetime import date, datetime, time
from pathlib import Path

import openpyxl
import xlrd

from docextract.office.base import BaseSpreadsheetReader, Sheet
from docextract.office.exceptions import SpreadsheetReadError


class ExcelAdapter(BaseSpreadsheetReader):
    """Reads .xlsx workbooks with openpyxl and legacy .xls with xlrd."""

    def read_all_cells(self, path: Path) -> list[Sheet]:
        try:
            if path.suffix.lower() == ".xls":
                return self._read_xls(path)
            return self._read_xlsx(path)
        except Exception as exc:
            raise SpreadsheetReadError(f"workbook read failed: {exc}") from exc

    def _read_xlsx(self, path: Path) -> list[Sheet]:
        workbook = openpyxl.load_workbook(path, read_only=True, data_only=True)
        try:
            return [
                Sheet(
                    name=worksheet.title,
                    rows=_pad([list(row) for row in worksheet.iter_rows(values_only=True)]),
                )
                for worksheet in workbook.worksheets
            ]
        finally:
            workbook.close()

    def _read_xls(self, path: Path) -> list[Sheet]:
        book = xlrd.open_workbook(str(path))
        try:
            return [
                Sheet(
                    name=sheet.name,
                    rows=_pad([sheet.row_values(r) for r in range(sheet.nrows)]),
                )
                for sheet in book.sheets()
            ]
        finally:
            book.release_resources()


def _pad(rows: list[list[object]]) -> list[list[str]]:
    width = max((len(row) for row in rows), default=0)
    return [[cell_text(v) for v in row] + [""] * (width - len(row)) for row in rows]


def cell_text(value: object) -> str:
    """Render a cell value the way it reads in the sheet."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)
