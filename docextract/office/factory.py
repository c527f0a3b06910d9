from docextract.office.base import BaseSpreadsheetReader, BaseWordReader
from docextract.office.docx_adapter import DocxAdapter
from docextract.office.excel_adapter import ExcelAdapter


class OfficeReaderFactory:
    """Creates the office-format readers."""

    @classmethod
    def create_word_reader(cls) -> BaseWordReader:
        return DocxAdapter()

    @classmethod
    def create_spreadsheet_reader(cls) -> BaseSpreadsheetReader:
        return ExcelAdapter()
