class WordReadError(Exception):
    """Raised when a word-processor document cannot be read."""


class SpreadsheetReadError(Exception):
    """Raised when a workbook cannot be read."""
