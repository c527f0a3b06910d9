class PdfReadError(Exception):
    """Raised when a PDF engine cannot read a document."""
