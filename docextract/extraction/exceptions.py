class ExtractionError(Exception):
    """Base exception for dispatch and extraction errors."""


class UnsupportedFileTypeError(ExtractionError):
    """Raised when a file type tag has no extractor."""

    def __init__(self, file_type: str) -> None:
        super().__init__(f"Unsupported file type '{file_type}'")
        self.file_type = file_type


class ExtractionFailedError(ExtractionError):
    """Raised when the underlying raw extraction engine fails."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
