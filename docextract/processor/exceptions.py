class ProcessorError(Exception):
    """Base exception for job submission and processing errors."""


class DocumentNotFoundError(ProcessorError):
    """Raised when a document record cannot be found in the store."""


class PersistenceError(ProcessorError):
    """Raised when a write to or read from the document store fails."""


class InvalidFileError(ProcessorError):
    """Raised when submitted file metadata is rejected."""


class FileTooLargeError(InvalidFileError):
    """Raised when a submitted file exceeds the configured size limit."""


class JobRejectedError(ProcessorError):
    """Raised when the worker pool has no room for another job."""
