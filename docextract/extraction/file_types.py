from enum import Enum

from docextract.extraction.exceptions import UnsupportedFileTypeError


class FileFamily(Enum):
    """The closed set of format families the worker can extract."""

    TEXT = "text"
    SPREADSHEET = "spreadsheet"
    WORD_DOCUMENT = "word_document"
    PAGE_DOCUMENT = "page_document"
    IMAGE = "image"


class FileType(str, Enum):
    """File type tags accepted on upload, keyed by extension."""

    TXT = "txt"
    XLSX = "xlsx"
    XLS = "xls"
    DOCX = "docx"
    PDF = "pdf"
    JPG = "jpg"
    JPEG = "jpeg"
    PNG = "png"

    @property
    def family(self) -> FileFamily:
        return _FAMILIES[self]

    @property
    def label(self) -> str:
        return self.value.upper()


_FAMILIES: dict[FileType, FileFamily] = {
    FileType.TXT: FileFamily.TEXT,
    FileType.XLSX: FileFamily.SPREADSHEET,
    FileType.XLS: FileFamily.SPREADSHEET,
    FileType.DOCX: FileFamily.WORD_DOCUMENT,
    FileType.PDF: FileFamily.PAGE_DOCUMENT,
    FileType.JPG: FileFamily.IMAGE,
    FileType.JPEG: FileFamily.IMAGE,
    FileType.PNG: FileFamily.IMAGE,
}


def parse_file_type(tag: str | FileType) -> FileType:
    """Resolve an extension-like tag ("PDF", ".docx", "png") to a FileType.

    Raises:
        UnsupportedFileTypeError: if the tag is not one of the known types.
    """
    if isinstance(tag, FileType):
        return tag
    normalized = tag.strip().lower().lstrip(".")
    try:
        return FileType(normalized)
    except ValueError:
        raise UnsupportedFileTypeError(tag) from None
