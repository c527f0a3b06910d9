from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from docextract.extraction.models import Table


class ProcessingStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class DocumentMetadata:
    page_count: int = 0
    extraction_confidence: int = 0
    processed_pages: list[int] = field(default_factory=list)
    extraction_date: datetime | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "pageCount": self.page_count,
            "extractionConfidence": self.extraction_confidence,
            "processedPages": list(self.processed_pages),
            "extractionDate": _iso(self.extraction_date),
        }


@dataclass
class DocumentRecord:
    """Represents a row from the documents table."""

    id: str
    file_name: str
    original_name: str
    file_path: str
    file_type: str
    file_size: int
    processing_status: ProcessingStatus = ProcessingStatus.PENDING
    extracted_text: str = ""
    extracted_tables: list[Table] = field(default_factory=list)
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)
    error_message: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self, include_content: bool = True) -> dict[str, object]:
        """JSON-ready view; the list view leaves out text and table data."""
        payload: dict[str, object] = {
            "id": self.id,
            "fileName": self.file_name,
            "originalName": self.original_name,
            "filePath": self.file_path,
            "fileType": self.file_type,
            "fileSize": self.file_size,
            "processingStatus": self.processing_status.value,
            "metadata": self.metadata.to_dict(),
            "errorMessage": self.error_message,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
        }
        if include_content:
            payload["extractedText"] = self.extracted_text
            payload["extractedTables"] = [t.to_dict() for t in self.extracted_tables]
        else:
            payload["extractedTables"] = [
                {key: value for key, value in t.to_dict().items() if key != "data"}
                for t in self.extracted_tables
            ]
        return payload


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
