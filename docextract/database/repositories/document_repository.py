from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from docextract.database.connection import get_connection
from docextract.database.models import DocumentMetadata, DocumentRecord, ProcessingStatus
from docextract.extraction.models import ExtractionResult, Table
from docextract.processor.exceptions import DocumentNotFoundError, PersistenceError

_COLUMNS = """
    id, file_name, original_name, file_path, file_type, file_size,
    processing_status, extracted_text, extracted_tables, page_count,
    extraction_confidence, processed_pages, extraction_date, error_message,
    created_at, updated_at
"""


@contextmanager
def _store_errors(operation: str) -> Generator[None, None, None]:
    try:
        yield
    except psycopg.Error as exc:
        raise PersistenceError(f"Failed to {operation}: {exc}") from exc


class DocumentRepository:
    """Database operations for the documents table."""

    def create(self, record: DocumentRecord) -> DocumentRecord:
        """Insert a new pending document and return it with timestamps."""
        with _store_errors("create document"):
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"""
                        INSERT INTO documents
                        (id, file_name, original_name, file_path, file_type,
                         file_size, processing_status)
                        VALUES (%s::uuid, %s, %s, %s, %s, %s, %s)
                        RETURNING {_COLUMNS}
                        """,
                        (
                            record.id,
                            record.file_name,
                            record.original_name,
                            record.file_path,
                            record.file_type,
                            record.file_size,
                            ProcessingStatus.PENDING.value,
                        ),
                    )
                    row = cur.fetchone()
                conn.commit()
        assert row is not None
        return _to_record(row)

    def find_by_id(self, document_id: str) -> DocumentRecord:
        """Find a document by id.

        Raises:
            DocumentNotFoundError: if no document with this id exists.
        """
        with _store_errors("load document"):
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"SELECT {_COLUMNS} FROM documents WHERE id = %s::uuid",
                        (document_id,),
                    )
                    row = cur.fetchone()

        if row is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return _to_record(row)

    def list_page(
        self,
        file_type: str | None = None,
        status: str | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[DocumentRecord]:
        """Newest first, with extracted text left out."""
        where, params = _filters(file_type, status)
        with _store_errors("list documents"):
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"""
                        SELECT {_COLUMNS.replace("extracted_text", "'' AS extracted_text")}
                        FROM documents
                        {where}
                        ORDER BY created_at DESC
                        LIMIT %s OFFSET %s
                        """,
                        (*params, limit, offset),
                    )
                    rows = cur.fetchall()
        return [_to_record(row) for row in rows]

    def count(self, file_type: str | None = None, status: str | None = None) -> int:
        where, params = _filters(file_type, status)
        with _store_errors("count documents"):
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(f"SELECT COUNT(*) FROM documents {where}", params)
                    row = cur.fetchone()
        return int(row[0]) if row is not None else 0

    def mark_processing(self, document_id: str) -> None:
        self._execute_update(
            document_id,
            "mark document processing",
            """
            UPDATE documents
            SET processing_status = 'processing', updated_at = NOW()
            WHERE id = %s::uuid
            """,
            (document_id,),
        )

    def mark_completed(self, document_id: str, result: ExtractionResult) -> None:
        """Store the extraction result and stamp the extraction date."""
        self._execute_update(
            document_id,
            "store extraction result",
            """
            UPDATE documents
            SET processing_status = 'completed',
                extracted_text = %s,
                extracted_tables = %s,
                page_count = %s,
                extraction_confidence = %s,
                processed_pages = %s,
                extraction_date = NOW(),
                error_message = NULL,
                updated_at = NOW()
            WHERE id = %s::uuid
            """,
            (
                result.text,
                Jsonb([t.to_dict() for t in result.tables]),
                result.metadata.page_count,
                result.metadata.extraction_confidence,
                Jsonb(list(result.metadata.processed_pages)),
                document_id,
            ),
        )

    def mark_failed(self, document_id: str, error: str) -> None:
        """Record the failure; extraction fields are reset to empty."""
        self._execute_update(
            document_id,
            "mark document failed",
            """
            UPDATE documents
            SET processing_status = 'failed',
                error_message = %s,
                extracted_text = '',
                extracted_tables = '[]'::jsonb,
                updated_at = NOW()
            WHERE id = %s::uuid
            """,
            (error, document_id),
        )

    def delete(self, document_id: str) -> None:
        self._execute_update(
            document_id,
            "delete document",
            "DELETE FROM documents WHERE id = %s::uuid",
            (document_id,),
        )

    def _execute_update(
        self,
        document_id: str,
        operation: str,
        query: str,
        params: tuple[Any, ...],
    ) -> None:
        with _store_errors(operation):
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(query, params)
                    if cur.rowcount == 0:
                        raise DocumentNotFoundError(f"Document {document_id} not found")
                conn.commit()


def _filters(file_type: str | None, status: str | None) -> tuple[str, tuple[Any, ...]]:
    clauses: list[str] = []
    params: list[Any] = []
    if file_type:
        clauses.append("file_type = %s")
        params.append(file_type)
    if status:
        clauses.append("processing_status = %s")
        params.append(status)
    where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
    return where, tuple(params)


def _to_record(row: dict[str, Any]) -> DocumentRecord:
    return DocumentRecord(
        id=str(row["id"]),
        file_name=row["file_name"],
        original_name=row["original_name"],
        file_path=row["file_path"],
        file_type=row["file_type"],
        file_size=row["file_size"],
        processing_status=ProcessingStatus(row["processing_status"]),
        extracted_text=row["extracted_text"] or "",
        extracted_tables=[Table.from_dict(t) for t in row["extracted_tables"] or []],
        metadata=DocumentMetadata(
            page_count=row["page_count"],
            extraction_confidence=row["extraction_confidence"],
            processed_pages=list(row["processed_pages"] or []),
            extraction_date=row["extraction_date"],
        ),
        error_message=row["error_message"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
