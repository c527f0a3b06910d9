import math
import uuid
from pathlib import Path
from typing import Any

from docextract.config.settings import Settings
from docextract.database.models import DocumentRecord, ProcessingStatus
from docextract.database.repositories.document_repository import DocumentRepository
from docextract.extraction.file_types import parse_file_type
from docextract.logging.logger import Log
from docextract.processor.exceptions import (
    FileTooLargeError,
    InvalidFileError,
    ProcessorError,
)
from docextract.processor.models import FileMeta, Job
from docextract.processor.processor import build_processor
from docextract.progress.cleanup import TrackerCleanupScheduler
from docextract.progress.registry import TrackerRegistry
from docextract.worker.job_runner import JobRunner
from docextract.worker.pool import JobPool


class DocumentService:
    """Entry point for the request layer: submit, poll, read, delete."""

    def __init__(
        self,
        doc_repo: DocumentRepository,
        registry: TrackerRegistry,
        pool: JobPool,
        job_runner: JobRunner,
        max_file_size_bytes: int,
    ) -> None:
        self._doc_repo = doc_repo
        self._registry = registry
        self._pool = pool
        self._job_runner = job_runner
        self._max_file_size_bytes = max_file_size_bytes

    def submit_job(self, file_meta: FileMeta) -> str:
        """Persist a pending record and start processing in the background.

        Returns the job id without waiting for any processing step.

        Raises:
            InvalidFileError: if the original file name is empty.
            UnsupportedFileTypeError: if the extension is not supported.
            FileTooLargeError: if the file exceeds the size limit.
            JobRejectedError: if the worker pool is saturated.
            RuntimeError: if the worker pool has been shut down.
        """
        if not file_meta.original_name.strip():
            raise InvalidFileError("File name cannot be empty")
        file_type = parse_file_type(file_meta.extension)
        if file_meta.file_size > self._max_file_size_bytes:
            raise FileTooLargeError(
                f"File size ({file_meta.file_size / 1024 / 1024:.2f}MB) exceeds "
                f"maximum allowed size of "
                f"{self._max_file_size_bytes / 1024 / 1024:.0f}MB"
            )

        job_id = str(uuid.uuid4())
        self._doc_repo.create(
            DocumentRecord(
                id=job_id,
                file_name=file_meta.file_name,
                original_name=file_meta.original_name,
                file_path=str(file_meta.file_path),
                file_type=file_type.value,
                file_size=file_meta.file_size,
            )
        )
        tracker = self._registry.create(job_id)
        job = Job(id=job_id, file_path=file_meta.file_path, file_type=file_type.value)
        try:
            self._pool.submit(self._job_runner.run, job, tracker)
        except Exception as exc:
            self._registry.remove(job_id)
            self._record_rejection(job_id, exc)
            raise

        Log.info(f"Job {job_id} submitted for {file_meta.original_name}")
        return job_id

    def query_progress(self, job_id: str) -> dict[str, object]:
        """Live progress, or the stored status once the tracker has expired.

        Raises:
            DocumentNotFoundError: if neither a tracker nor a record exists.
        """
        tracker = self._registry.get(job_id)
        if tracker is not None:
            return tracker.snapshot().to_dict()

        record = self._doc_repo.find_by_id(job_id)
        status = record.processing_status
        return {
            "documentId": job_id,
            "status": status.value,
            "progress": 100 if status is ProcessingStatus.COMPLETED else 0,
            "step": status.value,
            "elapsed": 0,
        }

    def get_document(self, job_id: str) -> DocumentRecord:
        return self._doc_repo.find_by_id(job_id)

    def list_documents(
        self,
        file_type: str | None = None,
        status: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> dict[str, Any]:
        page = max(1, page)
        limit = max(1, limit)
        documents = self._doc_repo.list_page(
            file_type=file_type, status=status, limit=limit, offset=(page - 1) * limit
        )
        total = self._doc_repo.count(file_type=file_type, status=status)
        return {
            "count": len(documents),
            "total": total,
            "page": page,
            "totalPages": math.ceil(total / limit),
            "documents": [d.to_dict(include_content=False) for d in documents],
        }

    def delete_document(self, job_id: str) -> DocumentRecord:
        """Remove the stored file and the record. A missing file is not an error."""
        record = self._doc_repo.find_by_id(job_id)
        try:
            Path(record.file_path).unlink()
        except OSError as exc:
            Log.warning(f"Could not delete file for document {job_id}: {exc}")
        self._doc_repo.delete(job_id)
        self._registry.remove(job_id)
        Log.info(f"Document {job_id} deleted")
        return record

    def _record_rejection(self, job_id: str, exc: Exception) -> None:
        try:
            self._doc_repo.mark_failed(job_id, str(exc) or type(exc).__name__)
        except ProcessorError as store_exc:
            Log.error(f"Job {job_id}: could not record rejection: {store_exc}")
        Log.warning(f"Job {job_id} rejected: {exc}")


def build_document_service(
    settings: Settings,
    registry: TrackerRegistry | None = None,
) -> tuple[DocumentService, JobPool, TrackerCleanupScheduler]:
    """Wire the service with its pool and cleanup scheduler.

    The pool and scheduler are returned so the caller can shut them down.
    """
    registry = registry if registry is not None else TrackerRegistry()
    doc_repo = DocumentRepository()
    cleanup = TrackerCleanupScheduler(registry, settings.tracker_retention_seconds)
    pool = JobPool(settings.max_concurrent_jobs, settings.max_pending_jobs)
    job_runner = JobRunner(build_processor(settings, doc_repo=doc_repo), cleanup)
    service = DocumentService(
        doc_repo=doc_repo,
        registry=registry,
        pool=pool,
        job_runner=job_runner,
        max_file_size_bytes=settings.max_file_size_bytes,
    )
    return service, pool, cleanup
