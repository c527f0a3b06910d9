from docextract.database.repositories.document_repository import DocumentRepository
from docextract.extraction.dispatcher import ExtractionDispatcher
from docextract.extraction.file_types import FileFamily, parse_file_type
from docextract.logging.logger import Log
from docextract.processor.exceptions import PersistenceError
from docextract.processor.pipeline import PipelineContext, PipelineStep


class ResolveFileTypeStep(PipelineStep):
    """Fails the job before any status write if the type is unsupported."""

    def run(self, context: PipelineContext) -> PipelineContext:
        context.file_type = parse_file_type(context.file_type_tag)
        return context


class MarkProcessingStep(PipelineStep):
    def __init__(self, doc_repo: DocumentRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        try:
            self._doc_repo.mark_processing(context.job_id)
            Log.info(f"Job {context.job_id} marked as processing")
        except PersistenceError as exc:
            Log.warning(f"Job {context.job_id}: could not mark as processing: {exc}")
        context.tracker.update_progress(10, "Reading file")
        return context


class ExtractStep(PipelineStep):
    def __init__(self, dispatcher: ExtractionDispatcher) -> None:
        self._dispatcher = dispatcher

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.file_type is None:
            raise ValueError("PipelineContext.file_type must be set before extraction")
        file_type = context.file_type
        context.tracker.update_progress(30, f"Processing {file_type.label} file")
        if file_type.family is FileFamily.IMAGE:
            context.tracker.update_progress(50, "Performing OCR on image")

        context.result = self._dispatcher.dispatch(file_type, context.file_path)
        Log.info(
            f"Extracted {len(context.result.text)} chars and "
            f"{len(context.result.tables)} tables for job {context.job_id}"
        )
        return context


class PersistResultStep(PipelineStep):
    def __init__(self, doc_repo: DocumentRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.result is None:
            raise ValueError("PipelineContext.result must be set before persist")
        context.tracker.update_progress(80, "Saving extracted data")
        self._doc_repo.mark_completed(context.job_id, context.result)
        return context


class CompleteStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.tracker.complete()
        Log.info(f"Job {context.job_id} completed")
        return context


class MarkFailedStep(PipelineStep):
    """Terminal failure write. The tracker fails even when the write does."""

    def __init__(self, doc_repo: DocumentRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        try:
            self._doc_repo.mark_failed(context.job_id, context.error_message)
        except Exception:
            Log.exception(f"Job {context.job_id}: could not record failure")
        context.tracker.fail(context.error_message)
        Log.error(f"Job {context.job_id} marked as failed: {context.error_message}")
        return context
