from docextract.config.settings import Settings
from docextract.database.repositories.document_repository import DocumentRepository
from docextract.extraction.dispatcher import ExtractionDispatcher
from docextract.extraction.factory import build_dispatcher
from docextract.logging.logger import Log
from docextract.processor.pipeline import PipelineContext, PipelineStep
from docextract.processor.steps import (
    CompleteStep,
    ExtractStep,
    MarkFailedStep,
    MarkProcessingStep,
    PersistResultStep,
    ResolveFileTypeStep,
)


class Processor:
    """Runs one job's steps in order.

    Pipeline: resolve type -> mark processing (10) -> extract (30, 50 for
    images) -> persist (80) -> complete (100). Any step error runs the
    failed step and is re-raised.
    """

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = steps
        self._failed_step = failed_step

    def process(self, context: PipelineContext) -> PipelineContext:
        Log.info(f"Processing job {context.job_id} ({context.file_path.name})")
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc) or type(exc).__name__
            self._failed_step.run(context)
            raise
        return context


def build_processor(
    settings: Settings,
    doc_repo: DocumentRepository | None = None,
    dispatcher: ExtractionDispatcher | None = None,
) -> Processor:
    """Build a Processor with the configured extraction engines."""
    doc_repo = doc_repo if doc_repo is not None else DocumentRepository()
    dispatcher = dispatcher if dispatcher is not None else build_dispatcher(settings)
    return Processor(
        steps=[
            ResolveFileTypeStep(),
            MarkProcessingStep(doc_repo),
            ExtractStep(dispatcher),
            PersistResultStep(doc_repo),
            CompleteStep(),
        ],
        failed_step=MarkFailedStep(doc_repo),
    )
