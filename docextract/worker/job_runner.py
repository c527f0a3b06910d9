from docextract.logging.logger import Log
from docextract.processor.models import Job
from docextract.processor.pipeline import PipelineContext
from docextract.processor.processor import Processor
from docextract.progress.cleanup import TrackerCleanupScheduler
from docextract.progress.tracker import ProgressTracker


class JobRunner:
    """Run one job to a terminal state. Nothing raised here escapes."""

    def __init__(self, processor: Processor, cleanup: TrackerCleanupScheduler) -> None:
        self._processor = processor
        self._cleanup = cleanup

    def run(self, job: Job, tracker: ProgressTracker) -> None:
        context = PipelineContext(
            job_id=job.id,
            file_path=job.file_path,
            file_type_tag=job.file_type,
            tracker=tracker,
        )
        try:
            self._processor.process(context)
        except Exception as exc:
            Log.exception(f"Job {job.id} failed: {exc}")
        finally:
            self._cleanup.schedule(job.id)
