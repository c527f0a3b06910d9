import json
import sys
import time
from pathlib import Path

from docextract.config.settings import Settings
from docextract.database.connection import close_pool, init_pool
from docextract.extraction.exceptions import ExtractionError
from docextract.logging.logger import Log
from docextract.processor.exceptions import ProcessorError
from docextract.processor.models import FileMeta
from docextract.service.document_service import DocumentService, build_document_service

_TERMINAL = {"completed", "failed"}


def main(argv: list[str] | None = None) -> int:
    """Entry point: submit files -> poll until terminal -> print records."""
    paths = [Path(p) for p in (sys.argv[1:] if argv is None else argv)]
    if not paths:
        print("usage: python -m docextract.main FILE [FILE ...]", file=sys.stderr)
        return 2

    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)
    service, pool, cleanup = build_document_service(settings)

    try:
        job_ids = [job_id for job_id in (_submit(service, p) for p in paths) if job_id]
        _wait_for_jobs(service, job_ids, settings.progress_poll_interval_seconds)
        for job_id in job_ids:
            print(json.dumps(service.get_document(job_id).to_dict(), indent=2))
    finally:
        pool.shutdown(wait=True)
        cleanup.cancel_all()
        close_pool()
    return 0


def _submit(service: DocumentService, path: Path) -> str | None:
    try:
        meta = FileMeta(
            file_name=path.name,
            original_name=path.name,
            file_path=path.resolve(),
            file_size=path.stat().st_size,
        )
        return service.submit_job(meta)
    except (OSError, ProcessorError, ExtractionError) as exc:
        Log.error(f"Could not submit {path}: {exc}")
        return None


def _wait_for_jobs(service: DocumentService, job_ids: list[str], interval: float) -> None:
    remaining = set(job_ids)
    while remaining:
        for job_id in sorted(remaining):
            progress = service.query_progress(job_id)
            Log.info(
                f"Job {job_id}: {progress['status']} {progress['progress']}% "
                f"{progress['step']}"
            )
            if progress["status"] in _TERMINAL:
                remaining.discard(job_id)
        if remaining:
            time.sleep(interval)


if __name__ == "__main__":
    sys.exit(main())
