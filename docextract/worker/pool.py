import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from docextract.logging.logger import Log
from docextract.processor.exceptions import JobRejectedError


class JobPool:
    """Bounded thread pool for extraction jobs.

    At most ``max_workers`` jobs run at once and at most ``max_pending``
    are accepted (running plus queued); beyond that ``submit`` rejects.
    """

    def __init__(self, max_workers: int, max_pending: int) -> None:
        if max_pending < max_workers:
            raise ValueError("max_pending must be >= max_workers")
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="extract"
        )
        self._slots = threading.BoundedSemaphore(max_pending)

    def submit(self, fn: Callable[..., Any], *args: Any) -> Future[Any]:
        if not self._slots.acquire(blocking=False):
            raise JobRejectedError("Job rejected: extraction queue is full")
        try:
            return self._executor.submit(self._run, fn, *args)
        except RuntimeError:
            self._slots.release()
            raise

    def shutdown(self, wait: bool = True) -> None:
        Log.info("Shutting down extraction pool")
        self._executor.shutdown(wait=wait)

    def _run(self, fn: Callable[..., Any], *args: Any) -> Any:
        try:
            return fn(*args)
        finally:
            self._slots.release()
