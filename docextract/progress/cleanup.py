import threading

from docextract.logging.logger import Log
from docextract.progress.registry import TrackerRegistry


class TrackerCleanupScheduler:
    """Drops a job's tracker from the registry after a retention delay."""

    def __init__(self, registry: TrackerRegistry, retention_seconds: float) -> None:
        self._registry = registry
        self._retention_seconds = retention_seconds
        self._lock = threading.Lock()
        self._timers: dict[str, threading.Timer] = {}

    def schedule(self, job_id: str) -> None:
        """Schedule removal of job_id's tracker. Repeated calls are ignored."""
        with self._lock:
            if job_id in self._timers:
                return
            timer = threading.Timer(self._retention_seconds, self._expire, args=(job_id,))
            timer.daemon = True
            timer.name = f"tracker-cleanup-{job_id}"
            self._timers[job_id] = timer
        timer.start()

    def pending(self) -> int:
        with self._lock:
            return len(self._timers)

    def cancel_all(self) -> None:
        """Stop every pending timer without removing trackers."""
        with self._lock:
            timers = list(self._timers.values())
            self._timers.clear()
        for timer in timers:
            timer.cancel()

    def _expire(self, job_id: str) -> None:
        self._registry.remove(job_id)
        with self._lock:
            self._timers.pop(job_id, None)
        Log.debug(f"Progress tracker for job {job_id} removed")
