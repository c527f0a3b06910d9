import threading

from docextract.progress.tracker import ProgressTracker


class TrackerRegistry:
    """Mutex-guarded map of job id to its active progress tracker.

    At most one tracker exists per job id; ``create`` replaces a stale one.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._trackers: dict[str, ProgressTracker] = {}

    def create(self, job_id: str) -> ProgressTracker:
        tracker = ProgressTracker(job_id)
        with self._lock:
            self._trackers[job_id] = tracker
        return tracker

    def get(self, job_id: str) -> ProgressTracker | None:
        with self._lock:
            return self._trackers.get(job_id)

    def remove(self, job_id: str) -> None:
        with self._lock:
            self._trackers.pop(job_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._trackers)

    def __contains__(self, job_id: object) -> bool:
        with self._lock:
            return job_id in self._trackers
