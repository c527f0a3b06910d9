"""Per-job, in-memory progress state.

Readers either poll ``snapshot()`` or ``subscribe()`` to a queue that
receives a ``ProgressEvent`` for every change. A tracker starts in
PROCESSING and ends in COMPLETED or FAILED.
"""

import queue
import threading
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum


class TrackerStatus(str, Enum):
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self is not TrackerStatus.PROCESSING


class EventKind(str, Enum):
    PROGRESS = "progress"
    STATUS = "status"
    ERROR = "error"


@dataclass(frozen=True)
class ProgressEvent:
    kind: EventKind
    job_id: str
    status: TrackerStatus
    progress: int
    step: str
    elapsed_ms: int
    error: str | None = None


@dataclass(frozen=True)
class ProgressSnapshot:
    job_id: str
    status: TrackerStatus
    progress: int
    step: str
    elapsed_ms: int

    def to_dict(self) -> dict[str, object]:
        return {
            "documentId": self.job_id,
            "status": self.status.value,
            "progress": self.progress,
            "step": self.step,
            "elapsed": self.elapsed_ms,
        }


class ProgressTracker:
    def __init__(self, job_id: str, step: str = "Starting document processing") -> None:
        self.job_id = job_id
        self.start_time = datetime.now(UTC)
        self._started = time.monotonic()
        self._lock = threading.Lock()
        self._status = TrackerStatus.PROCESSING
        self._progress = 0
        self._step = step
        self._subscribers: list[queue.Queue[ProgressEvent]] = []

    @property
    def status(self) -> TrackerStatus:
        with self._lock:
            return self._status

    @property
    def progress(self) -> int:
        with self._lock:
            return self._progress

    @property
    def current_step(self) -> str:
        with self._lock:
            return self._step

    def elapsed_ms(self) -> int:
        return int((time.monotonic() - self._started) * 1000)

    def snapshot(self) -> ProgressSnapshot:
        with self._lock:
            return ProgressSnapshot(
                job_id=self.job_id,
                status=self._status,
                progress=self._progress,
                step=self._step,
                elapsed_ms=self.elapsed_ms(),
            )

    def subscribe(self) -> "queue.Queue[ProgressEvent]":
        channel: queue.Queue[ProgressEvent] = queue.Queue()
        with self._lock:
            self._subscribers.append(channel)
        return channel

    def unsubscribe(self, channel: "queue.Queue[ProgressEvent]") -> None:
        with self._lock:
            if channel in self._subscribers:
                self._subscribers.remove(channel)

    def update_progress(self, progress: int, step: str = "") -> None:
        """Set progress (clamped to 0..100) and the current step."""
        with self._lock:
            self._progress = min(100, max(0, progress))
            self._step = step
            self._publish(EventKind.PROGRESS)

    def set_status(self, status: TrackerStatus, step: str = "") -> None:
        with self._lock:
            self._status = status
            self._step = step
            self._publish(EventKind.STATUS)

    def complete(self) -> None:
        self.set_status(TrackerStatus.COMPLETED, "Processing complete")
        self.update_progress(100, "Complete")

    def fail(self, error: BaseException | str) -> None:
        message = str(error)
        self.set_status(TrackerStatus.FAILED, f"Error: {message}")
        with self._lock:
            self._publish(EventKind.ERROR, error=message)

    def _publish(self, kind: EventKind, error: str | None = None) -> None:
        # caller holds self._lock
        event = ProgressEvent(
            kind=kind,
            job_id=self.job_id,
            status=self._status,
            progress=self._progress,
            step=self._step,
            elapsed_ms=self.elapsed_ms(),
            error=error,
        )
        for channel in self._subscribers:
            channel.put_nowait(event)
