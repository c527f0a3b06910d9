from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from docextract.extraction.file_types import FileType
from docextract.extraction.models import ExtractionResult
from docextract.progress.tracker import ProgressTracker


@dataclass(slots=True)
class PipelineContext:
    job_id: str
    file_path: Path
    file_type_tag: str
    tracker: ProgressTracker
    file_type: FileType | None = None
    result: ExtractionResult | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
