from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileMeta:
    """An uploaded file as handed over by the request layer."""

    file_name: str
    original_name: str
    file_path: Path
    file_size: int

    @property
    def extension(self) -> str:
        return Path(self.original_name).suffix.lower().lstrip(".")


@dataclass(frozen=True)
class Job:
    """One document to process."""

    id: str
    file_path: Path
    file_type: str
