from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class OcrResult:
    text: str
    confidence: float  # percent, 0-100


class BaseOcrEngine(ABC):
    """Contract for all OCR adapters."""

    @abstractmethod
    def recognize(self, image_bytes: bytes, language: str) -> OcrResult:
        """Recognize text in an encoded image (PNG, JPEG).

        Raises:
            OcrError: if the image cannot be decoded or recognition fails.
        """
