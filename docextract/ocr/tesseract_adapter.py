import io

import pytesseract
from PIL import Image

from docextract.ocr.base import BaseOcrEngine, OcrResult
from docextract.ocr.exceptions import OcrError


class TesseractAdapter(BaseOcrEngine):
    """Recognizes text with the Tesseract engine through pytesseract."""

    def __init__(self, tesseract_cmd: str = "") -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, image_bytes: bytes, language: str) -> OcrResult:
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                image.load()
                data = pytesseract.image_to_data(
                    image,
                    lang=language,
                    output_type=pytesseract.Output.DICT,
                )
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
        return OcrResult(text=_join_words(data), confidence=_mean_confidence(data))


def _mean_confidence(data: dict[str, list[object]]) -> float:
    # -1 marks layout boxes (blocks, lines) that carry no word
    scores = [float(c) for c in data.get("conf", []) if float(c) >= 0]  # type: ignore[arg-type]
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def _join_words(data: dict[str, list[object]]) -> str:
    """Rebuild text from image_to_data output, one line per Tesseract line."""
    lines: list[str] = []
    current_key: tuple[object, ...] | None = None
    words: list[str] = []
    for i, word in enumerate(data.get("text", [])):
        key = (data["block_num"][i], data["par_num"][i], data["line_num"][i])
        if key != current_key:
            if words:
                lines.append(" ".join(words))
            words = []
            current_key = key
        if str(word).strip():
            words.append(str(word).strip())
    if words:
        lines.append(" ".join(words))
    return "\n".join(lines)
