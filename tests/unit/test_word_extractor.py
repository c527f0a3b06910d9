from pathlib import Path
from unittest.mock import MagicMock

import pytest

from docextract.extraction.exceptions import ExtractionFailedError
from docextract.extraction.word_extractor import WordDocumentExtractor
from docextract.office.base import BaseWordReader, RawText
from docextract.office.docx_adapter import DocxAdapter
from docextract.office.exceptions import WordReadError


def _make_extractor(raw: RawText) -> WordDocumentExtractor:
    reader = MagicMock(spec=BaseWordReader)
    reader.extract_raw_text.return_value = raw
    return WordDocumentExtractor(reader)


class TestWordDocumentExtractor:
    def test_confidence_without_warnings(self) -> None:
        result = _make_extractor(RawText(text="hello world")).extract(Path("a.docx"))

        assert result.metadata.extraction_confidence == 95
        assert result.metadata.page_count == 1
        assert result.metadata.processed_pages == [1]

    def test_confidence_with_warnings(self) -> None:
        raw = RawText(text="hello", warnings=["1 embedded image(s) skipped"])

        result = _make_extractor(raw).extract(Path("a.docx"))

        assert result.metadata.extraction_confidence == 85

    def test_tables_come_from_line_heuristic(self) -> None:
        raw = RawText(text="Intro\nName\tAge\nAnn\t31\nOutro")

        result = _make_extractor(raw).extract(Path("a.docx"))

        assert len(result.tables) == 1
        assert result.tables[0].data == [["Name", "Age"], ["Ann", "31"]]
        assert result.tables[0].page_number == 1

    def test_page_estimate_uses_word_count(self) -> None:
        raw = RawText(text=" ".join(["w"] * 1001))

        result = _make_extractor(raw).extract(Path("a.docx"))

        assert result.metadata.page_count == 3
        assert result.metadata.processed_pages == [1, 2, 3]

    def test_reader_error_is_wrapped(self) -> None:
        reader = MagicMock(spec=BaseWordReader)
        reader.extract_raw_text.side_effect = WordReadError("not a zip file")

        with pytest.raises(ExtractionFailedError, match="Failed to extract DOCX content"):
            WordDocumentExtractor(reader).extract(Path("a.docx"))


class TestWordDocumentExtractorWithPythonDocx:
    def test_table_in_generated_document_is_detected(self, docx_file: Path) -> None:
        result = WordDocumentExtractor(DocxAdapter()).extract(docx_file)

        assert "Quarterly summary" in result.text
        assert result.metadata.extraction_confidence == 95
        assert len(result.tables) == 1
        assert result.tables[0].data == [
            ["Region", "Q1", "Q2"],
            ["North", "10", "12"],
            ["South", "7", "9"],
        ]

    def test_invalid_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.docx"
        path.write_bytes(b"not a docx")

        with pytest.raises(ExtractionFailedError):
            WordDocumentExtractor(DocxAdapter()).extract(path)
