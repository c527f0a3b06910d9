from pathlib import Path

import docx
from docx.table import Table as DocxTable

from docextract.office.base import BaseWordReader, RawText
from docextract.office.exceptions import WordReadError


class DocxAdapter(BaseWordReader):
    """Reads .docx files with python-docx.

    Paragraphs and tables are emitted in body order; every table row
    becomes one line of tab-separated cell texts.
    """

    def extract_raw_text(self, path: Path) -> RawText:
        try:
            document = docx.Document(str(path))
            lines: list[str] = []
            for block in document.iter_inner_content():
                if isinstance(block, DocxTable):
                    lines.extend(_table_lines(block))
                else:
                    lines.append(block.text)
            image_count = len(document.inline_shapes)
        except Exception as exc:
            raise WordReadError(f"python-docx extraction failed: {exc}") from exc

        warnings = []
        if image_count:
            warnings.append(f"{image_count} embedded image(s) skipped")
        return RawText(text="\n".join(lines), warnings=warnings)


def _table_lines(table: DocxTable) -> list[str]:
    return ["\t".join(cell.text.strip() for cell in row.cells) for row in table.rows]
