from dataclasses import dataclass, field


@dataclass(frozen=True)
class TableStructure:
    rows: int
    columns: int


@dataclass(frozen=True)
class Table:
    """A detected table. Rows may be ragged."""

    page_number: int
    table_index: int
    data: list[list[str]]

    @property
    def structure(self) -> TableStructure:
        return TableStructure(
            rows=len(self.data),
            columns=len(self.data[0]) if self.data else 0,
        )

    def to_dict(self) -> dict[str, object]:
        structure = self.structure
        return {
            "pageNumber": self.page_number,
            "tableIndex": self.table_index,
            "data": [list(row) for row in self.data],
            "structure": {"rows": structure.rows, "columns": structure.columns},
        }

    @classmethod
    def from_dict(cls, payload: dict[str, object]) -> "Table":
        rows = payload.get("data") or []
        return cls(
            page_number=int(payload["pageNumber"]),  # type: ignore[call-overload]
            table_index=int(payload["tableIndex"]),  # type: ignore[call-overload]
            data=[[str(cell) for cell in row] for row in rows],  # type: ignore[union-attr]
        )


@dataclass(frozen=True)
class ExtractionMetadata:
    page_count: int
    extraction_confidence: int
    processed_pages: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class ExtractionResult:
    """Uniform output of every format extractor."""

    text: str
    metadata: ExtractionMetadata
    tables: list[Table] = field(default_factory=list)
