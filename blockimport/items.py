"""Block data model and Pydantic serialization schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from bs4 import Tag
from pydantic import BaseModel, Field, field_validator

# A cell is a detached node (image copy, content fragment, link copy) or a
# plain string (tab label, empty placeholder).
Cell = Union[Tag, str]
Row = list[Cell]


# ---------------------------------------------------------------------------
# Block (in-memory result of a parser)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Block:
    """A named grid of rows, ready for the block assembler.

    Frozen once built; parsers hand rows over complete.
    """

    name: str
    rows: list[Row] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def column_count(self) -> int:
        return max((len(r) for r in self.rows), default=0)

    def to_schema(self) -> BlockSchema:
        return BlockSchema(
            name=self.name,
            rows=[[cell_to_html(c) for c in row] for row in self.rows],
        )


def cell_to_html(cell: Cell) -> str:
    if isinstance(cell, Tag):
        return str(cell)
    return str(cell or "")


def cell_to_text(cell: Cell) -> str:
    if isinstance(cell, Tag):
        return cell.get_text(separator=" ").strip()
    return str(cell or "").strip()


# ---------------------------------------------------------------------------
# Pydantic schemas (JSON output)
# ---------------------------------------------------------------------------

class BlockSchema(BaseModel):
    """Serialized block: every cell rendered to an HTML string."""

    name: str
    rows: list[list[str]] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


class SkippedContainer(BaseModel):
    selector: str
    variant: str
    reason: str


class ImportSchema(BaseModel):
    """Canonical output of a page import."""

    url: str = ""
    html: str = ""
    blocks: list[BlockSchema] = Field(default_factory=list)
    skipped: list[SkippedContainer] = Field(default_factory=list)

    @field_validator("url", mode="before")
    @classmethod
    def strip_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v or ""
