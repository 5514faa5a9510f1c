from __future__ import annotations

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, Field

from .shared.escape import escape_text

FORMAT_VERSION = "1.4"


class TextCell(BaseModel):
    """Text cell record (``cell:<coord>:t:<escaped>``).

    ``text`` holds the unescaped payload; escaping happens on rendering.
    """

    kind: Literal["t"] = "t"
    coord: str
    text: str

    def to_line(self) -> str:
        """Render the expanded-format line."""
        return f"cell:{self.coord}:t:{escape_text(self.text)}"

    def compact_value(self) -> str:
        """Return the value as written in compact format."""
        return self.text


class NumericCell(BaseModel):
    """Numeric cell record (``cell:<coord>:v:<number>``).

    The literal is kept as read; it is never parsed.
    """

    kind: Literal["v"] = "v"
    coord: str
    value: str

    def to_line(self) -> str:
        """Render the expanded-format line."""
        return f"cell:{self.coord}:v:{self.value}"

    def compact_value(self) -> str:
        """Return the value as written in compact format."""
        return self.value


class FormulaCell(BaseModel):
    """Formula cell record (``cell:<coord>:vtf:<cache_kind>:<cache_value>:<formula>``)."""

    kind: Literal["vtf"] = "vtf"
    coord: str
    formula: str = Field(..., description="Formula source without leading '='.")
    cache_kind: str = "n"
    cache_value: str = "0"

    def to_line(self) -> str:
        """Render the expanded-format line."""
        return (
            f"cell:{self.coord}:vtf:{self.cache_kind}:{self.cache_value}:"
            f"{self.formula}"
        )

    def compact_value(self) -> str:
        """Return the value as written in compact format."""
        return f"={self.formula}"


CellRecord: TypeAlias = Annotated[
    TextCell | NumericCell | FormulaCell, Field(discriminator="kind")
]


class CompactLine(BaseModel):
    """One ``coordinate:value`` line of compact format."""

    coord: str
    value: str

    @property
    def is_formula(self) -> bool:
        """Return True when the value is a formula (starts with '=')."""
        return self.value.startswith("=")

    def to_record(self) -> TextCell | FormulaCell:
        """Build the matching cell record."""
        if self.is_formula:
            return FormulaCell(coord=self.coord, formula=self.value[1:])
        return TextCell(coord=self.coord, text=self.value)


class SheetDimensions(BaseModel):
    """Trailing sheet dimension record (``sheet:c:<cols>:r:<rows>``)."""

    cols: int = 10
    rows: int = 20

    def to_line(self) -> str:
        """Render the expanded-format line."""
        return f"sheet:c:{self.cols}:r:{self.rows}"


class SheetDocument(BaseModel):
    """Expanded-format document assembled from cell records."""

    version: str = FORMAT_VERSION
    cells: list[CellRecord] = Field(default_factory=list)
    dimensions: SheetDimensions = Field(default_factory=SheetDimensions)

    def to_text(self) -> str:
        """Render the document: version line, cells in order, dimensions."""
        lines = [f"version:{self.version}"]
        lines.extend(cell.to_line() for cell in self.cells)
        lines.append(self.dimensions.to_line())
        return "\n".join(lines)
