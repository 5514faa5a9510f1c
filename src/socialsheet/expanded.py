"""Expanded cell-record format back to compact format."""

from __future__ import annotations

from collections.abc import Iterator
import logging

from .models import CellRecord, FormulaCell, NumericCell, TextCell
from .shared.escape import unescape_text

logger = logging.getLogger(__name__)

_CELL_PREFIX = "cell:"


def parse_cell_record(line: str) -> CellRecord | None:
    """Parse one ``cell:`` line into a typed record.

    Args:
        line: Expanded-format line.

    Returns:
        The cell record, or None when the line is not a usable cell record
        (other record type, too few fields, or unknown kind).
    """
    line = line.strip()
    if not line.startswith(_CELL_PREFIX):
        return None
    parts = line.split(":")
    if len(parts) < 4:
        return None
    coord, kind = parts[1], parts[2]
    if kind == "t":
        return TextCell(coord=coord, text=unescape_text(parts[3]))
    if kind == "v":
        return NumericCell(coord=coord, value=parts[3])
    if kind == "vtf":
        if len(parts) < 6:
            return None
        return FormulaCell(
            coord=coord,
            cache_kind=parts[3],
            cache_value=parts[4],
            formula=parts[5],
        )
    logger.debug("Skipping cell %s with unsupported kind %r", coord, kind)
    return None


def iter_cell_records(text: str) -> Iterator[CellRecord]:
    """Yield the cell records of an expanded document in input order."""
    for line in text.split("\n"):
        record = parse_cell_record(line)
        if record is not None:
            yield record


def convert_to_compact(text: str) -> str:
    """Convert expanded-format text into compact ``coordinate:value`` text.

    Never raises. Cells whose value is empty are dropped, so an empty text
    cell and a missing cell both disappear from the output.

    Args:
        text: Expanded-format text.

    Returns:
        Compact-format text, lines joined with ``\\n``.
    """
    lines: list[str] = []
    for record in iter_cell_records(text):
        value = record.compact_value()
        if value:
            lines.append(f"{record.coord}:{value}")
    return "\n".join(lines)
