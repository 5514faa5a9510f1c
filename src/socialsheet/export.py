from __future__ import annotations

import logging
import math
from pathlib import Path
import re

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from .errors import FormatError
from .expanded import iter_cell_records
from .models import CellRecord, FormulaCell, NumericCell, TextCell
from .shared.a1 import coordinate_to_row_col

logger = logging.getLogger(__name__)

_MAX_ROW = 1_048_576
_MAX_COLUMN = 16_384
_INT_PATTERN = re.compile(r"[-+]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")

CellValue = str | int | float


def build_workbook(text: str, *, sheet_title: str = "Sheet1") -> Workbook:
    """Build an in-memory workbook from expanded-format text.

    Text cells are written as strings, numeric cells as int/float when the
    literal parses (otherwise as the raw string), and formula cells as
    ``=<formula>``. Cells that cannot be placed on an Excel grid are skipped,
    and control characters that worksheet XML cannot hold are removed.

    Args:
        text: Expanded-format text.
        sheet_title: Title of the single worksheet.

    Returns:
        openpyxl workbook with one worksheet.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title
    for record in iter_cell_records(text):
        position = _grid_position(record.coord)
        if position is None:
            logger.debug("Skipping cell outside the worksheet grid: %s", record.coord)
            continue
        row, col = position
        cell = ws.cell(row=row, column=col, value=_cell_value(record))
        if isinstance(record, TextCell) and record.text.startswith("="):
            cell.data_type = "s"
    return wb


def export_workbook(
    text: str, out_path: Path, *, sheet_title: str = "Sheet1"
) -> Path:
    """Write expanded-format text to an .xlsx file.

    Args:
        text: Expanded-format text.
        out_path: Destination workbook path.
        sheet_title: Title of the single worksheet.

    Returns:
        The path that was written.
    """
    wb = build_workbook(text, sheet_title=sheet_title)
    try:
        wb.save(out_path)
    finally:
        wb.close()
    logger.info("Exported workbook to %s", out_path)
    return out_path


def _grid_position(coord: str) -> tuple[int, int] | None:
    """Return (row, col) when coord fits on an Excel worksheet."""
    try:
        row, col = coordinate_to_row_col(coord)
    except FormatError:
        return None
    if not (1 <= row <= _MAX_ROW and 1 <= col <= _MAX_COLUMN):
        return None
    return row, col


def _cell_value(record: CellRecord) -> CellValue:
    if isinstance(record, NumericCell):
        value = _parse_number(record.value)
        if isinstance(value, str):
            return _strip_illegal(record.coord, value)
        return value
    if isinstance(record, FormulaCell):
        return _strip_illegal(record.coord, record.compact_value())
    return _strip_illegal(record.coord, record.text)


def _strip_illegal(coord: str, value: str) -> str:
    """Drop control characters that cannot be stored in worksheet XML."""
    cleaned = ILLEGAL_CHARACTERS_RE.sub("", value)
    if cleaned != value:
        logger.debug("Removed illegal characters from cell %s", coord)
    return cleaned


def _parse_number(literal: str) -> CellValue:
    """Return literal as int or finite float, or unchanged if it is not a number.

    Only plain decimal notation is accepted; Python-only spellings such as
    ``nan``, ``inf`` or ``1_000`` stay strings.
    """
    if _INT_PATTERN.fullmatch(literal):
        try:
            return int(literal)
        except ValueError:
            return literal
    if _FLOAT_PATTERN.fullmatch(literal):
        number = float(literal)
        if math.isfinite(number):
            return number
    return literal
