"""socialsheet - compact and expanded spreadsheet text formats.

Converts between the ``coordinate:value`` compact format and the expanded
cell-record format, decodes A1 coordinates and validates expanded documents.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .compact import iter_compact_lines, parse_compact
from .defaults import build_default_document
from .errors import FormatError, SocialSheetError, ValidationError
from .expanded import convert_to_compact, iter_cell_records, parse_cell_record
from .models import (
    FORMAT_VERSION,
    CellRecord,
    CompactLine,
    FormulaCell,
    NumericCell,
    SheetDimensions,
    SheetDocument,
    TextCell,
)
from .shared.a1 import coordinate_to_row_col, row_col_to_coordinate
from .shared.escape import escape_text, unescape_text
from .validate import ValidationReport, check_document, validate_document

__all__ = [
    "FORMAT_VERSION",
    "CellRecord",
    "CompactLine",
    "FormatError",
    "FormulaCell",
    "NumericCell",
    "SheetDimensions",
    "SheetDocument",
    "SocialSheetError",
    "TextCell",
    "ValidationError",
    "ValidationReport",
    "__version__",
    "build_default_document",
    "check_document",
    "convert_to_compact",
    "coordinate_to_row_col",
    "escape_text",
    "iter_cell_records",
    "iter_compact_lines",
    "parse_cell_record",
    "parse_compact",
    "row_col_to_coordinate",
    "unescape_text",
    "validate_document",
]
