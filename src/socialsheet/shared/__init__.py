from __future__ import annotations

from .a1 import (
    column_index_to_label,
    column_label_to_index,
    coordinate_to_row_col,
    is_valid_coordinate,
    row_col_to_coordinate,
    split_coordinate,
)
from .escape import escape_text, unescape_text

__all__ = [
    "column_index_to_label",
    "column_label_to_index",
    "coordinate_to_row_col",
    "escape_text",
    "is_valid_coordinate",
    "row_col_to_coordinate",
    "split_coordinate",
    "unescape_text",
]
