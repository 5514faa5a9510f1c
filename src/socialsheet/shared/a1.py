from __future__ import annotations

import re

from ..errors import FormatError

_COORDINATE_PATTERN = re.compile(r"[A-Z]+[0-9]+")
_COLUMN_LABEL_PATTERN = re.compile(r"[A-Z]+")


def is_valid_coordinate(value: str) -> bool:
    """Return True when value is an upper-case A1 coordinate such as ``AA12``."""
    return _COORDINATE_PATTERN.fullmatch(value) is not None


def split_coordinate(value: str) -> tuple[str, int]:
    """Split A1 notation into (column_label, row_index).

    Raises:
        FormatError: If value is not letters followed by digits.
    """
    if not is_valid_coordinate(value):
        raise FormatError(value)
    idx = 0
    for index, char in enumerate(value):
        if char.isdigit():
            idx = index
            break
    column = value[:idx]
    try:
        row = int(value[idx:])
    except ValueError as exc:
        raise FormatError(
            value, f"Invalid row number in coordinate: {value}"
        ) from exc
    return column, row


def column_label_to_index(label: str) -> int:
    """Convert Excel-style column label (A/AA) to 1-based index."""
    if not _COLUMN_LABEL_PATTERN.fullmatch(label):
        raise FormatError(label, f"Invalid column label: {label}")
    index = 0
    for char in label:
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index


def column_index_to_label(index: int) -> str:
    """Convert 1-based column index to Excel-style column label.

    Returns an empty string for indices below 1.
    """
    chunks: list[str] = []
    current = index
    while current > 0:
        current -= 1
        chunks.append(chr(ord("A") + (current % 26)))
        current //= 26
    return "".join(reversed(chunks))


def coordinate_to_row_col(coord: str) -> tuple[int, int]:
    """Convert an A1 coordinate to 1-based (row, column).

    Args:
        coord: Coordinate such as ``B3`` or ``AA12``.

    Returns:
        Tuple of (row, column).

    Raises:
        FormatError: If the coordinate does not match ``[A-Z]+[0-9]+``.
    """
    column, row = split_coordinate(coord)
    return row, column_label_to_index(column)


def row_col_to_coordinate(row: int, col: int) -> str:
    """Convert 1-based (row, column) to an A1 coordinate.

    Unlike :func:`coordinate_to_row_col` this does not raise: a row or
    column below 1 yields an empty string.
    """
    if row < 1 or col < 1:
        return ""
    return f"{column_index_to_label(col)}{row}"
