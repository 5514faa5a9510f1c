from __future__ import annotations

import pytest

from socialsheet.errors import FormatError
from socialsheet.shared.a1 import (
    column_index_to_label,
    column_label_to_index,
    coordinate_to_row_col,
    is_valid_coordinate,
    row_col_to_coordinate,
    split_coordinate,
)


def test_column_roundtrip() -> None:
    assert column_label_to_index("A") == 1
    assert column_label_to_index("Z") == 26
    assert column_label_to_index("AA") == 27
    assert column_index_to_label(1) == "A"
    assert column_index_to_label(26) == "Z"
    assert column_index_to_label(27) == "AA"
    assert column_index_to_label(702) == "ZZ"
    assert column_index_to_label(703) == "AAA"


def test_column_index_to_label_below_one_is_empty() -> None:
    assert column_index_to_label(0) == ""


def test_column_label_rejects_lowercase() -> None:
    with pytest.raises(FormatError, match="Invalid column label"):
        column_label_to_index("a")


def test_split_coordinate() -> None:
    assert split_coordinate("AB12") == ("AB", 12)


def test_coordinate_to_row_col() -> None:
    assert coordinate_to_row_col("A1") == (1, 1)
    assert coordinate_to_row_col("B3") == (3, 2)
    assert coordinate_to_row_col("AA12") == (12, 27)
    assert coordinate_to_row_col("A0") == (0, 1)


@pytest.mark.parametrize(
    "value", ["", "A", "1", "1A", "A1B", "a1", "A-1", " A1", "A1\n", "Ä1"]
)
def test_coordinate_to_row_col_rejects_invalid(value: str) -> None:
    assert not is_valid_coordinate(value)
    with pytest.raises(FormatError, match="Invalid coordinate"):
        coordinate_to_row_col(value)


def test_format_error_carries_coordinate() -> None:
    with pytest.raises(FormatError) as excinfo:
        coordinate_to_row_col("1A")
    assert excinfo.value.coordinate == "1A"
    assert isinstance(excinfo.value, ValueError)


def test_row_col_to_coordinate() -> None:
    assert row_col_to_coordinate(1, 1) == "A1"
    assert row_col_to_coordinate(12, 27) == "AA12"
    assert row_col_to_coordinate(5, 52) == "AZ5"


@pytest.mark.parametrize(("row", "col"), [(0, 1), (1, 0), (-3, 2), (2, -3)])
def test_row_col_to_coordinate_out_of_range_is_empty(row: int, col: int) -> None:
    assert row_col_to_coordinate(row, col) == ""


def test_decode_inverts_encode() -> None:
    for row in range(1, 1001, 37):
        for col in range(1, 1001):
            assert coordinate_to_row_col(row_col_to_coordinate(row, col)) == (
                row,
                col,
            )
