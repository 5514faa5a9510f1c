from __future__ import annotations

from pathlib import Path

from openpyxl import load_workbook
import pytest

from socialsheet.compact import parse_compact
from socialsheet.export import build_workbook, export_workbook
from socialsheet.validate import validate_document


def test_build_workbook_places_cells(expanded_text: str) -> None:
    wb = build_workbook(expanded_text, sheet_title="Data")
    ws = wb["Data"]
    assert ws["A1"].value == "Total: net"
    assert ws["B1"].value == 3.5
    assert ws["C1"].value == "=A1*2"
    assert ws["E1"].value is None
    wb.close()


def test_build_workbook_parses_numeric_literals() -> None:
    text = "version:1.4\ncell:A1:v:42\ncell:A2:v:-0.5\ncell:A3:v:n/a"
    ws = build_workbook(text).active
    assert ws["A1"].value == 42
    assert ws["A2"].value == -0.5
    assert ws["A3"].value == "n/a"


def test_build_workbook_keeps_equals_text_as_string() -> None:
    ws = build_workbook("version:1.4\ncell:A1:t:=not a formula").active
    assert ws["A1"].value == "=not a formula"
    assert ws["A1"].data_type == "s"


def test_build_workbook_skips_cells_off_grid() -> None:
    text = "version:1.4\ncell:A0:t:x\ncell:a1:t:y\ncell:XFE1:t:z\ncell:B2:t:ok"
    ws = build_workbook(text).active
    assert ws["B2"].value == "ok"
    assert ws["A1"].value is None
    assert ws.max_column == 2


def test_export_workbook_writes_file(tmp_path: Path, expanded_text: str) -> None:
    out = tmp_path / "sheet.xlsx"
    assert export_workbook(expanded_text, out) == out
    wb = load_workbook(out)
    ws = wb["Sheet1"]
    assert ws["A1"].value == "Total: net"
    assert ws["C1"].value == "=A1*2"
    wb.close()


def test_build_workbook_removes_illegal_characters() -> None:
    text = parse_compact("A1:bell\x07here\nA2:=A1&\x01")
    validate_document(text)
    ws = build_workbook(text).active
    assert ws["A1"].value == "bellhere"
    assert ws["A2"].value == "=A1&"


@pytest.mark.parametrize("literal", ["nan", "inf", "-Infinity", "1_000", "1e999", "0x1F"])
def test_build_workbook_keeps_non_decimal_literals_as_text(literal: str) -> None:
    ws = build_workbook(f"version:1.4\ncell:A1:v:{literal}").active
    assert ws["A1"].value == literal


@pytest.mark.parametrize(
    ("literal", "expected"),
    [("+7", 7), ("007", 7), ("1.", 1.0), (".5", 0.5), ("2.5E-3", 0.0025)],
)
def test_build_workbook_parses_decimal_literals(
    literal: str, expected: int | float
) -> None:
    ws = build_workbook(f"version:1.4\ncell:A1:v:{literal}").active
    assert ws["A1"].value == expected
