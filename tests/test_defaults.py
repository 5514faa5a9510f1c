from __future__ import annotations

from socialsheet.compact import parse_compact
from socialsheet.defaults import build_default_document
from socialsheet.expanded import convert_to_compact
from socialsheet.validate import validate_document


def test_default_document_layout() -> None:
    lines = build_default_document("s3").split("\n")
    assert lines[0] == "version:1.4"
    assert lines[-1] == "sheet:c:10:r:20"
    assert "cell:A1:t:TouchCalc Spreadsheet" in lines
    assert "cell:C2:vtf:n:0:A2+B2" in lines
    assert "cell:C3:t:s3" in lines
    assert "cell:B3:t:Storage Backend\\c" in lines
    assert len(lines) == 15


def test_default_document_validates() -> None:
    validate_document(build_default_document("local"))


def test_default_document_escapes_label() -> None:
    text = build_default_document("gcs:bucket")
    assert "cell:C3:t:gcs\\cbucket" in text.split("\n")
    compact = convert_to_compact(text).split("\n")
    assert "C3:gcs:bucket" in compact
    assert "B3:Storage Backend:" in compact


def test_default_document_compact_roundtrip() -> None:
    text = build_default_document("local")
    assert parse_compact(convert_to_compact(text)) == text
