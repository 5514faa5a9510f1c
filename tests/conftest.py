from __future__ import annotations

import pytest


@pytest.fixture
def compact_text() -> str:
    """Compact document mixing text, formulas, blanks and malformed lines."""
    return "\n".join(
        [
            "A1: Revenue ",
            "",
            "B1:=SUM(A2+A3)",
            "no colon here",
            "a2:lower-case coordinate",
            "C3:path\\to:file",
            "  D4 : 42  ",
        ]
    )


@pytest.fixture
def expanded_text() -> str:
    """Expanded document covering every cell kind plus noise lines."""
    return "\n".join(
        [
            "version:1.4",
            "cell:A1:t:Total\\c net",
            "cell:B1:v:3.5",
            "cell:C1:vtf:n:0:A1*2",
            "cell:D1:t:",
            "cell:E1:b:1:2:3",
            "col:A:w:120",
            "sheet:c:10:r:20",
        ]
    )
