from __future__ import annotations

from .models import FormulaCell, SheetDocument, TextCell


def build_default_document(storage_backend: str) -> str:
    """Build the welcome document used to seed a new spreadsheet.

    Text payloads are escaped, so the ``Storage Backend:`` caption and the
    label are written as ``\\c``-escaped text rather than raw colons.

    Args:
        storage_backend: Label of the storage backend, shown in cell C3.

    Returns:
        Expanded-format text.
    """
    cells = [
        TextCell(coord="A1", text="TouchCalc Spreadsheet"),
        TextCell(coord="B1", text="Welcome to your cloud spreadsheet!"),
        TextCell(coord="A2", text="Cell A2"),
        TextCell(coord="B2", text="Cell B2"),
        FormulaCell(coord="C2", formula="A2+B2"),
        TextCell(coord="A3", text="Data automatically saves to the cloud"),
        TextCell(coord="B3", text="Storage Backend:"),
        TextCell(coord="C3", text=storage_backend),
        TextCell(coord="A5", text="Try these features:"),
        TextCell(coord="B5", text="• Edit any cell by clicking"),
        TextCell(coord="B6", text="• Use formulas like =A1+B1"),
        TextCell(coord="B7", text="• Auto-save every 30 seconds"),
        TextCell(coord="B8", text="• Export to CSV or Excel"),
    ]
    return SheetDocument(cells=cells).to_text()
