from __future__ import annotations

from pydantic import BaseModel, Field

from .errors import ValidationError
from .shared.a1 import is_valid_coordinate


class ValidationReport(BaseModel):
    """Non-raising validation result."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    line_number: int | None = None


def validate_document(text: str) -> None:
    """Check that expanded-format text is structurally well formed.

    A version line must be present somewhere. Every ``cell:`` line needs at
    least four colon-delimited fields and an A1 coordinate. Declared sheet
    dimensions are not compared with the cell coordinates.

    Args:
        text: Expanded-format text.

    Raises:
        ValidationError: On the first malformed cell line, or when no
            version line is present.
    """
    has_version = False
    for line_number, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("version:"):
            has_version = True
            continue
        if not line.startswith("cell:"):
            continue
        parts = line.split(":")
        if len(parts) < 4:
            raise ValidationError(
                f"Invalid cell definition at line {line_number}: {line}",
                line_number=line_number,
                line=line,
            )
        if not is_valid_coordinate(parts[1]):
            raise ValidationError(
                f"Invalid coordinate at line {line_number}: {line}",
                line_number=line_number,
                line=line,
            )
    if not has_version:
        raise ValidationError("Missing version header")


def check_document(text: str) -> ValidationReport:
    """Run :func:`validate_document` and report the outcome instead of raising."""
    try:
        validate_document(text)
    except ValidationError as exc:
        return ValidationReport(
            is_valid=False, errors=[str(exc)], line_number=exc.line_number
        )
    return ValidationReport(is_valid=True)
