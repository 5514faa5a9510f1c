"""Exceptions raised by socialsheet."""

from __future__ import annotations


class SocialSheetError(ValueError):
    """Base exception for socialsheet errors."""


class FormatError(SocialSheetError):
    """Raised when a cell coordinate does not follow A1 notation."""

    def __init__(self, coordinate: str, reason: str | None = None) -> None:
        self.coordinate = coordinate
        message = reason or f"Invalid coordinate: {coordinate}"
        super().__init__(message)


class ValidationError(SocialSheetError):
    """Raised when expanded-format text is structurally invalid.

    ``line_number`` is the 1-based position of the offending line in the
    input, or None when the failure concerns the document as a whole
    (e.g. a missing version header).
    """

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(message)
