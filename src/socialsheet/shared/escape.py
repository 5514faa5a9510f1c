"""Escaping for text payloads stored in expanded-format cell records.

Backslash is replaced first on the way in and last on the way out, so the
backslashes introduced for newline and colon are never re-escaped.
"""

from __future__ import annotations

_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\", "\\b"),
    ("\n", "\\n"),
    (":", "\\c"),
)


def escape_text(value: str) -> str:
    """Escape backslash, newline and colon for a ``cell:...:t:`` payload."""
    for raw, escaped in _ESCAPES:
        value = value.replace(raw, escaped)
    return value


def unescape_text(value: str) -> str:
    """Reverse :func:`escape_text`."""
    for raw, escaped in reversed(_ESCAPES):
        value = value.replace(escaped, raw)
    return value
