"""Compact ``coordinate:value`` format to expanded cell records."""

from __future__ import annotations

from collections.abc import Iterator
import logging

from .models import CompactLine, SheetDocument
from .shared.a1 import is_valid_coordinate

logger = logging.getLogger(__name__)


def iter_compact_lines(text: str) -> Iterator[CompactLine]:
    """Yield well-formed compact lines, dropping the rest.

    Blank lines, lines without a colon and lines whose coordinate is not
    A1 notation are skipped silently (DEBUG log only).

    Args:
        text: Compact-format text.

    Yields:
        Parsed compact lines in input order.
    """
    for line_number, raw in enumerate(text.strip().split("\n"), start=1):
        line = raw.strip()
        if not line:
            continue
        coord, sep, value = line.partition(":")
        if not sep:
            logger.debug("Skipping compact line %d without ':': %r", line_number, line)
            continue
        coord = coord.strip()
        if not is_valid_coordinate(coord):
            logger.debug(
                "Skipping compact line %d with invalid coordinate: %r",
                line_number,
                coord,
            )
            continue
        yield CompactLine(coord=coord, value=value.strip())


def parse_compact(text: str) -> str:
    """Convert compact-format text into expanded-format text.

    Never raises. The output always starts with the version line and ends
    with the fixed ``sheet:c:10:r:20`` dimension line.

    Args:
        text: Compact-format text, one ``COORD:VALUE`` per line.

    Returns:
        Expanded-format text.
    """
    cells = [line.to_record() for line in iter_compact_lines(text)]
    return SheetDocument(cells=cells).to_text()
