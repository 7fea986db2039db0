from __future__ import annotations

import re
from typing import NamedTuple, Tuple

from openpyxl.utils import column_index_from_string, get_column_letter

from report_engine.exceptions import InvalidRangeFormat


_CELL_RE = re.compile(r"^\$?([A-Za-z]{1,3})\$?([1-9][0-9]*)$")


class CellRange(NamedTuple):
    """Zero-based, inclusive rectangle of cells."""

    start_row: int
    start_col: int
    end_row: int
    end_col: int


def encode_col(col: int) -> str:
    if col < 0:
        raise ValueError(f"Column index must be non-negative, got {col}")
    return get_column_letter(col + 1)


def encode_cell(row: int, col: int) -> str:
    if row < 0:
        raise ValueError(f"Row index must be non-negative, got {row}")
    return f"{encode_col(col)}{row + 1}"


def decode_cell(address: str) -> Tuple[int, int]:
    match = _CELL_RE.match(address.strip()) if isinstance(address, str) else None
    if match is None:
        raise InvalidRangeFormat(address)
    letters, digits = match.groups()
    try:
        col = column_index_from_string(letters.upper()) - 1
    except ValueError as exc:
        raise InvalidRangeFormat(address) from exc
    return int(digits) - 1, col


def decode_range(range_string: str) -> CellRange:
    """Parse ``"A1"`` or ``"A1:C10"`` into a normalised CellRange."""
    if not isinstance(range_string, str) or not range_string.strip():
        raise InvalidRangeFormat(range_string)
    parts = range_string.strip().split(":")
    if len(parts) > 2:
        raise InvalidRangeFormat(range_string)
    start = decode_cell(parts[0])
    end = decode_cell(parts[1]) if len(parts) == 2 else start
    return CellRange(
        min(start[0], end[0]),
        min(start[1], end[1]),
        max(start[0], end[0]),
        max(start[1], end[1]),
    )


def encode_range(cell_range: CellRange) -> str:
    start = encode_cell(cell_range.start_row, cell_range.start_col)
    end = encode_cell(cell_range.end_row, cell_range.end_col)
    return start if start == end else f"{start}:{end}"


def column_range(col: int, first_row: int, last_row: int) -> str:
    return encode_range(CellRange(first_row, col, max(first_row, last_row), col))
