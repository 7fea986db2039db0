"""
Range-level display formats for data sheets.

Each formatter takes a worksheet and an A1-style range ("B2:B10") and tags
every compatible cell with a number format. Incompatible cells are left as
they are, so the formatters never raise on data and can be re-applied to the
same range without changing the result.
"""

from __future__ import annotations

import warnings
from datetime import date, datetime, time
from typing import Iterator, Optional, Union

import pandas as pd
from openpyxl.worksheet.worksheet import Worksheet

from report_engine.components.addressing import decode_range
from report_engine.config import get_settings
from report_engine.models import CellKind, classify


def _iter_cells(ws: Worksheet, cell_range: str) -> Iterator:
    bounds = decode_range(cell_range)
    last_row = min(bounds.end_row, ws.max_row - 1)
    last_col = min(bounds.end_col, ws.max_column - 1)
    for row in range(bounds.start_row, last_row + 1):
        for col in range(bounds.start_col, last_col + 1):
            yield ws.cell(row=row + 1, column=col + 1)


def _tag_numbers(ws: Worksheet, cell_range: str, number_format: str) -> int:
    tagged = 0
    for cell in _iter_cells(ws, cell_range):
        if classify(cell.value) is CellKind.NUMBER:
            cell.number_format = number_format
            tagged += 1
    return tagged


def parse_date(text: str) -> Optional[Union[date, datetime]]:
    """Parse a calendar date string, or return None when it is not one."""
    text = text.strip()
    if not text:
        return None
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            parsed = pd.to_datetime(text, errors="coerce")
    except (ValueError, OverflowError, TypeError):
        return None
    if pd.isna(parsed):
        return None
    parsed = parsed.to_pydatetime().replace(tzinfo=None)
    if parsed.time() == time(0):
        return parsed.date()
    return parsed


def format_currency(ws: Worksheet, cell_range: str) -> int:
    return _tag_numbers(ws, cell_range, get_settings().currency_format)


def format_percentage(ws: Worksheet, cell_range: str) -> int:
    """Render numeric cells as percentages without rescaling them.

    The stored value is treated as a fraction: 0.45 displays as 45.00%, while
    45 displays as 4500.00%. Callers holding whole percents must divide by 100
    first, or build their rows with ``WholePercent``.
    """
    return _tag_numbers(ws, cell_range, get_settings().percentage_format)


def format_number(ws: Worksheet, cell_range: str) -> int:
    return _tag_numbers(ws, cell_range, get_settings().number_format)


def format_date(ws: Worksheet, cell_range: str) -> int:
    date_format = get_settings().date_format
    tagged = 0
    for cell in _iter_cells(ws, cell_range):
        if isinstance(cell.value, str):
            parsed = parse_date(cell.value)
            if parsed is None:
                continue
            cell.value = parsed
        if classify(cell.value) is CellKind.DATE:
            cell.number_format = date_format
            tagged += 1
    return tagged
