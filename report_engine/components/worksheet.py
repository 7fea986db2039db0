from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional, Sequence

import numpy as np
import pandas as pd
from loguru import logger
from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from report_engine.components.addressing import encode_col
from report_engine.components.autosize import auto_size_columns
from report_engine.components.styles import ExportStyles, apply_style
from report_engine.models import CellKind, WholePercent, classify


def normalize_value(value: Any) -> Any:
    if isinstance(value, WholePercent):
        return value.as_fraction()
    kind = classify(value)
    if kind is CellKind.EMPTY:
        return None
    if kind is CellKind.DATE:
        if isinstance(value, np.datetime64):
            value = pd.Timestamp(value)
        if isinstance(value, pd.Timestamp):
            value = value.to_pydatetime()
        if isinstance(value, datetime) and value.tzinfo is not None:
            value = value.replace(tzinfo=None)
        return value
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (str, int, float)):
        return value
    if kind is CellKind.NUMBER:
        return value
    return str(value)


def normalize_rows(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> List[List[Any]]:
    """Copy rows with cleaned values, padded or truncated to the header width."""
    width = len(headers)
    normalized: List[List[Any]] = []
    for idx, row in enumerate(rows):
        values = [normalize_value(value) for value in row]
        if len(values) != width:
            logger.warning(
                "Row {} has {} cells for {} headers; {}",
                idx + 1,
                len(values),
                width,
                "padding" if len(values) < width else "truncating",
            )
            values = (values + [None] * width)[:width]
        normalized.append(values)
    return normalized


def build_grid(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> List[List[Any]]:
    header_row = [None if header is None else str(header) for header in headers]
    return [header_row] + normalize_rows(headers, rows)


def create_worksheet(
    workbook: Workbook,
    title: str,
    rows: Sequence[Sequence[Any]],
    headers: Sequence[str],
    column_widths: Optional[Sequence[float]] = None,
) -> Worksheet:
    ws = workbook.create_sheet(title)
    grid = build_grid(headers, rows)
    for values in grid:
        ws.append(values)

    for col in range(len(headers)):
        cell = ws.cell(row=1, column=col + 1)
        if cell.value is None:
            continue
        apply_style(cell, ExportStyles.table_header())

    widths = list(column_widths) if column_widths else auto_size_columns(grid)
    for col, width in enumerate(widths):
        ws.column_dimensions[encode_col(col)].width = width

    logger.debug("Built sheet {!r}: {} data rows x {} columns", title, len(grid) - 1, len(headers))
    return ws
