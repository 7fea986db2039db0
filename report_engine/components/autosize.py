from __future__ import annotations

from typing import Any, List, Optional, Sequence

from report_engine.config import ExportSettings, get_settings
from report_engine.models import CellKind, classify


def auto_size_columns(
    grid: Sequence[Sequence[Any]],
    settings: Optional[ExportSettings] = None,
) -> List[int]:
    """Width per column from the longest stringified value, header row included."""
    settings = settings or get_settings()
    widths: List[int] = []
    for row in grid:
        for col, value in enumerate(row):
            while len(widths) <= col:
                widths.append(0)
            if classify(value) is CellKind.EMPTY:
                continue
            length = len(str(value))
            widths[col] = max(widths[col], min(length + settings.column_padding, settings.max_column_width))
    return [width or settings.default_column_width for width in widths]
