from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence, Union

import numpy as np
import pandas as pd


XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
CSV_MIME = "text/csv;charset=utf-8"

SummaryValue = Union[str, int, float]


class CellKind(Enum):
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    EMPTY = "empty"


def classify(value: Any) -> CellKind:
    """Map a raw cell value onto its CellKind variant."""
    if value is None:
        return CellKind.EMPTY
    if isinstance(value, str):
        return CellKind.EMPTY if value == "" else CellKind.TEXT
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return CellKind.EMPTY
    if isinstance(value, (bool, np.bool_)):
        return CellKind.TEXT
    if isinstance(value, (date, np.datetime64)):
        return CellKind.DATE
    if isinstance(value, (int, float, Decimal, np.number)):
        return CellKind.NUMBER
    return CellKind.TEXT


@dataclass(frozen=True)
class WholePercent:
    """A percentage held as a whole number (45 means 45%).

    Percentage cells render the stored value times 100, so plain numbers must
    already be fractions (0.45). Wrap whole-percent inputs in this class and
    the worksheet builder stores ``value / 100`` instead.
    """

    value: float

    def as_fraction(self) -> float:
        return float(self.value) / 100


@dataclass(frozen=True)
class FirmInfo:
    name: str
    logo: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None


@dataclass(frozen=True)
class DateRange:
    start_date: date
    end_date: date

    @classmethod
    def from_strings(cls, start: str, end: str) -> "DateRange":
        return cls(pd.Timestamp(start).date(), pd.Timestamp(end).date())


@dataclass(frozen=True)
class SummaryItem:
    label: str
    value: SummaryValue

    @classmethod
    def coerce(cls, item: Any) -> "SummaryItem":
        if isinstance(item, SummaryItem):
            return item
        if isinstance(item, Mapping):
            return cls(str(item["label"]), item["value"])
        label, value = item
        return cls(str(label), value)


@dataclass(frozen=True)
class TableData:
    headers: Sequence[str]
    rows: Sequence[Sequence[Any]]
    title: Optional[str] = None

    @classmethod
    def from_frame(cls, df: pd.DataFrame, title: Optional[str] = None) -> "TableData":
        headers = [str(column) for column in df.columns]
        rows = df.to_numpy(dtype=object).tolist()
        return cls(headers=headers, rows=rows, title=title)


@dataclass(frozen=True)
class ReportData:
    title: Optional[str] = None
    date_range: Optional[DateRange] = None
    tables: Sequence[TableData] = field(default_factory=list)
    summary: Sequence[Any] = field(default_factory=list)

    def summary_items(self) -> List[SummaryItem]:
        return [SummaryItem.coerce(item) for item in self.summary or []]


@dataclass(frozen=True)
class ExportResult:
    filename: str
    content: bytes
    mime_type: str = XLSX_MIME

    @property
    def size(self) -> int:
        return len(self.content)
