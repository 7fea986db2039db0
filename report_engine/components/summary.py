from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Optional, Sequence, Union

import pandas as pd
from loguru import logger
from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from report_engine.components.styles import ExportStyles, apply_style
from report_engine.config import get_settings
from report_engine.models import DateRange, FirmInfo, SummaryItem

REPORT_INFORMATION = "REPORT INFORMATION"
REPORT_DETAILS = "REPORT DETAILS"
SUMMARY_METRICS = "SUMMARY METRICS"


@dataclass
class SummaryMetadata:
    report_title: str
    generated_date: str
    summary: Sequence[Any] = field(default_factory=list)


def _display_date(value: Union[date, str]) -> str:
    if not isinstance(value, date):
        value = pd.Timestamp(value).date()
    return value.strftime(get_settings().summary_date_format)


def build_summary_rows(
    metadata: SummaryMetadata,
    firm_info: FirmInfo,
    date_range: Optional[DateRange] = None,
) -> List[List[Any]]:
    rows: List[List[Any]] = [[REPORT_INFORMATION], ["Firm Name", firm_info.name]]
    for label, value in (
        ("Address", firm_info.address),
        ("Phone", firm_info.phone),
        ("Email", firm_info.email),
    ):
        if value:
            rows.append([label, value])
    rows.append([])

    rows.append([REPORT_DETAILS])
    rows.append(["Report Title", metadata.report_title])
    rows.append(["Generated Date", metadata.generated_date])
    if date_range is not None:
        rows.append(["Period Start", _display_date(date_range.start_date)])
        rows.append(["Period End", _display_date(date_range.end_date)])
    rows.append([])

    items = [SummaryItem.coerce(item) for item in metadata.summary or []]
    if items:
        rows.append([SUMMARY_METRICS])
        rows.extend([item.label, item.value] for item in items)
    return rows


def add_summary_sheet(
    workbook: Workbook,
    metadata: SummaryMetadata,
    firm_info: FirmInfo,
    date_range: Optional[DateRange] = None,
) -> Worksheet:
    settings = get_settings()
    rows = build_summary_rows(metadata, firm_info, date_range)

    ws = workbook.create_sheet(settings.summary_sheet_name, 0)
    for values in rows:
        ws.append(values)

    for idx, values in enumerate(rows, start=1):
        if not values:
            continue
        cell = ws.cell(row=idx, column=1)
        if len(values) == 1:
            apply_style(cell, ExportStyles.section_heading())
        else:
            apply_style(cell, ExportStyles.summary_label())

    ws.column_dimensions["A"].width = settings.summary_label_width
    ws.column_dimensions["B"].width = settings.summary_value_width
    logger.debug("Built summary sheet with {} rows", len(rows))
    return ws
