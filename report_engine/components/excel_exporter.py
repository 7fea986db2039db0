from __future__ import annotations

"""
Workbook assembler: summary sheet first, one styled data sheet per table,
report-type column formats, serialized to xlsx bytes with openpyxl.
"""

import io
import re
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from loguru import logger
from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from report_engine.components.rules import FormatInstruction, apply_plan, plan_formatting
from report_engine.components.summary import SummaryMetadata, add_summary_sheet
from report_engine.components.worksheet import create_worksheet
from report_engine.config import get_settings
from report_engine.exceptions import InvalidExportRequest, SerializationFailure
from report_engine.models import XLSX_MIME, ExportResult, FirmInfo, ReportData, TableData

_ILLEGAL_SHEET_CHARS = re.compile(r"[\\/?*\[\]:]")


def format_report_type(report_type: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in report_type.split("-"))


def sanitize_sheet_name(name: str, max_length: Optional[int] = None) -> str:
    max_length = max_length or get_settings().sheet_name_max_length
    return _ILLEGAL_SHEET_CHARS.sub("", name)[:max_length]


def unique_sheet_name(name: str, taken: Iterable[str], max_length: Optional[int] = None) -> str:
    max_length = max_length or get_settings().sheet_name_max_length
    used = {existing.lower() for existing in taken}
    if name.lower() not in used:
        return name
    counter = 2
    while True:
        suffix = f" ({counter})"
        candidate = name[: max_length - len(suffix)] + suffix
        if candidate.lower() not in used:
            return candidate
        counter += 1


def build_filename(report_type: str, now: datetime) -> str:
    return f"{format_report_type(report_type)}-{now.date().isoformat()}.xlsx"


def validate_export_request(report_data: Optional[ReportData], report_type: str, firm_info: Optional[FirmInfo]) -> None:
    if report_data is None:
        raise InvalidExportRequest("Report data is required", field="report_data")
    if not report_type or not str(report_type).strip():
        raise InvalidExportRequest("Report type is required", field="report_type")
    if firm_info is None or not (firm_info.name or "").strip():
        raise InvalidExportRequest("Firm information with name is required", field="firm_info.name")


class ExcelExporter:
    """Collects sheets and pending column formats for one export call."""

    def __init__(self):
        self.workbook = Workbook()
        self.workbook.remove(self.workbook.active)
        self._pending: List[Tuple[Worksheet, List[FormatInstruction]]] = []

    @property
    def sheet_names(self) -> List[str]:
        return list(self.workbook.sheetnames)

    def set_properties(self, title: str, subject: str, author: str, created: datetime) -> None:
        props = self.workbook.properties
        props.title = title
        props.subject = subject
        props.creator = author
        props.created = created

    def add_summary_sheet(self, metadata: SummaryMetadata, firm_info: FirmInfo, date_range=None) -> Worksheet:
        return add_summary_sheet(self.workbook, metadata, firm_info, date_range)

    def add_table_sheet(self, table: TableData, index: int, report_type: str) -> Worksheet:
        name = sanitize_sheet_name(table.title or "") or f"Data {index}"
        name = unique_sheet_name(name, self.sheet_names)
        ws = create_worksheet(self.workbook, name, table.rows, table.headers)
        plan = plan_formatting(report_type, list(table.headers), ws.max_row - 1)
        self._pending.append((ws, plan))
        return ws

    def apply_formatting(self) -> int:
        tagged = 0
        for ws, plan in self._pending:
            count = apply_plan(ws, plan)
            tagged += count
            logger.debug("Sheet {!r}: {} format instructions, {} cells tagged", ws.title, len(plan), count)
        self._pending.clear()
        return tagged

    def save_to_bytes(self) -> bytes:
        buff = io.BytesIO()
        self.workbook.save(buff)
        buff.seek(0)
        return buff.getvalue()


def build_report_workbook(
    report_data: ReportData,
    report_type: str,
    firm_info: FirmInfo,
    now: datetime,
) -> ExcelExporter:
    settings = get_settings()
    report_name = format_report_type(report_type)
    title = report_data.title or report_name

    exporter = ExcelExporter()
    exporter.set_properties(title=title, subject=f"{report_name} Report", author=firm_info.name, created=now)
    exporter.add_summary_sheet(
        SummaryMetadata(
            report_title=title,
            generated_date=now.strftime(settings.summary_timestamp_format),
            summary=report_data.summary_items(),
        ),
        firm_info,
        report_data.date_range,
    )
    for index, table in enumerate(report_data.tables or [], start=1):
        exporter.add_table_sheet(table, index, report_type)
    exporter.apply_formatting()
    return exporter


def export_report_to_excel(
    report_data: ReportData,
    report_type: str,
    firm_info: FirmInfo,
    *,
    now: Optional[datetime] = None,
) -> ExportResult:
    validate_export_request(report_data, report_type, firm_info)
    now = now or datetime.now()
    stage = "build"
    try:
        exporter = build_report_workbook(report_data, report_type, firm_info, now)
        stage = "serialize"
        content = exporter.save_to_bytes()
    except Exception as exc:
        logger.exception("Error generating Excel file during {}: {}", stage, exc)
        raise SerializationFailure(f"Failed to generate Excel file: {exc}", stage=stage) from exc

    result = ExportResult(filename=build_filename(report_type, now), content=content, mime_type=XLSX_MIME)
    logger.info("Excel report {} generated ({} bytes, {} sheets)", result.filename, result.size, len(exporter.sheet_names))
    return result
