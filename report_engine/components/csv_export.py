from __future__ import annotations

import csv
import io
from datetime import date
from typing import Any, Optional

from loguru import logger

from report_engine.components.worksheet import build_grid
from report_engine.exceptions import InvalidExportRequest, SerializationFailure
from report_engine.models import CSV_MIME, ExportResult, TableData


def _csv_value(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return value


def table_to_csv(table_data: TableData) -> str:
    buff = io.StringIO()
    writer = csv.writer(buff, lineterminator="\n")
    for row in build_grid(table_data.headers, table_data.rows):
        writer.writerow([_csv_value(value) for value in row])
    return buff.getvalue()


def export_report_to_csv(table_data: Optional[TableData], filename: str) -> ExportResult:
    if table_data is None or table_data.headers is None or table_data.rows is None:
        raise InvalidExportRequest("Valid table data with headers and rows is required", field="table_data")
    if not filename or not filename.strip():
        raise InvalidExportRequest("Filename is required", field="filename")

    try:
        content = table_to_csv(table_data).encode("utf-8")
    except Exception as exc:
        logger.exception("Error generating CSV file: {}", exc)
        raise SerializationFailure(f"Failed to generate CSV file: {exc}", stage="csv") from exc

    result = ExportResult(filename=f"{filename}.csv", content=content, mime_type=CSV_MIME)
    logger.info("CSV file {} generated ({} rows, {} bytes)", result.filename, len(table_data.rows), result.size)
    return result
