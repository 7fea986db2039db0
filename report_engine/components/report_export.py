from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from report_engine.components.excel_exporter import export_report_to_excel
from report_engine.models import DateRange, ExportResult, FirmInfo, ReportData, TableData

TableLike = Union[TableData, Mapping[str, Any]]

FINANCIAL_PERFORMANCE = "financial-performance"
AR_AGING = "ar-aging"
CLIENT_PROFITABILITY = "client-profitability"
TIME_BILLING = "time-billing"
PROJECT_STATUS = "project-status"
GENERIC_TABLE = "generic-table"


def _as_table(table: TableLike) -> TableData:
    if isinstance(table, TableData):
        return table
    return TableData(headers=list(table["headers"]), rows=list(table["rows"]), title=table.get("title"))


def export_financial_performance(
    metrics: Sequence[Any],
    firm_info: FirmInfo,
    date_range: DateRange,
    details_table: Optional[TableLike] = None,
) -> ExportResult:
    report = ReportData(
        title="Financial Performance Report",
        date_range=date_range,
        summary=list(metrics),
        tables=[_as_table(details_table)] if details_table is not None else [],
    )
    return export_report_to_excel(report, FINANCIAL_PERFORMANCE, firm_info)


def export_ar_aging_report(
    aging_buckets: TableLike,
    summary: Sequence[Any],
    firm_info: FirmInfo,
    date_range: Optional[DateRange] = None,
) -> ExportResult:
    report = ReportData(
        title="Accounts Receivable Aging Report",
        date_range=date_range,
        summary=list(summary),
        tables=[_as_table(aging_buckets)],
    )
    return export_report_to_excel(report, AR_AGING, firm_info)


def export_client_profitability(
    client_table: TableLike,
    metrics: Sequence[Any],
    firm_info: FirmInfo,
    date_range: DateRange,
) -> ExportResult:
    report = ReportData(
        title="Client Profitability Report",
        date_range=date_range,
        summary=list(metrics),
        tables=[_as_table(client_table)],
    )
    return export_report_to_excel(report, CLIENT_PROFITABILITY, firm_info)


def export_time_billing_report(
    utilization_table: TableLike,
    firm_info: FirmInfo,
    date_range: DateRange,
    summary: Optional[Sequence[Any]] = None,
) -> ExportResult:
    report = ReportData(
        title="Time & Billing Report",
        date_range=date_range,
        summary=list(summary or []),
        tables=[_as_table(utilization_table)],
    )
    return export_report_to_excel(report, TIME_BILLING, firm_info)


def export_project_status_report(
    project_table: TableLike,
    firm_info: FirmInfo,
    date_range: Optional[DateRange] = None,
    summary: Optional[Sequence[Any]] = None,
) -> ExportResult:
    report = ReportData(
        title="Project Status Report",
        date_range=date_range,
        summary=list(summary or []),
        tables=[_as_table(project_table)],
    )
    return export_report_to_excel(report, PROJECT_STATUS, firm_info)


def export_generic_table(
    table: TableLike,
    title: str,
    firm_info: FirmInfo,
    date_range: Optional[DateRange] = None,
) -> ExportResult:
    report = ReportData(title=title, date_range=date_range, tables=[_as_table(table)])
    return export_report_to_excel(report, GENERIC_TABLE, firm_info)
