from report_engine.components.csv_export import export_report_to_csv
from report_engine.components.excel_exporter import export_report_to_excel
from report_engine.components.report_export import (
    export_ar_aging_report,
    export_client_profitability,
    export_financial_performance,
    export_generic_table,
    export_project_status_report,
    export_time_billing_report,
)
from report_engine.exceptions import (
    InvalidExportRequest,
    InvalidRangeFormat,
    ReportExportError,
    SerializationFailure,
)
from report_engine.models import (
    DateRange,
    ExportResult,
    FirmInfo,
    ReportData,
    SummaryItem,
    TableData,
    WholePercent,
)

__all__ = [
    "export_report_to_excel",
    "export_report_to_csv",
    "export_financial_performance",
    "export_ar_aging_report",
    "export_client_profitability",
    "export_time_billing_report",
    "export_project_status_report",
    "export_generic_table",
    "ReportExportError",
    "InvalidExportRequest",
    "InvalidRangeFormat",
    "SerializationFailure",
    "DateRange",
    "ExportResult",
    "FirmInfo",
    "ReportData",
    "SummaryItem",
    "TableData",
    "WholePercent",
]
