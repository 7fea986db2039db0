from datetime import date

import pytest

from report_engine.components import report_export
from report_engine.components.report_export import (
    export_ar_aging_report,
    export_client_profitability,
    export_financial_performance,
    export_generic_table,
    export_project_status_report,
    export_time_billing_report,
)
from report_engine.models import DateRange, TableData

from conftest import open_result

PERIOD = DateRange(date(2024, 1, 1), date(2024, 3, 31))


@pytest.fixture
def captured(monkeypatch):
    calls = []

    def fake_export(report_data, report_type, firm_info):
        calls.append((report_data, report_type, firm_info))
        return None

    monkeypatch.setattr(report_export, "export_report_to_excel", fake_export)
    return calls


def test_financial_performance(firm):
    result = export_financial_performance(
        [{"label": "Revenue", "value": "$10,000"}],
        firm,
        PERIOD,
        details_table={
            "headers": ["Month", "Revenue", "Expenses", "Net Profit"],
            "rows": [["Jan", 1000, 400, 600]],
        },
    )
    assert result.filename.startswith("Financial Performance-")
    wb = open_result(result)
    assert wb.sheetnames == ["Summary", "Data 1"]
    assert [c.number_format for c in wb["Data 1"][2]] == ["General", "$#,##0.00", "$#,##0.00", "$#,##0.00"]
    labels = [row[0].value for row in wb["Summary"].iter_rows(max_col=1)]
    assert "Revenue" in labels


def test_financial_performance_without_table(firm):
    wb = open_result(export_financial_performance([], firm, PERIOD))
    assert wb.sheetnames == ["Summary"]


def test_ar_aging_without_date_range(firm):
    table = TableData(headers=["Client", "Total", "Invoice Date"], rows=[["Globex", 500, "2024-02-01"]], title="Aging Buckets")
    result = export_ar_aging_report(table, [("Total AR", 500)], firm)
    assert result.filename.startswith("Ar Aging-")
    wb = open_result(result)
    assert wb.sheetnames == ["Summary", "Aging Buckets"]
    assert wb["Aging Buckets"]["B2"].number_format == "$#,##0.00"


@pytest.mark.parametrize(
    "call,report_type,title",
    [
        (lambda t, f: export_financial_performance([], f, PERIOD, t), "financial-performance", "Financial Performance Report"),
        (lambda t, f: export_ar_aging_report(t, [], f), "ar-aging", "Accounts Receivable Aging Report"),
        (lambda t, f: export_client_profitability(t, [], f, PERIOD), "client-profitability", "Client Profitability Report"),
        (lambda t, f: export_time_billing_report(t, f, PERIOD), "time-billing", "Time & Billing Report"),
        (lambda t, f: export_project_status_report(t, f), "project-status", "Project Status Report"),
        (lambda t, f: export_generic_table(t, "Ledger Dump", f), "generic-table", "Ledger Dump"),
    ],
)
def test_wrappers_pass_fixed_report_type(captured, firm, call, report_type, title):
    table = TableData(headers=["A"], rows=[[1]])
    call(table, firm)

    (report_data, passed_type, passed_firm), = captured
    assert passed_type == report_type
    assert passed_firm is firm
    assert report_data.title == title
    assert list(report_data.tables) == [table]
