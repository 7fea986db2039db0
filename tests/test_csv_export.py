import csv
import io
from datetime import date

import pytest

from report_engine.components.csv_export import export_report_to_csv, table_to_csv
from report_engine.exceptions import InvalidExportRequest
from report_engine.models import CSV_MIME, TableData


def _parse(result):
    return list(csv.reader(io.StringIO(result.content.decode("utf-8"))))


def test_comma_value_quoted_and_recovered():
    table = TableData(headers=["Client", "Fees"], rows=[["Smith, John", 1500]])
    result = export_report_to_csv(table, "clients")

    assert '"Smith, John"' in result.content.decode("utf-8")
    assert _parse(result) == [["Client", "Fees"], ["Smith, John", "1500"]]


def test_quotes_and_newlines_escaped():
    table = TableData(headers=["Memo"], rows=[['Said "hi"'], ["line one\nline two"]])
    result = export_report_to_csv(table, "memos")
    assert _parse(result) == [["Memo"], ['Said "hi"'], ["line one\nline two"]]


def test_filename_and_mime():
    result = export_report_to_csv(TableData(headers=["A"], rows=[]), "report")
    assert result.filename == "report.csv"
    assert result.mime_type == CSV_MIME
    assert result.content == b"A\n"


def test_empty_and_date_values():
    table = TableData(headers=["Due", "Amount"], rows=[[date(2024, 3, 15), None]])
    assert table_to_csv(table) == "Due,Amount\n2024-03-15,\n"


def test_jagged_rows_match_header_width():
    table = TableData(headers=["A", "B"], rows=[["1"], ["1", "2", "3"]])
    assert table_to_csv(table) == "A,B\n1,\n1,2\n"


def test_utf8_output():
    result = export_report_to_csv(TableData(headers=["Name"], rows=[["Zoë"]]), "names")
    assert result.content.decode("utf-8") == "Name\nZoë\n"


@pytest.mark.parametrize(
    "table",
    [None, TableData(headers=None, rows=[]), TableData(headers=["A"], rows=None)],
)
def test_invalid_table(table):
    with pytest.raises(InvalidExportRequest):
        export_report_to_csv(table, "report")


def test_filename_required():
    with pytest.raises(InvalidExportRequest):
        export_report_to_csv(TableData(headers=["A"], rows=[]), "")
