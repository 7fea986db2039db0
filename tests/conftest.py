from __future__ import annotations

from datetime import datetime
from io import BytesIO

import pytest
from openpyxl import Workbook, load_workbook

from report_engine.models import FirmInfo


@pytest.fixture
def firm() -> FirmInfo:
    return FirmInfo(name="Acme CPA")


@pytest.fixture
def full_firm() -> FirmInfo:
    return FirmInfo(
        name="Acme CPA",
        address="1 Ledger Lane, Springfield",
        email="office@acme-cpa.example",
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 30, 0)


@pytest.fixture
def sheet():
    return Workbook().active


def open_result(result):
    return load_workbook(BytesIO(result.content))


def cell_state(ws):
    return [
        [(cell.value, cell.number_format) for cell in row]
        for row in ws.iter_rows(min_row=1, max_row=ws.max_row, max_col=ws.max_column)
    ]
