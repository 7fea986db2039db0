from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore


CONFIG_PATH = Path(__file__).resolve().parent / "settings.toml"
CONFIG_ENV_VAR = "REPORT_ENGINE_SETTINGS"
REQUIRED_TABLES = ("formats", "layout", "summary")


@dataclass(frozen=True)
class ExportSettings:
    currency_format: str
    percentage_format: str
    date_format: str
    number_format: str
    max_column_width: int
    default_column_width: int
    column_padding: int
    sheet_name_max_length: int
    summary_label_width: int
    summary_value_width: int
    summary_sheet_name: str
    summary_date_format: str
    summary_timestamp_format: str


def load_config(config_path: Path = CONFIG_PATH) -> Dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file missing at {config_path}")
    with config_path.open("rb") as fh:
        config = tomllib.load(fh)
    missing = [table for table in REQUIRED_TABLES if table not in config]
    if missing:
        raise KeyError(f"settings.toml must include [{'], ['.join(missing)}]")
    return config


def build_settings(config: Dict[str, Any]) -> ExportSettings:
    formats = config["formats"]
    layout = config["layout"]
    summary = config["summary"]
    return ExportSettings(
        currency_format=formats.get("currency", "$#,##0.00"),
        percentage_format=formats.get("percentage", "0.00%"),
        date_format=formats.get("date", "mm/dd/yyyy"),
        number_format=formats.get("number", "#,##0.00"),
        max_column_width=int(layout.get("max_column_width", 50)),
        default_column_width=int(layout.get("default_column_width", 10)),
        column_padding=int(layout.get("column_padding", 2)),
        sheet_name_max_length=int(layout.get("sheet_name_max_length", 31)),
        summary_label_width=int(layout.get("summary_label_width", 25)),
        summary_value_width=int(layout.get("summary_value_width", 40)),
        summary_sheet_name=summary.get("sheet_name", "Summary"),
        summary_date_format=summary.get("date_format", "%m/%d/%Y"),
        summary_timestamp_format=summary.get("timestamp_format", "%m/%d/%Y, %I:%M:%S %p"),
    )


@lru_cache(maxsize=None)
def _cached_settings(path: str) -> ExportSettings:
    return build_settings(load_config(Path(path)))


def get_settings(path: Optional[Path] = None) -> ExportSettings:
    if path is None:
        override = os.environ.get(CONFIG_ENV_VAR)
        path = Path(override) if override else CONFIG_PATH
    return _cached_settings(str(path))
