"""Exceptions raised by the export engine"""

from __future__ import annotations

from typing import Optional


class ReportExportError(Exception):
    """Base exception for all export errors"""
    pass


class InvalidExportRequest(ReportExportError):
    """A required top-level input is missing or empty"""
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class InvalidRangeFormat(ReportExportError):
    """A cell address or range string could not be parsed"""
    def __init__(self, range_string: str):
        super().__init__(f"Invalid cell range: {range_string!r}")
        self.range_string = range_string


class SerializationFailure(ReportExportError):
    """Building or writing the output document failed"""
    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        self.stage = stage
