from __future__ import annotations

from openpyxl.styles import Alignment, Font, PatternFill


class ExportColors:
    HEADER_BG = "1E3A8A"
    HEADER_TEXT = "FFFFFF"
    SECTION_BG = "E5E7EB"
    NORMAL_TEXT = "000000"


class ExportStyles:
    @staticmethod
    def table_header():
        return {
            "font": Font(bold=True, color=ExportColors.HEADER_TEXT),
            "fill": PatternFill("solid", fgColor=ExportColors.HEADER_BG),
            "alignment": Alignment(horizontal="left", vertical="center"),
        }

    @staticmethod
    def section_heading():
        return {
            "font": Font(bold=True, size=12),
            "fill": PatternFill("solid", fgColor=ExportColors.SECTION_BG),
        }

    @staticmethod
    def summary_label():
        return {"font": Font(bold=True)}


def apply_style(cell, styles) -> None:
    for attr, value in styles.items():
        setattr(cell, attr, value)
