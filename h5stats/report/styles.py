"""
Cell styles for the statistics workbook.

Each style bundles font, fill, border and alignment so a sheet builder
only has to name what a cell is (a header, a win, a mirror...).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from openpyxl.styles import Alignment, Border, Font, PatternFill, Side


THIN = Border(
    left=Side(style='thin'),
    right=Side(style='thin'),
    top=Side(style='thin'),
    bottom=Side(style='thin')
)

COLORS = {
    'green_fill': PatternFill(start_color="C6EFCE", end_color="C6EFCE", fill_type="solid"),   # Light green
    'red_fill': PatternFill(start_color="FFC7CE", end_color="FFC7CE", fill_type="solid"),     # Light red
    'vs_fill': PatternFill(start_color="FF0000", end_color="FF0000", fill_type="solid"),
    'silver_fill': PatternFill(start_color="C0C0C0", end_color="C0C0C0", fill_type="solid"),
    'black_fill': PatternFill(start_color="000000", end_color="000000", fill_type="solid"),
}

CENTER = Alignment(horizontal='center', vertical='center')
CENTER_WRAP = Alignment(horizontal='center', vertical='center', wrap_text=True)


@dataclass(frozen=True)
class CellStyle:
    font: Optional[Font] = None
    fill: Optional[PatternFill] = None
    border: Optional[Border] = None
    alignment: Optional[Alignment] = None


class Style(Enum):
    THIN_BORDER = CellStyle(border=THIN)
    THIN_BORDER_CENTER = CellStyle(border=THIN, alignment=CENTER)
    THIN_BORDER_WRAP = CellStyle(border=THIN, alignment=CENTER_WRAP)
    VS = CellStyle(font=Font(bold=True, color="FFFFFF"), fill=COLORS['vs_fill'], alignment=CENTER)
    BOLD_CENTERED = CellStyle(font=Font(bold=True), border=THIN, alignment=CENTER_WRAP)
    TITLE = CellStyle(font=Font(bold=True, size=12), alignment=CENTER)
    SILVER = CellStyle(fill=COLORS['silver_fill'], border=THIN)
    BLACK = CellStyle(fill=COLORS['black_fill'], border=THIN)
    GREEN = CellStyle(fill=COLORS['green_fill'], border=THIN, alignment=CENTER_WRAP)
    RED = CellStyle(fill=COLORS['red_fill'], border=THIN, alignment=CENTER_WRAP)


def apply_style(cell, style: Style) -> None:
    """Copy every part a style defines onto a cell."""
    parts = style.value
    if parts.font is not None:
        cell.font = parts.font
    if parts.fill is not None:
        cell.fill = parts.fill
    if parts.border is not None:
        cell.border = parts.border
    if parts.alignment is not None:
        cell.alignment = parts.alignment
