"""
Small cell-writing helpers shared by the sheet builders.

Rows and columns are 1-based, as everywhere in openpyxl.
"""

import re
from typing import Iterable, Optional

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter

from h5stats.config import NO_GAMES_LABEL, PERCENT_FORMAT
from h5stats.report.styles import Style, apply_style


MAX_SHEET_TITLE = 31
_INVALID_TITLE_CHARS = re.compile(r'[\\*?:/\[\]]')


def write(ws, row: int, col: int, value, style: Optional[Style] = Style.THIN_BORDER_WRAP):
    """Write a value and style the cell."""
    if isinstance(value, str):
        value = clean_text(value)
    cell = ws.cell(row=row, column=col, value=value)
    if style is not None:
        apply_style(cell, style)
    return cell


def write_rate(ws, row: int, col: int, rate: Optional[float], style: Optional[Style] = Style.THIN_BORDER_WRAP):
    """Write a percentage cell, or the "No games" label for an undefined rate."""
    if rate is None:
        return write(ws, row, col, NO_GAMES_LABEL, style)
    cell = write(ws, row, col, rate, style)
    cell.number_format = PERCENT_FORMAT
    return cell


def write_optional(ws, row: int, col: int, value, style: Optional[Style] = Style.THIN_BORDER_WRAP,
                   number_format: Optional[str] = None):
    """Write a plain number, or "No games" when there is nothing to show."""
    if value is None:
        return write(ws, row, col, NO_GAMES_LABEL, style)
    cell = write(ws, row, col, value, style)
    if number_format:
        cell.number_format = number_format
    return cell


def merge(ws, first_row: int, first_col: int, last_row: int, last_col: int, value,
          style: Optional[Style] = Style.BOLD_CENTERED):
    """Write into the top-left cell and merge the range."""
    cell = write(ws, first_row, first_col, value, style)
    if (first_row, first_col) != (last_row, last_col):
        ws.merge_cells(start_row=first_row, start_column=first_col,
                       end_row=last_row, end_column=last_col)
    return cell


def highlight(ws, row: int, col: int, style: Style) -> None:
    """Restyle an already written cell."""
    apply_style(ws.cell(row=row, column=col), style)


def clean_text(text: str) -> str:
    """Drop control characters openpyxl refuses to store in a cell."""
    return ILLEGAL_CHARACTERS_RE.sub('', text)


def set_width(ws, col: int, width: float) -> None:
    ws.column_dimensions[get_column_letter(col)].width = width


def safe_sheet_title(name: str, taken: Iterable[str]) -> str:
    """
    Make a name usable as a worksheet title.

    Excel forbids ``\\ * ? : / [ ]`` and titles longer than 31 characters,
    and compares titles case-insensitively. Clashes get a " (2)", " (3)"...
    suffix, trimmed so the whole title still fits.
    """
    base = _INVALID_TITLE_CHARS.sub('_', clean_text(name or '')).strip() or 'Sheet'
    base = base[:MAX_SHEET_TITLE]
    used = {t.lower() for t in taken}

    title = base
    counter = 2
    while title.lower() in used:
        suffix = f" ({counter})"
        title = base[:MAX_SHEET_TITLE - len(suffix)] + suffix
        counter += 1
    return title
