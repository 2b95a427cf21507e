"""Report module: openpyxl layout of the statistics workbook."""

from .layout import safe_sheet_title
from .pairs_sheet import build_overview_sheet
from .race_sheet import build_race_sheet
from .player_sheet import build_player_sheet, history_headers
from .workbook import build_workbook, save_workbook

__all__ = [
    'safe_sheet_title',
    'build_overview_sheet',
    'build_race_sheet',
    'build_player_sheet',
    'history_headers',
    'build_workbook',
    'save_workbook',
]
