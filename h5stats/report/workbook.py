"""
Workbook assembly and saving.

Sheet order: race overview, one sheet per race (ascending id), one sheet
per participant (provider order).
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import List

from openpyxl import Workbook

from h5stats.config import OVERVIEW_SHEET
from h5stats.errors import ReportWriteError
from h5stats.model.tournament import TournamentStatsModel
from h5stats.report.layout import safe_sheet_title
from h5stats.report.pairs_sheet import build_overview_sheet
from h5stats.report.player_sheet import build_player_sheet
from h5stats.report.race_sheet import build_race_sheet
from h5stats.stats.pairs import RacePairStats
from h5stats.stats.players import PlayerHistory
from h5stats.stats.races import RaceStats


logger = logging.getLogger(__name__)


def build_workbook(
    model: TournamentStatsModel,
    pair_stats: RacePairStats,
    race_stats: List[RaceStats],
    histories: List[PlayerHistory],
) -> Workbook:
    """
    Lay out every sheet from already aggregated values.

    Nothing here computes statistics; the same inputs always give the
    same workbook.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = OVERVIEW_SHEET
    races = sorted(model.races, key=lambda r: r.id)
    build_overview_sheet(ws, races, pair_stats)

    for stats in race_stats:
        title = safe_sheet_title(model.race(stats.race_id).name, wb.sheetnames)
        build_race_sheet(wb.create_sheet(title), stats, model)

    for history in histories:
        title = safe_sheet_title(history.user.nickname, wb.sheetnames)
        build_player_sheet(wb.create_sheet(title), history, model)

    return wb


def save_workbook(wb: Workbook, output_path: Path) -> Path:
    """
    Save next to the target under a temporary name, then rename into place.

    A failed save never leaves a half-written file under the final name.

    Raises:
        ReportWriteError: the file could not be written or replaced
            (typically because it is open in Excel)
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{output_path.stem}_", suffix=".xlsx", dir=output_path.parent)
    os.close(fd)
    try:
        wb.save(tmp_name)
        os.replace(tmp_name, output_path)
    except OSError as e:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise ReportWriteError(
            f"Could not write {output_path.name}. Please close it and try again.\nError: {e}"
        ) from e

    logger.info("Report saved to %s", output_path)
    return output_path
