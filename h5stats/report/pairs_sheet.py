"""
Race overview sheet.

Layout, for N races (rows/columns 1-based):

    rows 1-2        header band: "VS" corner, one merged race name per
                    opponent over its Wins / Losses columns, "Total games"
    rows 3..N+2     one row per race; mirrors merged across the diagonal pair
    row N+4         overall winrate block
    row 2N+6        games-per-matchup matrix (diagonal black)
    row 3N+10       winrate-per-matchup matrix (diagonal black)
"""

from typing import List

from h5stats.model.entities import Race
from h5stats.report.layout import highlight, merge, set_width, write, write_rate
from h5stats.report.styles import Style
from h5stats.stats.pairs import RacePairStats


def _total_column(race_count: int) -> int:
    return 2 * race_count + 2


def _winrate_row(race_count: int) -> int:
    return race_count + 4


def _games_matrix_row(race_count: int) -> int:
    return _winrate_row(race_count) + race_count + 2


def _winrate_matrix_row(race_count: int) -> int:
    return _games_matrix_row(race_count) + race_count + 4


def _write_pair_table(ws, races: List[Race], stats: RacePairStats) -> None:
    n = len(races)
    total_col = _total_column(n)

    merge(ws, 1, 1, 2, 1, "VS", Style.VS)
    for j, opponent in enumerate(races, start=1):
        col = 2 * j
        merge(ws, 1, col, 1, col + 1, opponent.name, Style.BOLD_CENTERED)
        write(ws, 2, col, "Wins", Style.BOLD_CENTERED)
        write(ws, 2, col + 1, "Losses", Style.BOLD_CENTERED)
    write(ws, 1, total_col, "Total games", Style.BOLD_CENTERED)
    write(ws, 2, total_col, None, Style.SILVER)

    for i, race in enumerate(races, start=1):
        row = i + 2
        write(ws, row, 1, race.name, Style.BOLD_CENTERED)
        for j, opponent in enumerate(races, start=1):
            col = 2 * j
            if race.id == opponent.id:
                merge(ws, row, col, row, col + 1, stats.mirrors_of(race.id), Style.THIN_BORDER_CENTER)
                continue
            write(ws, row, col, stats.wins_against(race.id, opponent.id), Style.THIN_BORDER_CENTER)
            write(ws, row, col + 1, stats.losses_against(race.id, opponent.id), Style.THIN_BORDER_CENTER)
        write(ws, row, total_col, stats.totals(race.id).games, Style.THIN_BORDER_CENTER)


def _write_winrates(ws, races: List[Race], stats: RacePairStats) -> None:
    start = _winrate_row(len(races))
    merge(ws, start, 1, start, 2, "Overall winrate", Style.BOLD_CENTERED)
    for i, race in enumerate(races, start=1):
        write(ws, start + i, 1, race.name, Style.BOLD_CENTERED)
        write_rate(ws, start + i, 2, stats.totals(race.id).winrate, Style.THIN_BORDER_CENTER)


def _write_matrix(ws, start: int, title: str, races: List[Race], value_of) -> None:
    """Square race-by-race matrix with the diagonal blacked out."""
    merge(ws, start, 4, start, 7, title, Style.TITLE)
    header = start + 2
    write(ws, header, 1, "VS", Style.VS)
    for j, opponent in enumerate(races, start=1):
        write(ws, header, 1 + j, opponent.name, Style.BOLD_CENTERED)

    for i, race in enumerate(races, start=1):
        row = header + i
        write(ws, row, 1, race.name, Style.BOLD_CENTERED)
        for j, opponent in enumerate(races, start=1):
            if race.id == opponent.id:
                write(ws, row, 1 + j, None, Style.BLACK)
            else:
                value_of(row, 1 + j, race.id, opponent.id)


def _apply_highlights(ws, races: List[Race], stats: RacePairStats) -> None:
    n = len(races)
    position = {race.id: i for i, race in enumerate(races, start=1)}
    summary = stats.summary()

    total_col = _total_column(n)
    if summary.most_played_race is not None:
        highlight(ws, position[summary.most_played_race] + 2, total_col, Style.GREEN)
    if summary.least_played_race is not None:
        highlight(ws, position[summary.least_played_race] + 2, total_col, Style.RED)

    winrate_row = _winrate_row(n)
    if summary.best_winrate_race is not None:
        highlight(ws, winrate_row + position[summary.best_winrate_race], 2, Style.GREEN)
    if summary.worst_winrate_race is not None:
        highlight(ws, winrate_row + position[summary.worst_winrate_race], 2, Style.RED)

    header = _games_matrix_row(n) + 2
    for pair, style in ((summary.most_played_pair, Style.GREEN), (summary.least_played_pair, Style.RED)):
        if pair is None:
            continue
        a, b = position[pair[0]], position[pair[1]]
        highlight(ws, header + a, 1 + b, style)
        highlight(ws, header + b, 1 + a, style)


def build_overview_sheet(ws, races: List[Race], stats: RacePairStats) -> None:
    """
    Fill the race overview worksheet.

    Args:
        ws: target worksheet
        races: races in display order (ascending id)
        stats: collected RacePairStats over the same races
    """
    n = len(races)
    _write_pair_table(ws, races, stats)
    _write_winrates(ws, races, stats)

    _write_matrix(
        ws, _games_matrix_row(n), "Games per matchup", races,
        lambda row, col, a, b: write(ws, row, col, stats.pair_games(a, b), Style.THIN_BORDER_CENTER),
    )
    _write_matrix(
        ws, _winrate_matrix_row(n), "Winrate per matchup", races,
        lambda row, col, a, b: write_rate(ws, row, col, stats.pair_winrate(a, b), Style.THIN_BORDER_CENTER),
    )
    _apply_highlights(ws, races, stats)

    set_width(ws, 1, max([len(r.name) for r in races] + [8]) + 4)
    for col in range(2, _total_column(n) + 1):
        set_width(ws, col, 12)
