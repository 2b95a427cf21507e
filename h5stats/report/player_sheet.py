"""
Per-participant sheet: game history, overall totals, race and hero selection.

History columns depend on the tournament:
    Opponent | Player race | Player hero | Opponent race | Opponent hero
    [Player bargain]  with_bargains
    [Bargain color]   with_bargains_color
    Result
    [Outcome]         RMG tournaments
"""

from typing import List

from h5stats.config import LOSS_LABEL, WIN_LABEL
from h5stats.model.entities import Tournament
from h5stats.model.tournament import TournamentStatsModel
from h5stats.report.layout import merge, set_width, write, write_rate
from h5stats.report.styles import Style
from h5stats.stats.players import GameHistoryEntry, PlayerHistory


def history_headers(tournament: Tournament) -> List[str]:
    headers = ["Opponent", "Player race", "Player hero", "Opponent race", "Opponent hero"]
    if tournament.with_bargains:
        headers.append("Player bargain")
    if tournament.with_bargains_color:
        headers.append("Bargain color")
    headers.append("Result")
    if tournament.shows_outcome:
        headers.append("Outcome")
    return headers


def _history_values(entry: GameHistoryEntry, tournament: Tournament) -> list:
    values = [entry.opponent, entry.player_race, entry.player_hero, entry.opponent_race, entry.opponent_hero]
    if tournament.with_bargains:
        values.append(entry.bargains_amount)
    if tournament.with_bargains_color:
        values.append(entry.bargains_color)
    values.append(WIN_LABEL if entry.won else LOSS_LABEL)
    if tournament.shows_outcome:
        values.append(entry.outcome)
    return values


def _write_history(ws, history: PlayerHistory, tournament: Tournament) -> int:
    headers = history_headers(tournament)
    result_col = headers.index("Result") + 1

    merge(ws, 1, 1, 1, len(headers), f"{history.user.nickname}: game history", Style.TITLE)
    for col, label in enumerate(headers, start=1):
        write(ws, 2, col, label, Style.BOLD_CENTERED)

    row = 3
    for entry in history.entries:
        for col, value in enumerate(_history_values(entry, tournament), start=1):
            if col == result_col:
                write(ws, row, col, value, Style.GREEN if entry.won else Style.RED)
            else:
                write(ws, row, col, value, Style.THIN_BORDER_CENTER)
        row += 1
    return row + 1


def _write_selection(ws, start: int, title: str, rows) -> int:
    """rows: (name, games, winrate) tuples. Returns the first free row below."""
    merge(ws, start, 1, start, 3, title, Style.TITLE)
    write(ws, start + 1, 1, None, Style.SILVER)
    write(ws, start + 1, 2, "Total games", Style.BOLD_CENTERED)
    write(ws, start + 1, 3, "Winrate", Style.BOLD_CENTERED)
    row = start + 2
    for name, games, winrate in rows:
        write(ws, row, 1, name, Style.BOLD_CENTERED)
        write(ws, row, 2, games, Style.THIN_BORDER_CENTER)
        write_rate(ws, row, 3, winrate, Style.THIN_BORDER_CENTER)
        row += 1
    return row + 1


def build_player_sheet(ws, history: PlayerHistory, model: TournamentStatsModel) -> None:
    tournament = model.tournament
    row = _write_history(ws, history, tournament)

    write(ws, row, 1, "Total games", Style.BOLD_CENTERED)
    write(ws, row, 2, history.total_games, Style.THIN_BORDER_CENTER)
    write(ws, row + 1, 1, "Overall winrate", Style.BOLD_CENTERED)
    write_rate(ws, row + 1, 2, history.winrate, Style.THIN_BORDER_CENTER)
    row += 3

    races = [
        (model.race(race_id).name, history.race_records[race_id].games, history.race_winrate(race_id))
        for race_id in history.picked_races()
    ]
    row = _write_selection(ws, row, "Race selection", races)

    heroes = [
        (model.hero(hero_id).name, history.hero_records[hero_id].games, history.hero_winrate(hero_id))
        for hero_id in history.picked_heroes()
    ]
    _write_selection(ws, row, "Hero selection", heroes)

    for col in range(1, len(history_headers(tournament)) + 1):
        set_width(ws, col, 18)
