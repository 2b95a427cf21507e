"""
Per-race sheet: bargain block, hero usage table and hero matchup blocks.
"""

from h5stats.model.tournament import TournamentStatsModel
from h5stats.report.layout import merge, set_width, write, write_optional, write_rate
from h5stats.report.styles import Style
from h5stats.stats.common import WinLoss
from h5stats.stats.races import BargainTotals, HeroMatchup, RaceBargainStats, RaceStats


AVERAGE_FORMAT = '0.00'

BLOCK_GAP = 2

# (title, extra column for the extreme) per bucket
BARGAIN_GROUPS = (
    ("Bargained up", "Max"),
    ("Bargained down", "Min"),
    ("No bargain", None),
)


# ============================================================================
# WIN / LOSS CELLS
# ============================================================================

def _write_record(ws, row: int, col: int, record: WinLoss) -> None:
    """Wins then losses; non-zero wins green, non-zero losses red."""
    write(ws, row, col, record.wins, Style.GREEN if record.wins else Style.THIN_BORDER_CENTER)
    write(ws, row, col + 1, record.losses, Style.RED if record.losses else Style.THIN_BORDER_CENTER)


# ============================================================================
# BARGAINS
# ============================================================================

def _bucket_width(extreme_label) -> int:
    # games, wins, losses, winrate (+ extreme, average)
    return 6 if extreme_label else 4


def _write_bucket(ws, row: int, col: int, bucket, extreme_label) -> None:
    write(ws, row, col, bucket.games, Style.THIN_BORDER_CENTER)
    _write_record(ws, row, col + 1, bucket.record)
    write_rate(ws, row, col + 3, bucket.record.winrate, Style.THIN_BORDER_CENTER)
    if not extreme_label:
        return
    if isinstance(bucket, BargainTotals):
        average = bucket.grand_average
    else:
        average = bucket.average
    write_optional(ws, row, col + 4, bucket.extreme, Style.THIN_BORDER_CENTER)
    write_optional(ws, row, col + 5, average, Style.THIN_BORDER_CENTER, AVERAGE_FORMAT)


def _write_bargains(ws, start: int, bargains: RaceBargainStats, model: TournamentStatsModel) -> int:
    """Returns the first free row below the block."""
    widths = [_bucket_width(extreme) for _, extreme in BARGAIN_GROUPS]
    merge(ws, start, 1, start, 1 + sum(widths), "Bargains", Style.TITLE)
    merge(ws, start + 1, 1, start + 2, 1, "VS", Style.VS)

    col = 2
    for (title, extreme), width in zip(BARGAIN_GROUPS, widths):
        merge(ws, start + 1, col, start + 1, col + width - 1, title, Style.BOLD_CENTERED)
        labels = ["Games", "Wins", "Losses", "Winrate"] + ([extreme, "Average"] if extreme else [])
        for offset, label in enumerate(labels):
            write(ws, start + 2, col + offset, label, Style.BOLD_CENTERED)
        col += width

    def write_line(row, label, buckets):
        write(ws, row, 1, label, Style.BOLD_CENTERED)
        col = 2
        for bucket, (_, extreme), width in zip(buckets, BARGAIN_GROUPS, widths):
            _write_bucket(ws, row, col, bucket, extreme)
            col += width

    row = start + 3
    for line in bargains.lines:
        write_line(row, model.race(line.opponent_race_id).name, (line.up, line.down, line.none))
        row += 1
    write_line(row, "Total", (bargains.up, bargains.down, bargains.none))
    return row + 1 + BLOCK_GAP


# ============================================================================
# HERO USAGE
# ============================================================================

def _write_hero_usage(ws, start: int, stats: RaceStats, model: TournamentStatsModel) -> int:
    opponents = [m.opponent_race_id for m in stats.matchups]
    fixed = ["Hero", "Total wins", "Total losses", "Total games", "Pick rate"]

    merge(ws, start, 1, start, len(fixed), "Hero usage", Style.TITLE)
    header = start + 1
    for col, label in enumerate(fixed, start=1):
        write(ws, header, col, label, Style.BOLD_CENTERED)
    for k, opponent_id in enumerate(opponents):
        col = len(fixed) + 1 + 2 * k
        name = model.race(opponent_id).name
        write(ws, header, col, f"Games vs {name}", Style.BOLD_CENTERED)
        write(ws, header, col + 1, f"Winrate vs {name}", Style.BOLD_CENTERED)

    row = header + 1
    for usage in stats.heroes:
        write(ws, row, 1, model.hero(usage.hero_id).name, Style.BOLD_CENTERED)
        _write_record(ws, row, 2, usage.record)
        write(ws, row, 4, usage.record.games, Style.THIN_BORDER_CENTER)
        write_rate(ws, row, 5, usage.pick_rate, Style.THIN_BORDER_CENTER)
        for k, opponent_id in enumerate(opponents):
            col = len(fixed) + 1 + 2 * k
            record = usage.against(opponent_id)
            write(ws, row, col, record.games, Style.THIN_BORDER_CENTER)
            write_rate(ws, row, col + 1, record.winrate, Style.THIN_BORDER_CENTER)
        row += 1
    return row + BLOCK_GAP


# ============================================================================
# HERO MATCHUPS
# ============================================================================

def _write_matchup(ws, start: int, matchup: HeroMatchup, model: TournamentStatsModel) -> int:
    race_name = model.race(matchup.race_id).name
    opponent_name = model.race(matchup.opponent_race_id).name
    total_col = 2 + 2 * len(matchup.opponent_heroes)

    merge(ws, start, 1, start, max(total_col + 1, 6), f"{race_name} vs {opponent_name}", Style.TITLE)
    merge(ws, start + 1, 1, start + 2, 1, "VS", Style.VS)
    for k, hero_id in enumerate(matchup.opponent_heroes):
        col = 2 + 2 * k
        merge(ws, start + 1, col, start + 1, col + 1, model.hero(hero_id).name, Style.BOLD_CENTERED)
        write(ws, start + 2, col, "Wins", Style.BOLD_CENTERED)
        write(ws, start + 2, col + 1, "Losses", Style.BOLD_CENTERED)
    write(ws, start + 1, total_col, "Total games", Style.BOLD_CENTERED)
    write(ws, start + 1, total_col + 1, "Winrate", Style.BOLD_CENTERED)
    write(ws, start + 2, total_col, None, Style.SILVER)
    write(ws, start + 2, total_col + 1, None, Style.SILVER)

    row = start + 3
    for hero_id in matchup.heroes:
        write(ws, row, 1, model.hero(hero_id).name, Style.BOLD_CENTERED)
        for k, opponent_hero_id in enumerate(matchup.opponent_heroes):
            _write_record(ws, row, 2 + 2 * k, matchup.cell(hero_id, opponent_hero_id))
        total = matchup.row_total(hero_id)
        write(ws, row, total_col, total.games, Style.THIN_BORDER_CENTER)
        write_rate(ws, row, total_col + 1, total.winrate, Style.THIN_BORDER_CENTER)
        row += 1

    write(ws, row, 1, "Total", Style.BOLD_CENTERED)
    grand = WinLoss()
    for k, opponent_hero_id in enumerate(matchup.opponent_heroes):
        column = matchup.column_total(opponent_hero_id)
        grand.merge(column)
        _write_record(ws, row, 2 + 2 * k, column)
    write(ws, row, total_col, grand.games, Style.THIN_BORDER_CENTER)
    write_rate(ws, row, total_col + 1, grand.winrate, Style.THIN_BORDER_CENTER)
    return row + 1 + BLOCK_GAP


def build_race_sheet(ws, stats: RaceStats, model: TournamentStatsModel) -> None:
    """
    Fill one race's worksheet.

    The bargain block is only written when the aggregator produced one,
    i.e. when the tournament plays with bargains.
    """
    row = 1
    if stats.bargains is not None:
        row = _write_bargains(ws, row, stats.bargains, model)
    row = _write_hero_usage(ws, row, stats, model)
    for matchup in stats.matchups:
        row = _write_matchup(ws, row, matchup, model)

    names = [model.hero(h.hero_id).name for h in stats.heroes]
    set_width(ws, 1, max([len(n) for n in names] + [12]) + 2)
    widest = max([2 + 2 * len(m.opponent_heroes) + 1 for m in stats.matchups] + [5 + 2 * len(stats.matchups), 18])
    for col in range(2, widest + 1):
        set_width(ws, col, 12)
