"""
Race / hero / bargain statistics aggregator.

For every race this produces:
- hero usage: heroes picked by the race's players with wins, losses,
  pick rate and per-opponent-race records
- hero matchups: one hero-vs-hero win/loss matrix per opponent race
- bargain buckets (only when the tournament plays with bargains):
  games split into "up", "down" and "none" by the bargain amount seen
  from the race's side, per opponent race and in total

A "pick" is one side's appearance in a game, so a mirror game counts as
two picks of the race and the pick rates of a race's heroes sum to 1.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from h5stats.model.game import GameRecord
from h5stats.model.tournament import TournamentStatsModel
from h5stats.stats.common import WinLoss, mean, ratio


BUCKET_UP = "up"
BUCKET_DOWN = "down"
BUCKET_NONE = "none"


# ============================================================================
# HERO USAGE
# ============================================================================

@dataclass
class HeroUsage:
    """One hero as picked by players of a race."""
    hero_id: int
    record: WinLoss = field(default_factory=WinLoss)
    vs_races: Dict[int, WinLoss] = field(default_factory=dict)
    pick_rate: Optional[float] = None

    def against(self, race_id: int) -> WinLoss:
        return self.vs_races.get(race_id, WinLoss())


@dataclass
class HeroMatchup:
    """
    Hero-vs-hero matrix for one (race, opponent race) pair.

    Rows are the race's picked heroes, columns the opponent race's heroes.
    Only games between exactly these two races are counted.
    """
    race_id: int
    opponent_race_id: int
    heroes: List[int]
    opponent_heroes: List[int]
    cells: Dict[Tuple[int, int], WinLoss] = field(default_factory=dict)

    def cell(self, hero_id: int, opponent_hero_id: int) -> WinLoss:
        return self.cells.get((hero_id, opponent_hero_id), WinLoss())

    def row_total(self, hero_id: int) -> WinLoss:
        total = WinLoss()
        for opponent_hero_id in self.opponent_heroes:
            total.merge(self.cell(hero_id, opponent_hero_id))
        return total

    def column_total(self, opponent_hero_id: int) -> WinLoss:
        total = WinLoss()
        for hero_id in self.heroes:
            total.merge(self.cell(hero_id, opponent_hero_id))
        return total


# ============================================================================
# BARGAINS
# ============================================================================

@dataclass
class BargainBucket:
    """Games of one bucket against one opponent race."""
    kind: str
    record: WinLoss = field(default_factory=WinLoss)
    amounts: List[int] = field(default_factory=list)

    def add(self, amount: int, won: bool) -> None:
        self.record.add(won)
        self.amounts.append(amount)

    @property
    def games(self) -> int:
        return self.record.games

    @property
    def average(self) -> Optional[float]:
        return mean(self.amounts)

    @property
    def extreme(self) -> Optional[int]:
        """Largest amount for "up", smallest for "down"; None otherwise."""
        if not self.amounts or self.kind == BUCKET_NONE:
            return None
        return max(self.amounts) if self.kind == BUCKET_UP else min(self.amounts)


@dataclass
class BargainLine:
    """All three buckets against one opponent race."""
    opponent_race_id: int
    up: BargainBucket = field(default_factory=lambda: BargainBucket(BUCKET_UP))
    down: BargainBucket = field(default_factory=lambda: BargainBucket(BUCKET_DOWN))
    none: BargainBucket = field(default_factory=lambda: BargainBucket(BUCKET_NONE))

    def bucket_for(self, amount: int) -> BargainBucket:
        if amount > 0:
            return self.up
        if amount < 0:
            return self.down
        return self.none


@dataclass
class BargainTotals:
    """
    One bucket aggregated across opponents.

    ``grand_average`` is the mean of the per-opponent averages, so every
    opponent with games in the bucket weighs the same regardless of how
    many games it contributed.
    """
    kind: str
    record: WinLoss = field(default_factory=WinLoss)
    averages: List[float] = field(default_factory=list)
    extremes: List[int] = field(default_factory=list)

    def add_bucket(self, bucket: BargainBucket) -> None:
        self.record.merge(bucket.record)
        if bucket.games and bucket.kind != BUCKET_NONE:
            self.averages.append(bucket.average)
        if bucket.extreme is not None:
            self.extremes.append(bucket.extreme)

    @property
    def games(self) -> int:
        return self.record.games

    @property
    def grand_average(self) -> Optional[float]:
        return mean(self.averages)

    @property
    def extreme(self) -> Optional[int]:
        if not self.extremes:
            return None
        return max(self.extremes) if self.kind == BUCKET_UP else min(self.extremes)


@dataclass
class RaceBargainStats:
    race_id: int
    lines: List[BargainLine] = field(default_factory=list)
    up: BargainTotals = field(default_factory=lambda: BargainTotals(BUCKET_UP))
    down: BargainTotals = field(default_factory=lambda: BargainTotals(BUCKET_DOWN))
    none: BargainTotals = field(default_factory=lambda: BargainTotals(BUCKET_NONE))

    def add_line(self, line: BargainLine) -> None:
        self.lines.append(line)
        self.up.add_bucket(line.up)
        self.down.add_bucket(line.down)
        self.none.add_bucket(line.none)


# ============================================================================
# PER-RACE RESULT
# ============================================================================

@dataclass
class RaceStats:
    race_id: int
    total_picks: int
    heroes: List[HeroUsage]
    matchups: List[HeroMatchup]
    bargains: Optional[RaceBargainStats] = None


class RaceStatsBuilder:
    """
    Builds RaceStats for every race of a TournamentStatsModel.

    Bargain buckets are only computed when the tournament has
    ``with_bargains`` set.
    """

    def __init__(self, model: TournamentStatsModel):
        self.model = model

    def build(self) -> List[RaceStats]:
        return [self.build_race(race.id) for race in sorted(self.model.races, key=lambda r: r.id)]

    def build_race(self, race_id: int) -> RaceStats:
        sides = self._race_sides(race_id)
        heroes = self._hero_usage(sides)
        opponents = [r.id for r in sorted(self.model.races, key=lambda r: r.id) if r.id != race_id]

        matchups = [
            self._hero_matchup(race_id, opponent_id, [h.hero_id for h in heroes], sides)
            for opponent_id in opponents
        ]

        bargains = None
        if self.model.tournament.with_bargains:
            bargains = self._bargains(race_id, opponents, sides)

        return RaceStats(
            race_id=race_id,
            total_picks=len(sides),
            heroes=heroes,
            matchups=matchups,
            bargains=bargains,
        )

    def _race_sides(self, race_id: int) -> List[Tuple[GameRecord, bool]]:
        """Every (game, is_first) where that side played the race, in game order."""
        return [
            (game, is_first)
            for game in self.model.games
            for is_first in (True, False)
            if game.race_for(is_first) == race_id
        ]

    def _hero_usage(self, sides: List[Tuple[GameRecord, bool]]) -> List[HeroUsage]:
        usage: Dict[int, HeroUsage] = {}
        for game, is_first in sides:
            entry = usage.setdefault(game.hero_for(is_first), HeroUsage(game.hero_for(is_first)))
            won = game.won_by(is_first)
            entry.record.add(won)
            entry.vs_races.setdefault(game.race_for(not is_first), WinLoss()).add(won)

        for entry in usage.values():
            entry.pick_rate = ratio(entry.record.games, len(sides))
        return list(usage.values())

    def _hero_matchup(
        self,
        race_id: int,
        opponent_id: int,
        heroes: List[int],
        sides: List[Tuple[GameRecord, bool]],
    ) -> HeroMatchup:
        opponent_heroes = [h.id for h in self.model.heroes_of_race(opponent_id)]
        games = [(g, first) for g, first in sides if g.race_for(not first) == opponent_id]

        if self.model.tournament.with_foreign_heroes:
            for game, is_first in games:
                hero_id = game.hero_for(not is_first)
                if hero_id not in opponent_heroes:
                    opponent_heroes.append(hero_id)

        matchup = HeroMatchup(race_id, opponent_id, list(heroes), opponent_heroes)
        shown = set(opponent_heroes)
        for game, is_first in games:
            opponent_hero = game.hero_for(not is_first)
            if opponent_hero not in shown:
                continue
            key = (game.hero_for(is_first), opponent_hero)
            matchup.cells.setdefault(key, WinLoss()).add(game.won_by(is_first))
        return matchup

    def _bargains(
        self,
        race_id: int,
        opponents: List[int],
        sides: List[Tuple[GameRecord, bool]],
    ) -> RaceBargainStats:
        stats = RaceBargainStats(race_id)
        for opponent_id in opponents:
            line = BargainLine(opponent_id)
            for game, is_first in sides:
                if game.race_for(not is_first) != opponent_id:
                    continue
                amount = game.bargain_for(is_first)
                if amount is None:
                    continue
                line.bucket_for(amount).add(amount, game.won_by(is_first))
            stats.add_line(line)
        return stats
