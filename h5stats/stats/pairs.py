"""
Race pairing aggregator.

Cross-tabulates game outcomes between every ordered pair of races:

    wins.loc[A, B]   -> games race A won against race B
    losses.loc[A, B] -> games race A lost against race B
    mirrors[A]       -> games where both sides picked A

The side (first/second player) a race occupied does not matter. Every
non-mirror game adds one win to the winner's row and one loss to the
loser's row, so ``wins.loc[A, B] == losses.loc[B, A]`` always holds.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from h5stats.model.game import GameRecord
from h5stats.stats.common import pick_extreme, ratio


@dataclass(frozen=True)
class RaceTotals:
    """Per-race totals across all opponents."""
    race_id: int
    wins: int
    losses: int
    mirrors: int

    @property
    def games(self) -> int:
        return self.wins + self.losses + self.mirrors

    @property
    def winrate(self) -> Optional[float]:
        """wins / (wins + losses); mirrors are left out, None without games."""
        return ratio(self.wins, self.wins + self.losses)


@dataclass(frozen=True)
class PairSummary:
    """
    Extremes picked for highlighting.

    Ties go to the lowest race id (lowest (race, opponent) tuple for
    pairs). Races without non-mirror games never take a winrate extreme.
    """
    most_played_race: Optional[int]
    least_played_race: Optional[int]
    best_winrate_race: Optional[int]
    worst_winrate_race: Optional[int]
    most_played_pair: Optional[Tuple[int, int]]
    least_played_pair: Optional[Tuple[int, int]]


class RacePairStats:
    """
    Wins/losses/mirrors between all race pairs for one report run.

    Usage:
        stats = RacePairStats([1, 2, 3]).collect(games)
        stats.wins_against(1, 2)
    """

    def __init__(self, race_ids: Iterable[int]):
        self.race_ids: List[int] = sorted(race_ids)
        self.wins = pd.DataFrame(0, index=self.race_ids, columns=self.race_ids, dtype="int64")
        self.losses = pd.DataFrame(0, index=self.race_ids, columns=self.race_ids, dtype="int64")
        self.mirrors = pd.Series(0, index=self.race_ids, dtype="int64")

    def collect(self, games: Iterable[GameRecord]) -> "RacePairStats":
        for game in games:
            if game.is_mirror:
                self.mirrors.loc[game.first_player_race] += 1
                continue
            winner, loser = game.winner_race, game.loser_race
            self.wins.loc[winner, loser] += 1
            self.losses.loc[loser, winner] += 1
        return self

    # ------------------------------------------------------------------
    # Pair lookups
    # ------------------------------------------------------------------

    def wins_against(self, race_id: int, opponent_id: int) -> int:
        return int(self.wins.loc[race_id, opponent_id])

    def losses_against(self, race_id: int, opponent_id: int) -> int:
        return int(self.losses.loc[race_id, opponent_id])

    def mirrors_of(self, race_id: int) -> int:
        return int(self.mirrors.loc[race_id])

    def pair_games(self, race_id: int, opponent_id: int) -> int:
        return self.wins_against(race_id, opponent_id) + self.losses_against(race_id, opponent_id)

    def pair_winrate(self, race_id: int, opponent_id: int) -> Optional[float]:
        return ratio(self.wins_against(race_id, opponent_id), self.pair_games(race_id, opponent_id))

    # ------------------------------------------------------------------
    # Totals
    # ------------------------------------------------------------------

    def totals(self, race_id: int) -> RaceTotals:
        return RaceTotals(
            race_id=race_id,
            wins=int(self.wins.loc[race_id].sum()),
            losses=int(self.losses.loc[race_id].sum()),
            mirrors=self.mirrors_of(race_id),
        )

    def all_totals(self) -> List[RaceTotals]:
        return [self.totals(race_id) for race_id in self.race_ids]

    def unordered_pairs(self) -> List[Tuple[int, int]]:
        return [
            (race_id, opponent_id)
            for i, race_id in enumerate(self.race_ids)
            for opponent_id in self.race_ids[i + 1:]
        ]

    def summary(self) -> PairSummary:
        totals = self.all_totals()
        pairs = self.unordered_pairs()

        def race_of(item: Optional[RaceTotals]) -> Optional[int]:
            return item.race_id if item is not None else None

        return PairSummary(
            most_played_race=race_of(pick_extreme(totals, lambda t: t.games, highest=True)),
            least_played_race=race_of(pick_extreme(totals, lambda t: t.games, highest=False)),
            best_winrate_race=race_of(pick_extreme(totals, lambda t: t.winrate, highest=True)),
            worst_winrate_race=race_of(pick_extreme(totals, lambda t: t.winrate, highest=False)),
            most_played_pair=pick_extreme(pairs, lambda p: self.pair_games(*p), highest=True),
            least_played_pair=pick_extreme(pairs, lambda p: self.pair_games(*p), highest=False),
        )

    def is_consistent(self) -> bool:
        """Check the pairwise invariant wins[A][B] == losses[B][A]."""
        return bool((self.wins.values == self.losses.T.values).all())
