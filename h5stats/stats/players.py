"""
Player history aggregator.

Builds, for one participant, the chronological list of their games and
personal per-race / per-hero records. Matches and games keep the order
the provider returned them in.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from h5stats.config import BARGAINS_COLOR_LABELS, OUTCOME_LABELS
from h5stats.model.entities import Match, User
from h5stats.model.enums import BargainsColor
from h5stats.model.game import GameRecord
from h5stats.model.tournament import TournamentStatsModel
from h5stats.stats.common import WinLoss, ratio


@dataclass(frozen=True)
class GameHistoryEntry:
    """One game as seen by the player the history belongs to."""
    match_id: str
    game_id: str
    opponent: str
    player_race: str
    player_hero: str
    opponent_race: str
    opponent_hero: str
    won: bool
    bargains_amount: Optional[int] = None
    bargains_color: Optional[str] = None
    outcome: Optional[str] = None


@dataclass
class PlayerHistory:
    user: User
    entries: List[GameHistoryEntry] = field(default_factory=list)
    race_records: Dict[int, WinLoss] = field(default_factory=dict)
    hero_records: Dict[int, WinLoss] = field(default_factory=dict)

    @property
    def total_games(self) -> int:
        return len(self.entries)

    @property
    def total_wins(self) -> int:
        return sum(1 for entry in self.entries if entry.won)

    @property
    def winrate(self) -> Optional[float]:
        """None when the player has no recorded games."""
        return ratio(self.total_wins, self.total_games)

    def picked_races(self) -> List[int]:
        return sorted(self.race_records)

    def picked_heroes(self) -> List[int]:
        """Hero ids in the order they were first picked."""
        return list(self.hero_records)

    def race_winrate(self, race_id: int) -> float:
        """Personal winrate with a race; 0.0 for a race never picked."""
        record = self.race_records.get(race_id)
        return record.winrate if record is not None else 0.0

    def hero_winrate(self, hero_id: int) -> float:
        record = self.hero_records.get(hero_id)
        return record.winrate if record is not None else 0.0


def _color_label(color: Optional[BargainsColor]) -> Optional[str]:
    if color is None or color is BargainsColor.NOT_SELECTED:
        return None
    return BARGAINS_COLOR_LABELS[color.value]


def _history_entry(
    model: TournamentStatsModel,
    match: Match,
    game: GameRecord,
    is_first: bool,
) -> GameHistoryEntry:
    tournament = model.tournament
    opponent = model.user(match.second_player if is_first else match.first_player)

    outcome = None
    if tournament.shows_outcome and game.outcome is not None:
        outcome = OUTCOME_LABELS[game.outcome.value]

    return GameHistoryEntry(
        match_id=match.id,
        game_id=game.id,
        opponent=opponent.nickname,
        player_race=model.race(game.race_for(is_first)).name,
        player_hero=model.hero(game.hero_for(is_first)).name,
        opponent_race=model.race(game.race_for(not is_first)).name,
        opponent_hero=model.hero(game.hero_for(not is_first)).name,
        won=game.won_by(is_first),
        bargains_amount=game.bargain_for(is_first),
        bargains_color=_color_label(game.bargains_color) if tournament.with_bargains_color else None,
        outcome=outcome,
    )


def build_player_history(model: TournamentStatsModel, user: User) -> PlayerHistory:
    """
    Collect one participant's games and personal records.

    Args:
        model: resolved tournament snapshot
        user: the participant

    Returns:
        PlayerHistory with entries in provider order
    """
    history = PlayerHistory(user=user)

    for match in model.matches:
        if not match.involves(user.id):
            continue
        is_first = match.first_player == user.id

        for game in model.games_of_match(match.id):
            entry = _history_entry(model, match, game, is_first)
            history.entries.append(entry)

            won = game.won_by(is_first)
            history.race_records.setdefault(game.race_for(is_first), WinLoss()).add(won)
            history.hero_records.setdefault(game.hero_for(is_first), WinLoss()).add(won)

    return history


def build_player_histories(model: TournamentStatsModel) -> List[PlayerHistory]:
    """Histories for every participant, in provider order."""
    return [build_player_history(model, user) for user in model.users]
