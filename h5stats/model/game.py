"""
Game record model.

Turns raw provider game dicts into validated, immutable ``GameRecord``
objects. Incomplete records are never zero-filled: they come back as a
``Rejection`` naming the game and the offending field, and the caller
drops them from aggregation.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from h5stats.model.enums import BargainsColor, GameOutcome, GameResult, from_transport


logger = logging.getLogger(__name__)

# Checked in this order; the first problem found is the one reported.
REQUIRED_FIELDS = (
    "first_player_race",
    "first_player_hero",
    "second_player_race",
    "second_player_hero",
)


@dataclass(frozen=True)
class GameRecord:
    """One finished game, validated and ready for aggregation."""
    id: str
    match_id: str
    first_player_race: int
    first_player_hero: int
    second_player_race: int
    second_player_hero: int
    result: GameResult
    bargains_amount: Optional[int] = None   # None: bargaining not applicable
    bargains_color: Optional[BargainsColor] = None
    outcome: Optional[GameOutcome] = None

    @property
    def is_mirror(self) -> bool:
        return self.first_player_race == self.second_player_race

    @property
    def first_won(self) -> bool:
        return self.result is GameResult.FIRST_PLAYER_WON

    @property
    def winner_race(self) -> int:
        return self.first_player_race if self.first_won else self.second_player_race

    @property
    def loser_race(self) -> int:
        return self.second_player_race if self.first_won else self.first_player_race

    def race_for(self, is_first: bool) -> int:
        return self.first_player_race if is_first else self.second_player_race

    def hero_for(self, is_first: bool) -> int:
        return self.first_player_hero if is_first else self.second_player_hero

    def won_by(self, is_first: bool) -> bool:
        return self.first_won == is_first

    def bargain_for(self, is_first: bool) -> Optional[int]:
        """
        Bargain amount from one side's point of view.

        Stored amounts favor the first player when positive, so the value
        is negated for the second player.
        """
        if self.bargains_amount is None:
            return None
        return self.bargains_amount if is_first else -self.bargains_amount


@dataclass(frozen=True)
class Rejection:
    """Why a raw game record was excluded from aggregation."""
    game_id: str
    field: str
    reason: str = "missing"

    def __str__(self) -> str:
        return f"game {self.game_id}: {self.field} {self.reason}"


def _optional_int(value) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


def _required_id(value) -> Optional[int]:
    """Race and hero ids: None, empty and 0 (the service's 'not chosen') are missing."""
    value = _optional_int(value)
    if not value:
        return None
    return value


def validate_game(raw: dict) -> Union[GameRecord, Rejection]:
    """
    Validate one raw game dict.

    Args:
        raw: provider record with snake_case keys

    Returns:
        GameRecord, or Rejection naming the first missing/invalid field
    """
    game_id = str(raw.get("id", ""))

    ids = {}
    for field in REQUIRED_FIELDS:
        try:
            value = _required_id(raw.get(field))
        except (TypeError, ValueError):
            return Rejection(game_id, field, "invalid")
        if value is None:
            return Rejection(game_id, field, "missing")
        ids[field] = value

    try:
        result = from_transport(GameResult, raw.get("result"))
    except ValueError:
        return Rejection(game_id, "result", "invalid")
    if result is None or not result.is_decided:
        return Rejection(game_id, "result", "not selected")

    try:
        bargains_amount = _optional_int(raw.get("bargains_amount"))
    except (TypeError, ValueError):
        return Rejection(game_id, "bargains_amount", "invalid")

    try:
        bargains_color = from_transport(BargainsColor, raw.get("bargains_color"))
    except ValueError:
        return Rejection(game_id, "bargains_color", "invalid")

    try:
        outcome = from_transport(GameOutcome, raw.get("outcome"))
    except ValueError:
        return Rejection(game_id, "outcome", "invalid")

    return GameRecord(
        id=game_id,
        match_id=str(raw.get("match_id", "")),
        first_player_race=ids["first_player_race"],
        first_player_hero=ids["first_player_hero"],
        second_player_race=ids["second_player_race"],
        second_player_hero=ids["second_player_hero"],
        result=result,
        bargains_amount=bargains_amount,
        bargains_color=bargains_color,
        outcome=outcome,
    )


def validate_games(raws: Iterable[dict]) -> Tuple[List[GameRecord], List[Rejection]]:
    """
    Validate a collection of raw games, keeping provider order.

    Returns:
        Tuple of (records, rejections)
    """
    records = []
    rejections = []
    for raw in raws:
        checked = validate_game(raw)
        if isinstance(checked, Rejection):
            logger.warning("Skipping %s", checked)
            rejections.append(checked)
        else:
            records.append(checked)
    return records, rejections
