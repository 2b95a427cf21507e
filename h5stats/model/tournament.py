"""
Materialized snapshot of one tournament, ready for aggregation.

``build_stats_model`` takes the raw provider collections, validates every
game, checks that each race/hero/user reference resolves and applies the
configured LookupPolicy to the ones that don't.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from h5stats.config import LookupPolicy
from h5stats.errors import ReferenceLookupError
from h5stats.model.entities import RACES, Hero, Match, Race, Tournament, User
from h5stats.model.game import GameRecord, Rejection, validate_games


logger = logging.getLogger(__name__)


@dataclass
class TournamentStatsModel:
    """Everything one report run reads. Treated as immutable once built."""
    tournament: Tournament
    users: List[User] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    games: List[GameRecord] = field(default_factory=list)
    races: List[Race] = field(default_factory=lambda: list(RACES))
    heroes: List[Hero] = field(default_factory=list)
    rejections: List[Rejection] = field(default_factory=list)

    def __post_init__(self):
        self._races_by_id: Dict[int, Race] = {r.id: r for r in self.races}
        self._heroes_by_id: Dict[int, Hero] = {h.id: h for h in self.heroes}
        self._users_by_id: Dict[str, User] = {u.id: u for u in self.users}

    def race(self, race_id: int) -> Race:
        return self._races_by_id[race_id]

    def hero(self, hero_id: int) -> Hero:
        return self._heroes_by_id[hero_id]

    def user(self, user_id: str) -> User:
        return self._users_by_id[user_id]

    def has_race(self, race_id: int) -> bool:
        return race_id in self._races_by_id

    def has_hero(self, hero_id: int) -> bool:
        return hero_id in self._heroes_by_id

    def has_user(self, user_id: str) -> bool:
        return user_id in self._users_by_id

    def heroes_of_race(self, race_id: int) -> List[Hero]:
        return [h for h in self.heroes if h.race == race_id]

    def games_of_match(self, match_id: str) -> List[GameRecord]:
        return [g for g in self.games if g.match_id == match_id]


def _unresolved_reference(model: TournamentStatsModel, game: GameRecord) -> Optional[Rejection]:
    for side in ("first", "second"):
        race_id = getattr(game, f"{side}_player_race")
        if not model.has_race(race_id):
            return Rejection(game.id, f"{side}_player_race", f"unknown race {race_id}")
        hero_id = getattr(game, f"{side}_player_hero")
        if not model.has_hero(hero_id):
            return Rejection(game.id, f"{side}_player_hero", f"unknown hero {hero_id}")
    return None


def build_stats_model(
    tournament: Tournament,
    users: Iterable[User],
    matches: Iterable[Match],
    raw_games: Iterable[dict],
    heroes: Iterable[Hero],
    races: Optional[List[Race]] = None,
    policy: LookupPolicy = LookupPolicy.SKIP,
) -> TournamentStatsModel:
    """
    Validate raw games and resolve references into a TournamentStatsModel.

    Args:
        tournament: tournament settings
        users: participants, provider order
        matches: matches, provider order
        raw_games: raw game dicts, provider order
        heroes: hero reference list for the tournament's mod
        races: race reference list (defaults to the fixed faction list)
        policy: what to do with unresolved race/hero/user references

    Returns:
        TournamentStatsModel with rejected records listed in ``rejections``

    Raises:
        ReferenceLookupError: an unresolved reference under LookupPolicy.ABORT
    """
    records, rejections = validate_games(raw_games)

    model = TournamentStatsModel(
        tournament=tournament,
        users=list(users),
        matches=[],
        games=[],
        races=list(races) if races is not None else list(RACES),
        heroes=list(heroes),
        rejections=rejections,
    )

    for game in records:
        problem = _unresolved_reference(model, game)
        if problem is None:
            model.games.append(game)
            continue
        if policy is LookupPolicy.ABORT:
            kind = "race" if problem.field.endswith("race") else "hero"
            ref_id = getattr(game, problem.field)
            raise ReferenceLookupError(kind, ref_id, game.id)
        logger.warning("Skipping %s", problem)
        model.rejections.append(problem)

    for match in matches:
        missing = [p for p in (match.first_player, match.second_player) if not model.has_user(p)]
        if not missing:
            model.matches.append(match)
            continue
        if policy is LookupPolicy.ABORT:
            raise ReferenceLookupError("user", missing[0], match.id)
        logger.warning("Skipping match %s: no user found with id %s", match.id, missing[0])

    logger.info(
        "Stats model for %s: %d games kept, %d rejected, %d matches",
        tournament.name, len(model.games), len(model.rejections), len(model.matches),
    )
    return model
