"""Shared test factories for aggregator and report tests.

Reference data used throughout:
    races   the fixed faction list (1 Haven .. 8 Stronghold)
    heroes  two per race, ids race*10+1 and race*10+2
    users   "u1" Alice, "u2" Bob, "u3" Carol
    matches "m1" Alice vs Bob, "m2" Bob vs Carol
"""

from h5stats.model.entities import RACES, Hero, Match, Tournament, User
from h5stats.model.enums import BargainsColor, GameOutcome, GameResult
from h5stats.model.game import GameRecord
from h5stats.model.tournament import TournamentStatsModel


HEROES = [
    Hero(race.id * 10 + k, f"{race.name} Hero {k}", race.id)
    for race in RACES
    for k in (1, 2)
]

USERS = [User("u1", "Alice"), User("u2", "Bob"), User("u3", "Carol")]

MATCHES = [
    Match("m1", "t1", "u1", "u2"),
    Match("m2", "t1", "u2", "u3"),
]


def hero_of(race_id: int, k: int = 1) -> int:
    return race_id * 10 + k


# ─── Raw game factory ────────────────────────────────────────────────

def make_raw_game(**overrides):
    """Build a valid raw provider game dict (snake_case). Override any field via kwargs."""
    raw = {
        "id": "g1",
        "match_id": "m1",
        "first_player_race": 1,
        "first_player_hero": hero_of(1),
        "second_player_race": 2,
        "second_player_hero": hero_of(2),
        "result": "FIRST_PLAYER_WON",
        "bargains_amount": None,
        "bargains_color": None,
        "outcome": "FINAL_BATTLE_VICTORY",
    }
    raw.update(overrides)
    return raw


# ─── Validated game factory ──────────────────────────────────────────

_counter = {"n": 0}


def make_game(first_race, second_race, first_won=True, first_hero=None, second_hero=None,
              match_id="m1", bargains_amount=None, bargains_color=None,
              outcome=GameOutcome.FINAL_BATTLE_VICTORY, game_id=None):
    """Build a GameRecord; heroes default to the first hero of each race."""
    if game_id is None:
        _counter["n"] += 1
        game_id = f"g{_counter['n']}"
    return GameRecord(
        id=game_id,
        match_id=match_id,
        first_player_race=first_race,
        first_player_hero=first_hero if first_hero is not None else hero_of(first_race),
        second_player_race=second_race,
        second_player_hero=second_hero if second_hero is not None else hero_of(second_race),
        result=GameResult.FIRST_PLAYER_WON if first_won else GameResult.SECOND_PLAYER_WON,
        bargains_amount=bargains_amount,
        bargains_color=bargains_color,
        outcome=outcome,
    )


def make_tournament(**overrides):
    fields = {"id": "t1", "name": "Test Cup"}
    fields.update(overrides)
    return Tournament(**fields)


def make_model(games, heroes=None, users=None, matches=None, **tournament_overrides):
    """TournamentStatsModel over already validated games."""
    return TournamentStatsModel(
        tournament=make_tournament(**tournament_overrides),
        users=list(USERS if users is None else users),
        matches=list(MATCHES if matches is None else matches),
        games=list(games),
        heroes=list(HEROES if heroes is None else heroes),
    )


RED = BargainsColor.RED
BLUE = BargainsColor.BLUE


# ─── Raw provider collections ────────────────────────────────────────

def make_collections():
    """Raw snapshot collections: one valid game and one with hero id 0."""
    return {
        "tournament": {"id": "t1", "name": "Кубок", "mod_type": "UNIVERSE", "game_type": "RMG",
                       "with_bargains": True, "with_bargains_color": False, "with_foreign_heroes": False},
        "users": [{"id": "u1", "nickname": "Alice"}, {"id": "u2", "nickname": "Bob"}],
        "matches": [{"id": "m1", "tournament_id": "t1", "first_player": "u1", "second_player": "u2"}],
        "games": [
            {"id": "g1", "match_id": "m1", "first_player_race": 1, "first_player_hero": 11,
             "second_player_race": 2, "second_player_hero": 21, "result": "FIRST_PLAYER_WON",
             "bargains_amount": 50, "bargains_color": None, "outcome": "FINAL_BATTLE_VICTORY"},
            {"id": "g2", "match_id": "m1", "first_player_race": 1, "first_player_hero": 0,
             "second_player_race": 2, "second_player_hero": 21, "result": "FIRST_PLAYER_WON",
             "bargains_amount": None, "bargains_color": None, "outcome": None},
        ],
        "heroes": [
            {"id": 11, "name": "Godric", "race": 1},
            {"id": 21, "name": "Grawl", "race": 2},
        ],
    }
