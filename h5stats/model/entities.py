"""
Reference data for a report run: races, heroes, users, matches, tournament.

All of these are read-only for the duration of a run. ``from_api``
constructors accept the snake_case dicts produced by the provider client
or a snapshot file.
"""

from dataclasses import dataclass
from typing import List

from h5stats.model.enums import GameType, ModType, from_transport


@dataclass(frozen=True)
class Race:
    """One of the eight playable factions."""
    id: int
    name: str


# Fixed faction list; id 0 is reserved by the service and never used.
RACES: List[Race] = [
    Race(1, "Haven"),
    Race(2, "Inferno"),
    Race(3, "Necropolis"),
    Race(4, "Sylvan"),
    Race(5, "Dungeon"),
    Race(6, "Academy"),
    Race(7, "Fortress"),
    Race(8, "Stronghold"),
]


@dataclass(frozen=True)
class Hero:
    id: int
    name: str
    race: int

    @classmethod
    def from_api(cls, data: dict) -> "Hero":
        return cls(id=int(data["id"]), name=data["name"], race=int(data["race"]))


@dataclass(frozen=True)
class User:
    """A tournament participant."""
    id: str
    nickname: str

    @classmethod
    def from_api(cls, data: dict) -> "User":
        return cls(id=str(data["id"]), nickname=data["nickname"])


@dataclass(frozen=True)
class Match:
    """A best-of series between two participants."""
    id: str
    tournament_id: str
    first_player: str
    second_player: str

    def involves(self, user_id: str) -> bool:
        return user_id in (self.first_player, self.second_player)

    def opponent_of(self, user_id: str) -> str:
        return self.second_player if self.first_player == user_id else self.first_player

    @classmethod
    def from_api(cls, data: dict) -> "Match":
        return cls(
            id=str(data["id"]),
            tournament_id=str(data.get("tournament_id", "")),
            first_player=str(data["first_player"]),
            second_player=str(data["second_player"]),
        )


@dataclass(frozen=True)
class Tournament:
    """
    Tournament settings.

    The three ``with_*`` flags decide which report sections and columns
    are emitted; nothing in the aggregators changes them.
    """
    id: str
    name: str
    mod_type: ModType = ModType.UNIVERSE
    game_type: GameType = GameType.RMG
    with_bargains: bool = False
    with_bargains_color: bool = False
    with_foreign_heroes: bool = False

    @property
    def shows_outcome(self) -> bool:
        return self.game_type is GameType.RMG

    @classmethod
    def from_api(cls, data: dict) -> "Tournament":
        return cls(
            id=str(data["id"]),
            name=data.get("name") or str(data["id"]),
            mod_type=from_transport(ModType, data.get("mod_type")) or ModType.UNIVERSE,
            game_type=from_transport(GameType, data.get("game_type")) or GameType.RMG,
            with_bargains=bool(data.get("with_bargains", False)),
            with_bargains_color=bool(data.get("with_bargains_color", False)),
            with_foreign_heroes=bool(data.get("with_foreign_heroes", False)),
        )
