"""
Closed enumerations for game and tournament fields.

The remote GraphQL schema transports these as enum names (for example
``FIRST_PLAYER_WON``). The mapping tables below are written out by hand
so a change in the schema's ordinals or spelling can never silently
shift a value.
"""

from enum import Enum
from typing import Dict, Optional, Type, TypeVar


E = TypeVar("E", bound=Enum)


class GameResult(Enum):
    NOT_SELECTED = "not_selected"
    FIRST_PLAYER_WON = "first_player_won"
    SECOND_PLAYER_WON = "second_player_won"

    @property
    def is_decided(self) -> bool:
        return self is not GameResult.NOT_SELECTED


class GameOutcome(Enum):
    FINAL_BATTLE_VICTORY = "final_battle_victory"
    NEUTRALS_VICTORY = "neutrals_victory"
    OPPONENT_SURRENDER = "opponent_surrender"


class BargainsColor(Enum):
    NOT_SELECTED = "not_selected"
    RED = "red"
    BLUE = "blue"


class ModType(Enum):
    UNIVERSE = "universe"
    HRTA = "hrta"


class GameType(Enum):
    RMG = "rmg"
    ARENA = "arena"


# Transport name -> enum member
_FROM_TRANSPORT: Dict[type, Dict[str, Enum]] = {
    GameResult: {
        "NOT_SELECTED": GameResult.NOT_SELECTED,
        "FIRST_PLAYER_WON": GameResult.FIRST_PLAYER_WON,
        "SECOND_PLAYER_WON": GameResult.SECOND_PLAYER_WON,
    },
    GameOutcome: {
        "FINAL_BATTLE_VICTORY": GameOutcome.FINAL_BATTLE_VICTORY,
        "NEUTRALS_VICTORY": GameOutcome.NEUTRALS_VICTORY,
        "OPPONENT_SURRENDER": GameOutcome.OPPONENT_SURRENDER,
    },
    BargainsColor: {
        "NOT_SELECTED": BargainsColor.NOT_SELECTED,
        "BARGAINS_COLOR_RED": BargainsColor.RED,
        "BARGAINS_COLOR_BLUE": BargainsColor.BLUE,
    },
    ModType: {
        "UNIVERSE": ModType.UNIVERSE,
        "HRTA": ModType.HRTA,
    },
    GameType: {
        "RMG": GameType.RMG,
        "ARENA": GameType.ARENA,
    },
}

# Enum member -> transport name
_TO_TRANSPORT: Dict[Enum, str] = {
    member: name
    for table in _FROM_TRANSPORT.values()
    for name, member in table.items()
}


def from_transport(enum_type: Type[E], value) -> Optional[E]:
    """
    Map a transport value onto an enum member.

    Accepts the schema name (``"BARGAINS_COLOR_RED"``), the member's own
    value (``"red"``) or an existing member. Returns None for a missing
    value and raises ValueError for anything unrecognised.
    """
    if value is None:
        return None
    if isinstance(value, enum_type):
        return value

    text = str(value).strip()
    member = _FROM_TRANSPORT[enum_type].get(text.upper())
    if member is not None:
        return member
    try:
        return enum_type(text.lower())
    except ValueError:
        raise ValueError(f"Unknown {enum_type.__name__} value: {value!r}")


def to_transport(member: Enum) -> str:
    """Map an enum member back to its schema name."""
    return _TO_TRANSPORT[member]
