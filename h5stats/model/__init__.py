"""Model module: reference data, enums and validated game records."""

from .enums import (
    GameResult,
    GameOutcome,
    BargainsColor,
    ModType,
    GameType,
    from_transport,
    to_transport,
)
from .entities import (
    Race,
    Hero,
    User,
    Match,
    Tournament,
    RACES,
)
from .game import (
    GameRecord,
    Rejection,
    validate_game,
    validate_games,
)
from .tournament import (
    TournamentStatsModel,
    build_stats_model,
)

__all__ = [
    'GameResult',
    'GameOutcome',
    'BargainsColor',
    'ModType',
    'GameType',
    'from_transport',
    'to_transport',
    'Race',
    'Hero',
    'User',
    'Match',
    'Tournament',
    'RACES',
    'GameRecord',
    'Rejection',
    'validate_game',
    'validate_games',
    'TournamentStatsModel',
    'build_stats_model',
]
