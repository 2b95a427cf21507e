"""Stats module: race pairing, race/hero/bargain and player history aggregators."""

from .common import WinLoss, ratio, mean, pick_extreme
from .pairs import RacePairStats, RaceTotals, PairSummary
from .races import (
    RaceStatsBuilder,
    RaceStats,
    HeroUsage,
    HeroMatchup,
    BargainBucket,
    BargainLine,
    BargainTotals,
    RaceBargainStats,
)
from .players import (
    GameHistoryEntry,
    PlayerHistory,
    build_player_history,
    build_player_histories,
)

__all__ = [
    'WinLoss',
    'ratio',
    'mean',
    'pick_extreme',
    'RacePairStats',
    'RaceTotals',
    'PairSummary',
    'RaceStatsBuilder',
    'RaceStats',
    'HeroUsage',
    'HeroMatchup',
    'BargainBucket',
    'BargainLine',
    'BargainTotals',
    'RaceBargainStats',
    'GameHistoryEntry',
    'PlayerHistory',
    'build_player_history',
    'build_player_histories',
]
