"""
Shared helpers for the aggregators.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, TypeVar


T = TypeVar("T")


@dataclass
class WinLoss:
    """Running win/loss counter."""
    wins: int = 0
    losses: int = 0

    def add(self, won: bool) -> None:
        if won:
            self.wins += 1
        else:
            self.losses += 1

    def merge(self, other: "WinLoss") -> None:
        self.wins += other.wins
        self.losses += other.losses

    @property
    def games(self) -> int:
        return self.wins + self.losses

    @property
    def winrate(self) -> Optional[float]:
        return ratio(self.wins, self.games)


def ratio(numerator: float, denominator: float) -> Optional[float]:
    """
    Safe division for winrates, pick rates and averages.

    Returns None instead of raising when the denominator is zero; the
    report renders None as the "No games" label.
    """
    if not denominator:
        return None
    return numerator / denominator


def mean(values: Sequence[float]) -> Optional[float]:
    """Arithmetic mean, or None for an empty sequence."""
    return ratio(sum(values), len(values))


def pick_extreme(items: Iterable[T], key: Callable[[T], float], highest: bool) -> Optional[T]:
    """
    Single linear scan for the item with the highest (or lowest) key.

    Comparison is strict, so on ties the first item in iteration order
    wins. Callers iterate in ascending race id order, which makes the
    lowest id the deterministic tie-break. Items whose key is None are
    ignored.
    """
    best = None
    best_key = None
    for item in items:
        value = key(item)
        if value is None:
            continue
        if best is None or (value > best_key if highest else value < best_key):
            best = item
            best_key = value
    return best
