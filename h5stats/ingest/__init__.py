"""Ingest module for fetching tournament data from the service or a snapshot file."""

from .client import TournamentClient, snake_keys, to_snake
from .snapshot import SNAPSHOT_KEYS, SnapshotError, load_snapshot, save_snapshot

__all__ = [
    # Client
    "TournamentClient",
    "snake_keys",
    "to_snake",
    # Snapshots
    "SNAPSHOT_KEYS",
    "SnapshotError",
    "load_snapshot",
    "save_snapshot",
]
