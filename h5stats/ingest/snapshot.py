"""
Snapshot files: the raw provider collections of one tournament as JSON.

A snapshot lets a report be regenerated offline, and later compared,
without calling the service again.
"""

import json
import logging
from pathlib import Path
from typing import Dict

from h5stats.errors import H5StatsError


logger = logging.getLogger(__name__)

SNAPSHOT_KEYS = ("tournament", "users", "matches", "games", "heroes")


class SnapshotError(H5StatsError):
    """A snapshot file is missing collections or is not valid JSON."""


def save_snapshot(path: Path, collections: Dict[str, object]) -> Path:
    """
    Write the raw collections to ``path`` as UTF-8 JSON.

    Args:
        path: target file; parent directories are created
        collections: dict with the SNAPSHOT_KEYS entries

    Returns:
        The path written
    """
    missing = [key for key in SNAPSHOT_KEYS if key not in collections]
    if missing:
        raise SnapshotError(f"Snapshot is missing: {', '.join(missing)}")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump({key: collections[key] for key in SNAPSHOT_KEYS}, f, ensure_ascii=False, indent=2)

    logger.info("Snapshot saved to %s", path)
    return path


def load_snapshot(path: Path) -> Dict[str, object]:
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SnapshotError(f"{path.name} is not valid JSON: {e}") from e

    missing = [key for key in SNAPSHOT_KEYS if key not in data]
    if missing:
        raise SnapshotError(f"{path.name} is missing: {', '.join(missing)}")
    return data
