"""
Report generation job.

Ties the pipeline together:
    fetch_collections        service -> raw collections (dicts)
    model_from_collections   raw collections -> TournamentStatsModel
    generate_report          TournamentStatsModel -> saved workbook
"""

import logging
from pathlib import Path
from typing import Dict, Optional

from h5stats.config import LookupPolicy
from h5stats.errors import MalformedDataError
from h5stats.ingest.client import TournamentClient
from h5stats.model.entities import Hero, Match, Tournament, User
from h5stats.model.tournament import TournamentStatsModel, build_stats_model
from h5stats.report.workbook import build_workbook, save_workbook
from h5stats.stats.pairs import RacePairStats
from h5stats.stats.players import build_player_histories
from h5stats.stats.races import RaceStatsBuilder


logger = logging.getLogger(__name__)


def fetch_collections(client: TournamentClient, tournament_id: str) -> Dict[str, object]:
    """
    Gather everything one report needs from the service.

    Returns:
        dict with "tournament", "users", "matches", "games" and "heroes",
        each as returned by the client (snake_case dicts)
    """
    tournament = client.get_tournament(tournament_id)
    users = client.get_users(tournament_id)
    matches = client.get_matches(tournament_id)
    games = client.get_all_games(tournament_id, matches)

    mod_type = _read_all("tournament", Tournament, [tournament])[0].mod_type
    heroes = client.get_heroes(mod_type)

    logger.info(
        "Fetched %s: %d users, %d matches, %d games, %d heroes",
        tournament_id, len(users), len(matches), len(games), len(heroes),
    )
    return {
        "tournament": tournament,
        "users": users,
        "matches": matches,
        "games": games,
        "heroes": heroes,
    }


def model_from_collections(
    collections: Dict[str, object],
    policy: LookupPolicy = LookupPolicy.SKIP,
) -> TournamentStatsModel:
    """
    Build the stats model from raw collections (fetched or loaded from a snapshot).

    Raises:
        MalformedDataError: a tournament, user, match or hero entry lacks a
            field or carries a value outside the known enums
        ReferenceLookupError: an unknown reference under LookupPolicy.ABORT
    """
    tournament = _read_all("tournament", Tournament, [collections["tournament"]])[0]
    return build_stats_model(
        tournament=tournament,
        users=_read_all("users", User, collections["users"]),
        matches=_read_all("matches", Match, collections["matches"]),
        raw_games=collections["games"],
        heroes=_read_all("heroes", Hero, collections["heroes"]),
        policy=policy,
    )


def _read_all(collection: str, entity, entries) -> list:
    result = []
    for index, entry in enumerate(entries):
        try:
            result.append(entity.from_api(entry))
        except KeyError as e:
            raise MalformedDataError(collection, f"entry {index} has no {e}") from e
        except (TypeError, ValueError, AttributeError) as e:
            raise MalformedDataError(collection, f"entry {index}: {e}") from e
    return result


def generate_report(model: TournamentStatsModel, output_path: Path) -> Path:
    """
    Run every aggregator over the model and save the workbook.

    Args:
        model: resolved tournament snapshot
        output_path: target .xlsx file

    Returns:
        Path to the saved workbook

    Raises:
        ReportWriteError: the workbook could not be saved
    """
    pair_stats = RacePairStats([race.id for race in model.races]).collect(model.games)
    race_stats = RaceStatsBuilder(model).build()
    histories = build_player_histories(model)

    wb = build_workbook(model, pair_stats, race_stats, histories)
    return save_workbook(wb, Path(output_path))


def run(
    tournament_id: str,
    output_path: Path,
    client: Optional[TournamentClient] = None,
    policy: LookupPolicy = LookupPolicy.SKIP,
) -> Path:
    """Fetch, model and emit in one call."""
    collections = fetch_collections(client or TournamentClient(), tournament_id)
    model = model_from_collections(collections, policy)
    return generate_report(model, output_path)
