"""
Client for the tournament GraphQL service.

Every call posts ``{"query", "variables"}`` to a single endpoint and
returns plain dicts with snake_case keys, ready for the ``from_api``
constructors and ``validate_game``. A response without ``data`` (or
without the expected field) raises ProviderError, as does any transport
failure.
"""

import logging
import re
from typing import List, Optional

import requests

from h5stats.config import API_TIMEOUT, API_URL
from h5stats.errors import ProviderError
from h5stats.ingest import queries
from h5stats.model.enums import ModType, to_transport


logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])([A-Z])')


def to_snake(name: str) -> str:
    """firstPlayerRace -> first_player_race"""
    return _CAMEL_BOUNDARY.sub(r'_\1', name).lower()


def snake_keys(value):
    """Recursively rename dict keys to snake_case."""
    if isinstance(value, dict):
        return {to_snake(k): snake_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [snake_keys(v) for v in value]
    return value


class TournamentClient:
    """
    Thin wrapper over the service's read queries.

    Usage:
        client = TournamentClient()
        tournament = client.get_tournament(tournament_id)
        games = client.get_all_games(tournament_id)
    """

    def __init__(self, url: str = API_URL, timeout: float = API_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def _execute(self, name: str, query: str, variables: Optional[dict] = None) -> dict:
        try:
            response = self.session.post(
                self.url,
                json={"query": query, "variables": variables or {}},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise ProviderError(name, str(e)) from e
        except ValueError as e:
            raise ProviderError(name, f"invalid JSON: {e}") from e

        data = payload.get("data") if isinstance(payload, dict) else None
        if not data:
            errors = payload.get("errors") if isinstance(payload, dict) else None
            detail = "; ".join(str(err.get("message", err)) for err in errors) if errors else ""
            raise ProviderError(name, detail)
        return snake_keys(data)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_tournaments(self) -> List[dict]:
        data = self._execute("GetTournaments", queries.GET_TOURNAMENTS)
        return data.get("tournaments_all") or []

    def get_tournament(self, tournament_id: str) -> dict:
        """Raises ProviderError when no tournament has this id."""
        data = self._execute("GetTournament", queries.GET_TOURNAMENT, {"id": tournament_id})
        tournament = data.get("tournament")
        if tournament is None:
            raise ProviderError("GetTournament", f"no tournament with id {tournament_id}")
        return tournament

    def get_users(self, tournament_id: str) -> List[dict]:
        data = self._execute("GetUsers", queries.GET_USERS, {"tournamentId": tournament_id})
        return data.get("users") or []

    def get_matches(self, tournament_id: str, user_id: Optional[str] = None) -> List[dict]:
        variables = {"tournamentId": tournament_id, "userId": user_id}
        data = self._execute("GetMatches", queries.GET_MATCHES, variables)
        return data.get("matches") or []

    def get_games(self, match_id: str) -> List[dict]:
        data = self._execute("GetGames", queries.GET_GAMES, {"matchId": match_id})
        return data.get("games") or []

    def get_all_games(self, tournament_id: str, matches: Optional[List[dict]] = None) -> List[dict]:
        """Games of every match of the tournament, in match order."""
        if matches is None:
            matches = self.get_matches(tournament_id)
        games = []
        for match in matches:
            match_games = self.get_games(match["id"])
            logger.debug("Match %s: %d games", match["id"], len(match_games))
            games.extend(match_games)
        return games

    def get_heroes(self, mod_type: ModType) -> List[dict]:
        data = self._execute("GetHeroes", queries.GET_HEROES, {"modType": to_transport(mod_type)})
        try:
            return data["heroes_new"]["heroes"]["entities"]
        except (KeyError, TypeError) as e:
            raise ProviderError("GetHeroes", "missing hero entities") from e
