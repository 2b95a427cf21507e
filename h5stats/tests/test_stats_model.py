"""
Tests for build_stats_model: validation, reference checks and lookup policy.
"""

import pytest

from h5stats.config import LookupPolicy, get_lookup_policy
from h5stats.errors import ReferenceLookupError
from h5stats.model.entities import Match
from h5stats.model.tournament import build_stats_model

from helpers import HEROES, MATCHES, USERS, make_raw_game, make_tournament


def _build(raw_games, matches=None, policy=LookupPolicy.SKIP):
    return build_stats_model(
        tournament=make_tournament(),
        users=USERS,
        matches=MATCHES if matches is None else matches,
        raw_games=raw_games,
        heroes=HEROES,
        policy=policy,
    )


class TestBuildStatsModel:
    """Test build_stats_model."""

    def test_valid_games_are_kept_in_order(self):
        """Valid games should be kept in input order."""
        model = _build([make_raw_game(id="a"), make_raw_game(id="b")])

        assert [g.id for g in model.games] == ["a", "b"]
        assert model.rejections == []
        assert len(model.matches) == 2

    def test_missing_hero_game_is_excluded(self):
        """One incomplete game out of three: two aggregated, one rejection."""
        raws = [
            make_raw_game(id="a"),
            make_raw_game(id="b", second_player_hero=None),
            make_raw_game(id="c"),
        ]

        model = _build(raws)

        assert [g.id for g in model.games] == ["a", "c"]
        assert len(model.rejections) == 1
        assert model.rejections[0].game_id == "b"
        assert model.rejections[0].field == "second_player_hero"

    def test_unknown_hero_is_skipped(self):
        """An unknown hero should reject the game under SKIP."""
        model = _build([make_raw_game(id="x", first_player_hero=999)])

        assert model.games == []
        assert model.rejections[0].reason == "unknown hero 999"

    def test_unknown_race_is_skipped(self):
        """An unknown race should reject the game under SKIP."""
        model = _build([make_raw_game(id="x", second_player_race=42)])

        assert model.games == []
        assert model.rejections[0].field == "second_player_race"

    def test_unknown_hero_aborts_under_abort_policy(self):
        """An unknown hero should raise under ABORT."""
        with pytest.raises(ReferenceLookupError) as excinfo:
            _build([make_raw_game(id="x", first_player_hero=999)], policy=LookupPolicy.ABORT)

        assert excinfo.value.kind == "hero"
        assert excinfo.value.ref_id == 999
        assert excinfo.value.record_id == "x"

    def test_match_with_unknown_user_is_dropped(self):
        """A match with an unknown user should be dropped under SKIP."""
        matches = MATCHES + [Match("m9", "t1", "u1", "ghost")]

        model = _build([], matches=matches)

        assert [m.id for m in model.matches] == ["m1", "m2"]

    def test_match_with_unknown_user_aborts(self):
        """A match with an unknown user should raise under ABORT."""
        matches = [Match("m9", "t1", "u1", "ghost")]

        with pytest.raises(ReferenceLookupError, match="ghost"):
            _build([], matches=matches, policy=LookupPolicy.ABORT)

    def test_lookups(self):
        """The model should look up races, heroes and users by id."""
        model = _build([make_raw_game(id="a", match_id="m2")])

        assert model.race(4).name == "Sylvan"
        assert model.hero(11).race == 1
        assert model.user("u3").nickname == "Carol"
        assert [h.id for h in model.heroes_of_race(5)] == [51, 52]
        assert [g.id for g in model.games_of_match("m2")] == ["a"]
        assert model.games_of_match("m1") == []


class TestLookupPolicy:
    """Test lookup policy resolution."""

    def test_explicit_values(self):
        """get_lookup_policy should accept skip and abort."""
        assert get_lookup_policy("abort") is LookupPolicy.ABORT
        assert get_lookup_policy(" SKIP ") is LookupPolicy.SKIP

    def test_unknown_value_falls_back_to_skip(self):
        """Unknown policy values should fall back to skip."""
        assert get_lookup_policy("sometimes") is LookupPolicy.SKIP

    def test_environment(self, monkeypatch):
        """get_lookup_policy should read H5STATS_LOOKUP_POLICY."""
        monkeypatch.setenv("H5STATS_LOOKUP_POLICY", "abort")

        assert get_lookup_policy() is LookupPolicy.ABORT
