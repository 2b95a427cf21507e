"""
Tests for game record validation and the enum transport tables.

Verifies that:
1. Complete raw games become GameRecords with decoded enums
2. Missing or zero race/hero ids reject the game, naming the first bad field
3. Undecided results are rejected
4. Bargain amounts are re-signed for the second player
"""

import pytest

from h5stats.model.enums import (
    BargainsColor,
    GameOutcome,
    GameResult,
    GameType,
    ModType,
    from_transport,
    to_transport,
)
from h5stats.model.game import GameRecord, Rejection, validate_game, validate_games

from helpers import make_game, make_raw_game


class TestValidateGame:
    """Test validate_game on raw provider dicts."""

    def test_complete_game_is_accepted(self):
        """A fully filled game becomes a GameRecord."""
        record = validate_game(make_raw_game(bargains_amount=150, bargains_color="BARGAINS_COLOR_RED"))

        assert isinstance(record, GameRecord)
        assert record.first_player_race == 1
        assert record.second_player_hero == 21
        assert record.result is GameResult.FIRST_PLAYER_WON
        assert record.bargains_amount == 150
        assert record.bargains_color is BargainsColor.RED
        assert record.outcome is GameOutcome.FINAL_BATTLE_VICTORY

    def test_missing_hero_is_rejected(self):
        """A game without the second player's hero is rejected on that field."""
        result = validate_game(make_raw_game(id="g7", second_player_hero=None))

        assert isinstance(result, Rejection)
        assert result.game_id == "g7"
        assert result.field == "second_player_hero"
        assert result.reason == "missing"

    def test_zero_race_counts_as_missing(self):
        """Race id 0 means 'not chosen' and is rejected."""
        result = validate_game(make_raw_game(first_player_race=0))

        assert isinstance(result, Rejection)
        assert result.field == "first_player_race"

    def test_first_problem_is_reported(self):
        """With several gaps, the first field in check order is named."""
        result = validate_game(make_raw_game(first_player_hero=None, second_player_race=None))

        assert result.field == "first_player_hero"

    def test_non_numeric_id_is_invalid(self):
        """A non-numeric race or hero id should be rejected as invalid."""
        result = validate_game(make_raw_game(first_player_hero="abc"))

        assert isinstance(result, Rejection)
        assert result.reason == "invalid"

    def test_undecided_result_is_rejected(self):
        """NOT_SELECTED games are not finished and never aggregated."""
        result = validate_game(make_raw_game(result="NOT_SELECTED"))

        assert isinstance(result, Rejection)
        assert result.field == "result"
        assert result.reason == "not selected"

    def test_unknown_result_is_invalid(self):
        """An unknown result string should be rejected as invalid."""
        result = validate_game(make_raw_game(result="DRAW"))

        assert isinstance(result, Rejection)
        assert result.field == "result"
        assert result.reason == "invalid"

    def test_missing_bargain_stays_none(self):
        """No bargain amount is not zero-filled."""
        record = validate_game(make_raw_game(bargains_amount=None))

        assert record.bargains_amount is None

    def test_rejection_str(self):
        """Rejection should render the game id, field and reason."""
        assert str(Rejection("g1", "first_player_hero")) == "game g1: first_player_hero missing"


class TestValidateGames:
    """Test validate_games on collections."""

    def test_splits_records_and_rejections_in_order(self):
        """validate_games should keep input order in both lists."""
        raws = [
            make_raw_game(id="a"),
            make_raw_game(id="b", first_player_hero=None),
            make_raw_game(id="c", result="SECOND_PLAYER_WON"),
        ]

        records, rejections = validate_games(raws)

        assert [r.id for r in records] == ["a", "c"]
        assert [r.game_id for r in rejections] == ["b"]

    def test_empty_input(self):
        """validate_games should return two empty lists for no games."""
        assert validate_games([]) == ([], [])


class TestGameRecord:
    """Test GameRecord side helpers."""

    def test_winner_and_loser_race(self):
        """A record should know the winning and losing race."""
        game = make_game(1, 2, first_won=False)

        assert game.winner_race == 2
        assert game.loser_race == 1
        assert game.won_by(False)
        assert not game.won_by(True)

    def test_mirror(self):
        """A game between the same race should be a mirror."""
        assert make_game(3, 3).is_mirror
        assert not make_game(3, 4).is_mirror

    def test_bargain_resigned_for_second_player(self):
        """A positive stored amount is a negative bargain for the second player."""
        game = make_game(1, 2, bargains_amount=200)

        assert game.bargain_for(True) == 200
        assert game.bargain_for(False) == -200

    def test_bargain_sides_sum_to_zero(self):
        """The two players' bargain amounts should cancel out."""
        for amount in (-350, 0, 75):
            game = make_game(1, 2, bargains_amount=amount)
            assert game.bargain_for(True) + game.bargain_for(False) == 0

    def test_no_bargain_is_none_for_both(self):
        """A game without bargains should give None for both players."""
        game = make_game(1, 2)

        assert game.bargain_for(True) is None
        assert game.bargain_for(False) is None


class TestTransport:
    """Test the enum transport tables."""

    def test_schema_names(self):
        """Transport names should map to the matching members."""
        assert from_transport(GameResult, "SECOND_PLAYER_WON") is GameResult.SECOND_PLAYER_WON
        assert from_transport(BargainsColor, "BARGAINS_COLOR_BLUE") is BargainsColor.BLUE
        assert from_transport(ModType, "HRTA") is ModType.HRTA
        assert from_transport(GameType, "ARENA") is GameType.ARENA

    def test_member_values_and_members(self):
        """from_transport should also accept member values and members."""
        assert from_transport(GameOutcome, "neutrals_victory") is GameOutcome.NEUTRALS_VICTORY
        assert from_transport(BargainsColor, BargainsColor.RED) is BargainsColor.RED

    def test_none_passes_through(self):
        """from_transport should return None for None."""
        assert from_transport(GameOutcome, None) is None

    def test_unknown_value_raises(self):
        """from_transport should raise ValueError for unknown names."""
        with pytest.raises(ValueError):
            from_transport(ModType, "CLASSIC")

    def test_to_transport(self):
        """to_transport should return the service name of a member."""
        assert to_transport(BargainsColor.RED) == "BARGAINS_COLOR_RED"
        assert to_transport(ModType.UNIVERSE) == "UNIVERSE"
        assert to_transport(GameResult.NOT_SELECTED) == "NOT_SELECTED"
        assert to_transport(BargainsColor.NOT_SELECTED) == "NOT_SELECTED"
