"""Tests for the domain exception hierarchy."""

import pytest

from scorekeeper.logic.exceptions import (
    GameLockedError,
    GameNotFoundError,
    GameRuleError,
    InvalidDealerError,
    PlayerNotFoundError,
    UnsupportedSettingsError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_type",
        [GameLockedError, InvalidDealerError, PlayerNotFoundError, GameNotFoundError, UnsupportedSettingsError],
    )
    def test_all_are_game_rule_errors(self, error_type):
        assert issubclass(error_type, GameRuleError)


class TestNotFoundErrors:
    def test_player_not_found_keeps_id(self):
        err = PlayerNotFoundError("p1")
        assert err.player_id == "p1"
        assert str(err) == "player 'p1' not found"

    def test_game_not_found_keeps_id(self):
        err = GameNotFoundError("g1")
        assert err.game_id == "g1"
        assert str(err) == "game 'g1' not found"
