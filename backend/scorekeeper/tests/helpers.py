"""Builders for games in a known state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scorekeeper.logic.game import add_players, create_game, submit_round
from shared.dal.models import Player

if TYPE_CHECKING:
    from shared.dal.models import Game


def make_players(*names: str) -> list[Player]:
    """Players whose id is the lower-cased name: make_players("A") -> Player(id="a", name="A")."""
    return [Player(id=name.lower(), name=name) for name in names]


def make_game(*names: str, game_id: str = "g1") -> Game:
    """Game in SETUP with the given players seated in order."""
    game = create_game("Test game", game_id=game_id)
    return add_players(game, make_players(*names))


def play_rounds(game: Game, *rounds: tuple[dict[str, int], dict[str, int]]) -> Game:
    """Commit (bids, tricks) rounds in order, failing loudly on a rejected round."""
    for bids, tricks in rounds:
        submission = submit_round(game, bids, tricks)
        assert submission.error is None, submission.error
        game = submission.game
    return game


def exact_round(game: Game, winner_id: str) -> tuple[dict[str, int], dict[str, int]]:
    """Next round where winner_id takes every trick and everyone bid exactly."""
    round_number = game.rounds_count + 1
    bids = {pid: 0 for pid in game.player_ids()}
    bids[winner_id] = round_number
    return bids, dict(bids)
