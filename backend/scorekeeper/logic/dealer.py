"""
Dealer resolution per round.

``Game.dealers`` is a sparse map of explicit assignments (operator overrides
and dealers recorded when a round was committed). Any round without an entry
is resolved on demand from seating order, so removing or reordering players
never leaves a stale cached dealer behind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scorekeeper.logic.exceptions import InvalidDealerError

if TYPE_CHECKING:
    from shared.dal.models import Game


def _next_seat(game: Game, player_id: str) -> str:
    """Player seated after player_id, wrapping. Unseated ids restart at the first seat."""
    ids = game.player_ids()
    if player_id not in ids:
        return ids[0]
    return ids[(ids.index(player_id) + 1) % len(ids)]


def _walk_dealers(game: Game, rounds: int) -> dict[int, str]:
    """Resolve rounds 1..rounds in one forward pass over a seated game."""
    first = game.players[0].id
    resolved: dict[int, str] = {}
    previous: str | None = None
    for round_number in range(1, rounds + 1):
        current = game.dealers.get(round_number)
        if current is None:
            current = first if previous is None else _next_seat(game, previous)
        resolved[round_number] = current
        previous = current
    return resolved


def dealer_for_round(game: Game, round_number: int) -> str | None:
    """
    Resolve the dealer of a round.

    An explicit entry wins. Otherwise round 1 is dealt by the first seat and
    every later round by the seat after the previous round's dealer, which is
    itself resolved by this same rule. Returns None only for a game without
    players and without an explicit entry.
    """
    explicit = game.dealers.get(round_number)
    if explicit is not None:
        return explicit
    if not game.players:
        return None
    if round_number <= 1:
        return game.players[0].id
    return _walk_dealers(game, round_number)[round_number]


def dealer_schedule(game: Game, rounds: int) -> dict[int, str | None]:
    """Resolved dealer for every round from 1 to rounds."""
    if not game.players:
        return {r: game.dealers.get(r) for r in range(1, rounds + 1)}
    return dict(_walk_dealers(game, rounds))


def _check_editable_round(game: Game, round_number: int) -> None:
    upcoming = game.rounds_count + 1
    if not 1 <= round_number <= upcoming:
        raise InvalidDealerError(f"Dealer can only be set for rounds 1 to {upcoming}, got {round_number}.")


def set_dealer(game: Game, round_number: int, player_id: str) -> Game:
    """Return new game with an explicit dealer for round_number (overwrites any existing one)."""
    _check_editable_round(game, round_number)
    if not game.has_player(player_id):
        raise InvalidDealerError(f"Player {player_id!r} is not seated in game {game.id!r}.")
    return game.model_copy(update={"dealers": {**game.dealers, round_number: player_id}})


def clear_dealer(game: Game, round_number: int) -> Game:
    """Return new game without the explicit dealer for round_number, exposing rotation again."""
    _check_editable_round(game, round_number)
    if round_number not in game.dealers:
        return game
    dealers = {r: pid for r, pid in game.dealers.items() if r != round_number}
    return game.model_copy(update={"dealers": dealers})


def rotate_dealer(game: Game, round_number: int) -> Game:
    """Return new game whose round_number dealer is the seat after its current dealer."""
    current = dealer_for_round(game, round_number)
    if current is None or not game.players:
        raise InvalidDealerError("Cannot rotate the dealer of a game without players.")
    return set_dealer(game, round_number, _next_seat(game, current))
