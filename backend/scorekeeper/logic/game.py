"""
Game lifecycle for Wizard scorekeeping.

A game moves SETUP -> IN_PROGRESS -> COMPLETED. The roster is editable only
in SETUP; the first committed round starts the game; finalization is the only
way into COMPLETED and is idempotent. Every transition returns a new frozen
Game and never mutates its input.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import uuid4

from scorekeeper.logic.dealer import dealer_for_round
from scorekeeper.logic.enums import GamePhase
from scorekeeper.logic.exceptions import GameLockedError
from scorekeeper.logic.scoring import compute_round_results
from scorekeeper.logic.standings import compute_totals, determine_winners
from scorekeeper.logic.types import GameFinalization, GameOutcome, RoundSubmission
from scorekeeper.logic.validation import validate_round
from shared.dal.models import Game

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from scorekeeper.logic.settings import GameSettings
    from shared.dal.models import Player


def game_phase(game: Game) -> GamePhase:
    if game.completed:
        return GamePhase.COMPLETED
    if game.rounds_count == 0:
        return GamePhase.SETUP
    return GamePhase.IN_PROGRESS


def ensure_roster_editable(game: Game) -> None:
    """Raise GameLockedError unless the game is still in SETUP."""
    phase = game_phase(game)
    if phase != GamePhase.SETUP:
        raise GameLockedError(f"Players of game {game.id!r} cannot change once it is {phase.value}.")


def create_game(name: str, *, game_id: str | None = None, created_at: datetime | None = None) -> Game:
    """Create an empty game in SETUP."""
    return Game(
        id=game_id or uuid4().hex,
        name=name,
        date=(created_at or datetime.now(tz=UTC)).isoformat(),
    )


def add_players(game: Game, players: Iterable[Player]) -> Game:
    """Seat players after the current ones. Already seated ids are skipped."""
    ensure_roster_editable(game)
    seated = set(game.player_ids())
    added = []
    for player in players:
        if player.id not in seated:
            seated.add(player.id)
            added.append(player)
    if not added:
        return game
    return game.model_copy(update={"players": (*game.players, *added)})


def add_player(game: Game, player: Player) -> Game:
    return add_players(game, [player])


def remove_player(game: Game, player_id: str) -> Game:
    ensure_roster_editable(game)
    return unseat_player(game, player_id)


def unseat_player(game: Game, player_id: str) -> Game:
    """
    Drop a player from the roster regardless of phase.

    Used when a player is deleted from the registry. History entries are
    kept; they simply stop counting towards reported totals.
    """
    if not game.has_player(player_id):
        return game
    return game.model_copy(update={"players": tuple(p for p in game.players if p.id != player_id)})


def rename_seated_player(game: Game, player_id: str, name: str) -> Game:
    """Re-sync a seated player's display name with the registry."""
    if not game.has_player(player_id):
        return game
    players = tuple(p.model_copy(update={"name": name}) if p.id == player_id else p for p in game.players)
    return game.model_copy(update={"players": players})


def move_player(game: Game, from_index: int, to_index: int) -> Game:
    """
    Move the player at from_index to to_index, shifting the others.

    Seating order drives dealer rotation. Out-of-range indexes leave the game
    unchanged.
    """
    ensure_roster_editable(game)
    count = len(game.players)
    if from_index == to_index or not (0 <= from_index < count and 0 <= to_index < count):
        return game
    players = list(game.players)
    players.insert(to_index, players.pop(from_index))
    return game.model_copy(update={"players": tuple(players)})


def submit_round(
    game: Game,
    bids: Mapping[str, int],
    tricks: Mapping[str, int],
    settings: GameSettings | None = None,
) -> RoundSubmission:
    """
    Commit the next round if the tricks are valid.

    The round's resolved dealer is recorded in ``dealers`` so the history
    stays stable if seating changes later. A game is never completed
    automatically, even after the last round the deck allows.
    """
    error = validate_round(game, tricks, settings, bids=bids)
    if error is not None:
        return RoundSubmission(game=game, error=error)

    round_number = game.rounds_count + 1
    dealers = dict(game.dealers)
    dealer_id = dealer_for_round(game, round_number)
    if dealer_id is not None:
        dealers[round_number] = dealer_id

    results = compute_round_results(round_number, game.players, bids, tricks, settings)
    committed = game.model_copy(
        update={
            "history": (*game.history, *results),
            "rounds_count": round_number,
            "dealers": dealers,
        },
    )
    return RoundSubmission(game=committed, results=results)


def finalize_game(game: Game) -> GameFinalization:
    """
    Close the game and produce the win/loss outcome for the registry.

    Finalizing a completed game returns it unchanged with no outcome, so
    registry stats are only ever updated once per game.
    """
    if game_phase(game) == GamePhase.COMPLETED:
        return GameFinalization(game=game)

    outcome = GameOutcome(
        game_id=game.id,
        participants=game.players,
        winner_ids=frozenset(determine_winners(game)),
        totals=compute_totals(game),
    )
    return GameFinalization(game=game.model_copy(update={"completed": True}), outcome=outcome)
