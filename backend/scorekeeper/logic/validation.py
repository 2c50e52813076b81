"""
Round submission validation.

Checks run in a fixed order and the first failure wins. Tricks are checked
for range and total; bids only need to be whole numbers and are otherwise
scored as entered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scorekeeper.logic.enums import RoundErrorCode
from scorekeeper.logic.settings import DEFAULT_SETTINGS, GameSettings
from scorekeeper.logic.types import RoundError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from shared.dal.models import Game


def max_rounds(player_count: int, settings: GameSettings | None = None) -> int:
    """Number of rounds the deck supports for player_count players (0 for no players)."""
    if player_count <= 0:
        return 0
    return (settings or DEFAULT_SETTINGS).deck_size // player_count


def _is_whole_number(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_round(
    game: Game,
    tricks: Mapping[str, object],
    settings: GameSettings | None = None,
    *,
    bids: Mapping[str, object] | None = None,
) -> RoundError | None:
    """
    Validate the tricks and, when given, the bids for the game's next round.

    Returns None when the round can be committed, otherwise the first
    RoundError found. Never mutates the game.
    """
    if game.completed:
        return RoundError(
            code=RoundErrorCode.GAME_COMPLETED,
            message="This game has been finalized; no more rounds can be recorded.",
        )

    player_count = len(game.players)
    if player_count == 0:
        return RoundError(
            code=RoundErrorCode.NO_PLAYERS,
            message="Add players to the game before starting rounds.",
        )

    round_number = game.rounds_count + 1
    limit = max_rounds(player_count, settings)
    if round_number > limit:
        return RoundError(
            code=RoundErrorCode.MAX_ROUNDS_EXCEEDED,
            message=f"Round {round_number} exceeds max rounds ({limit}) for {player_count} players.",
        )

    # every player is dealt round_number cards, so that many tricks are played
    cards_per_player = round_number
    entered = [tricks.get(player_id, 0) for player_id in game.player_ids()]
    if any(not _is_whole_number(t) or not 0 <= t <= cards_per_player for t in entered):  # type: ignore[operator]
        return RoundError(
            code=RoundErrorCode.TRICK_OUT_OF_BOUNDS,
            message=f"Each player's tricks must be between 0 and {cards_per_player}.",
        )

    total = sum(entered)  # type: ignore[arg-type]
    if total != cards_per_player:
        return RoundError(
            code=RoundErrorCode.TRICK_SUM_MISMATCH,
            message=f"Total tricks entered ({total}) must equal {cards_per_player} for round {round_number}.",
        )

    if bids is not None and any(not _is_whole_number(bids.get(pid, 0)) for pid in game.player_ids()):
        return RoundError(
            code=RoundErrorCode.BID_NOT_INTEGER,
            message="Each player's bid must be a whole number.",
        )

    return None
