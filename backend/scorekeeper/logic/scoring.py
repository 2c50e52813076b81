"""
Score calculation for Wizard rounds.

A player who wins exactly the number of tricks they bid scores a bonus plus
points per trick won; any miss, over or under, costs a penalty per trick of
difference.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scorekeeper.logic.settings import DEFAULT_SETTINGS, GameSettings
from shared.dal.models import RoundResult

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from shared.dal.models import Player


def score_for_player(bid: int, tricks_won: int, settings: GameSettings | None = None) -> int:
    """
    Score one player's round.

    With default settings: exact bid scores 20 + 10 per trick won, a miss
    scores -10 per trick of difference.
    """
    rules = settings or DEFAULT_SETTINGS
    if bid == tricks_won:
        return rules.exact_bid_bonus + rules.points_per_trick * tricks_won
    return -rules.miss_penalty_per_trick * abs(bid - tricks_won)


def compute_round_results(
    round_number: int,
    players: Iterable[Player],
    bids: Mapping[str, int],
    tricks: Mapping[str, int],
    settings: GameSettings | None = None,
) -> tuple[RoundResult, ...]:
    """
    Build one RoundResult per player, in seating order.

    Missing bids or tricks count as 0. Input is assumed to have passed
    validate_round already.
    """
    results = []
    for player in players:
        bid = bids.get(player.id, 0)
        won = tricks.get(player.id, 0)
        results.append(
            RoundResult(
                round=round_number,
                player_id=player.id,
                bid=bid,
                tricks_won=won,
                score=score_for_player(bid, won, settings),
            ),
        )
    return tuple(results)
