"""
Scoreboard view construction.

Rows cover every round the deck allows (or every played round, if more were
recorded under an earlier roster), so upcoming dealers are visible ahead of
time. Only played rows carry totals and bids.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scorekeeper.logic.dealer import dealer_for_round, dealer_schedule
from scorekeeper.logic.enums import BidOutcome
from scorekeeper.logic.standings import compute_totals, cumulative_totals
from scorekeeper.logic.types import ScoreboardCell, ScoreboardRow, ScoreboardView
from scorekeeper.logic.validation import max_rounds

if TYPE_CHECKING:
    from scorekeeper.logic.settings import GameSettings
    from shared.dal.models import Game, RoundResult


def _cell(player_id: str, total: int | None, result: RoundResult | None, *, is_dealer: bool) -> ScoreboardCell:
    if result is None:
        return ScoreboardCell(player_id=player_id, total=total, is_dealer=is_dealer)
    return ScoreboardCell(
        player_id=player_id,
        total=total,
        bid=result.bid,
        tricks_won=result.tricks_won,
        outcome=BidOutcome.HIT if result.bid == result.tricks_won else BidOutcome.MISS,
        is_dealer=is_dealer,
    )


def build_scoreboard(game: Game, settings: GameSettings | None = None) -> ScoreboardView:
    rounds_to_show = max(game.rounds_count, max_rounds(len(game.players), settings))
    results = {(r.round, r.player_id): r for r in game.history}
    cumulative = cumulative_totals(game)
    dealers = dealer_schedule(game, rounds_to_show)

    rows = []
    for round_number in range(1, rounds_to_show + 1):
        played = round_number <= game.rounds_count
        dealer_id = dealers[round_number]
        cells = [
            _cell(
                player.id,
                cumulative[round_number][player.id] if played else None,
                results.get((round_number, player.id)),
                is_dealer=player.id == dealer_id,
            )
            for player in game.players
        ]
        rows.append(ScoreboardRow(round=round_number, played=played, dealer_id=dealer_id, cells=cells))

    next_round = game.rounds_count + 1
    return ScoreboardView(
        game_id=game.id,
        game_name=game.name,
        players=list(game.players),
        rows=rows,
        totals=compute_totals(game),
        next_round=next_round,
        next_dealer_id=dealer_for_round(game, next_round),
        completed=game.completed,
    )
