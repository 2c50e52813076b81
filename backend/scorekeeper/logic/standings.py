"""
Totals and winners, always derived from round history.
"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shared.dal.models import Game


def _scores_by_player(game: Game) -> dict[str, int]:
    sums: dict[str, int] = defaultdict(int)
    for result in game.history:
        sums[result.player_id] += result.score
    return sums


def compute_totals(game: Game) -> dict[str, int]:
    """
    Cumulative score per current player.

    History entries of players who are no longer seated are not reported.
    """
    sums = _scores_by_player(game)
    return {player_id: sums.get(player_id, 0) for player_id in game.player_ids()}


def determine_winners(game: Game) -> set[str]:
    """All current players sharing the highest total. Empty for a game without players."""
    totals = compute_totals(game)
    if not totals:
        return set()
    best = max(totals.values())
    return {player_id for player_id, total in totals.items() if total == best}


def cumulative_totals(game: Game) -> dict[int, dict[str, int]]:
    """Running total per current player after each completed round."""
    by_round: dict[int, dict[str, int]] = defaultdict(dict)
    for result in game.history:
        by_round[result.round][result.player_id] = result.score

    running = dict.fromkeys(game.player_ids(), 0)
    cumulative: dict[int, dict[str, int]] = {}
    for round_number in range(1, game.rounds_count + 1):
        scores = by_round.get(round_number, {})
        running = {pid: total + scores.get(pid, 0) for pid, total in running.items()}
        cumulative[round_number] = running
    return cumulative
