"""
Pydantic models and result types for scorekeeping logic.

Contains round validation errors, results of lifecycle transitions, the
finalization outcome handed to the player registry, and the scoreboard view.
Persisted records (Game, Player, RoundResult, PlayerStats) live in
shared.dal.models.
"""

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict

from scorekeeper.logic.enums import BidOutcome, RoundErrorCode
from shared.dal.models import Game, Player, RoundResult


class RoundError(BaseModel):
    """Recoverable rejection of a round submission, shown to the operator verbatim."""

    model_config = ConfigDict(frozen=True)

    code: RoundErrorCode
    message: str


class RoundSubmission(NamedTuple):
    """
    Result of submitting a round.

    On rejection ``error`` is set, ``results`` is empty and ``game`` is the
    unchanged input game.
    """

    game: Game
    results: tuple[RoundResult, ...] = ()
    error: RoundError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GameOutcome(BaseModel):
    """Win/loss deltas produced when a game is finalized."""

    model_config = ConfigDict(frozen=True)

    game_id: str
    participants: tuple[Player, ...]
    winner_ids: frozenset[str]
    totals: dict[str, int]

    @property
    def loser_ids(self) -> frozenset[str]:
        return frozenset(p.id for p in self.participants) - self.winner_ids


class GameFinalization(NamedTuple):
    """Result of finalizing a game. ``outcome`` is None when it was already completed."""

    game: Game
    outcome: GameOutcome | None = None


class ScoreboardCell(BaseModel):
    """One player's cell in one scoreboard row."""

    player_id: str
    total: int | None = None  # cumulative total; None for rounds not yet played
    bid: int | None = None
    tricks_won: int | None = None
    outcome: BidOutcome | None = None
    is_dealer: bool = False


class ScoreboardRow(BaseModel):
    round: int
    played: bool
    dealer_id: str | None = None
    cells: list[ScoreboardCell]


class ScoreboardView(BaseModel):
    """Scorecard of a game: a column per player, a row per round up to the deck limit."""

    game_id: str
    game_name: str
    players: list[Player]
    rows: list[ScoreboardRow]
    totals: dict[str, int]
    next_round: int
    next_dealer_id: str | None = None
    completed: bool = False
