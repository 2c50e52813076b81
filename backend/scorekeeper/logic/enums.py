"""
String enum definitions for scorekeeping concepts.
"""

from enum import Enum


class GamePhase(str, Enum):
    """Lifecycle phase of a game. COMPLETED is terminal."""

    SETUP = "setup"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class RoundErrorCode(str, Enum):
    """Reasons a round submission is rejected, in the order they are checked."""

    GAME_COMPLETED = "game_completed"
    NO_PLAYERS = "no_players"
    MAX_ROUNDS_EXCEEDED = "max_rounds_exceeded"
    TRICK_OUT_OF_BOUNDS = "trick_out_of_bounds"
    TRICK_SUM_MISMATCH = "trick_sum_mismatch"
    BID_NOT_INTEGER = "bid_not_integer"


class BidOutcome(str, Enum):
    """Whether a player made their bid in a completed round."""

    HIT = "hit"
    MISS = "miss"
