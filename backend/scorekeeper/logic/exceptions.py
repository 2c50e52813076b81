"""Typed domain exceptions for scorekeeping rule violations.

Round submissions never raise: invalid bids/tricks come back as a
RoundError inside the RoundSubmission so callers can show the message and
let the operator correct the input. The exceptions below cover misuse of
the lifecycle (editing a started game, unknown ids) instead.
"""


class GameRuleError(Exception):
    """Base exception for scorekeeping rule violations."""


class GameLockedError(GameRuleError):
    """The roster can no longer change (game started or completed)."""


class InvalidDealerError(GameRuleError):
    """Dealer override targets an unseated player or an unreachable round."""


class PlayerNotFoundError(GameRuleError):
    """No player with the given id exists in the registry or game."""

    def __init__(self, player_id: str) -> None:
        self.player_id = player_id
        super().__init__(f"player {player_id!r} not found")


class GameNotFoundError(GameRuleError):
    """No game with the given id exists in the collection."""

    def __init__(self, game_id: str) -> None:
        self.game_id = game_id
        super().__init__(f"game {game_id!r} not found")


class UnsupportedSettingsError(GameRuleError):
    """Game settings contain values the scoring rules cannot work with."""
