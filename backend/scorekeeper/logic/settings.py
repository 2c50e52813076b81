"""Centralized scoring rules. Defaults match standard Wizard scoring."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from scorekeeper.logic.exceptions import UnsupportedSettingsError


class GameSettings(BaseModel):
    """
    Configuration for Wizard scoring rules.

    The deck has 52 standard cards plus 4 wizards and 4 jesters; every
    round deals the round number in cards to each player, so the deck size
    bounds the number of rounds.
    """

    model_config = ConfigDict(frozen=True)

    deck_size: int = 60
    exact_bid_bonus: int = 20
    points_per_trick: int = 10
    miss_penalty_per_trick: int = 10


def validate_settings(settings: GameSettings) -> None:
    """Reject settings that would break round-limit or scoring arithmetic."""
    if settings.deck_size < 1:
        raise UnsupportedSettingsError(f"deck_size must be positive, got {settings.deck_size}")
    if settings.points_per_trick < 0 or settings.miss_penalty_per_trick < 0:
        raise UnsupportedSettingsError("per-trick points and penalties must not be negative")


DEFAULT_SETTINGS = GameSettings()
