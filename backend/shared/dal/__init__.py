"""Data access layer: repository interfaces and shared persistence models."""

from shared.dal.game_repository import GameRepository
from shared.dal.models import Game, Player, PlayerStats, RoundResult
from shared.dal.player_repository import PlayerRepository

__all__ = [
    "Game",
    "GameRepository",
    "Player",
    "PlayerRepository",
    "PlayerStats",
    "RoundResult",
]
