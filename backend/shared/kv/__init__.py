"""Key-value backed repository implementations."""

from shared.kv.game_repository import GAMES_KEY, KeyValueGameRepository
from shared.kv.player_repository import PLAYERS_KEY, KeyValuePlayerRepository

__all__ = [
    "GAMES_KEY",
    "PLAYERS_KEY",
    "KeyValueGameRepository",
    "KeyValuePlayerRepository",
]
