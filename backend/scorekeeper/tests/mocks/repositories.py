"""In-memory repositories for service tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shared.dal.game_repository import GameRepository
from shared.dal.player_repository import PlayerRepository

if TYPE_CHECKING:
    from shared.dal.models import Game, PlayerStats


class InMemoryGameRepository(GameRepository):
    def __init__(self, games: list[Game] | None = None, *, fail_saves: bool = False) -> None:
        self.games = list(games or [])
        self.save_count = 0
        self.fail_saves = fail_saves

    def load_games(self) -> list[Game]:
        return list(self.games)

    def save_games(self, games: list[Game]) -> None:
        if self.fail_saves:
            raise OSError("disk full")
        self.games = list(games)
        self.save_count += 1


class InMemoryPlayerRepository(PlayerRepository):
    def __init__(self, players: list[PlayerStats] | None = None) -> None:
        self.players = list(players or [])
        self.save_count = 0

    def load_players(self) -> list[PlayerStats]:
        return list(self.players)

    def save_players(self, players: list[PlayerStats]) -> None:
        self.players = list(players)
        self.save_count += 1
