"""Abstract interface for game collection persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shared.dal.models import Game


class GameRepository(ABC):
    """Abstract interface for game collection persistence.

    The whole collection is read and written at once, newest game first.
    """

    @abstractmethod
    def load_games(self) -> list[Game]: ...

    @abstractmethod
    def save_games(self, games: list[Game]) -> None: ...
