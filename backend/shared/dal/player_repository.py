"""Abstract interface for player registry persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shared.dal.models import PlayerStats


class PlayerRepository(ABC):
    """Abstract interface for player registry persistence.

    Implementations can use a key-value store, SQLite, etc.
    """

    @abstractmethod
    def load_players(self) -> list[PlayerStats]: ...

    @abstractmethod
    def save_players(self, players: list[PlayerStats]) -> None: ...
