"""Key-value backed game repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import TypeAdapter

from shared.dal.game_repository import GameRepository
from shared.dal.models import Game
from shared.kv.collection import load_collection, save_collection

if TYPE_CHECKING:
    from shared.storage import KeyValueStorage

GAMES_KEY = "wiz_games_v1"

_GAMES_ADAPTER = TypeAdapter(list[Game])


class KeyValueGameRepository(GameRepository):
    """Stores the whole games collection as one JSON list under a single key."""

    def __init__(self, storage: KeyValueStorage, key: str = GAMES_KEY) -> None:
        self._storage = storage
        self._key = key

    def load_games(self) -> list[Game]:
        return load_collection(self._storage, self._key, _GAMES_ADAPTER)

    def save_games(self, games: list[Game]) -> None:
        save_collection(self._storage, self._key, _GAMES_ADAPTER, games)
