"""Key-value backed player registry repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import TypeAdapter

from shared.dal.models import PlayerStats
from shared.dal.player_repository import PlayerRepository
from shared.kv.collection import load_collection, save_collection

if TYPE_CHECKING:
    from shared.storage import KeyValueStorage

PLAYERS_KEY = "wiz_players_v1"

_PLAYERS_ADAPTER = TypeAdapter(list[PlayerStats])


class KeyValuePlayerRepository(PlayerRepository):
    """Stores the player registry as one JSON list under a single key."""

    def __init__(self, storage: KeyValueStorage, key: str = PLAYERS_KEY) -> None:
        self._storage = storage
        self._key = key

    def load_players(self) -> list[PlayerStats]:
        return load_collection(self._storage, self._key, _PLAYERS_ADAPTER)

    def save_players(self, players: list[PlayerStats]) -> None:
        save_collection(self._storage, self._key, _PLAYERS_ADAPTER, players)
