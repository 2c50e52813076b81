from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

import structlog

from scorekeeper.logic.exceptions import PlayerNotFoundError
from shared.dal.models import PlayerStats

if TYPE_CHECKING:
    from collections.abc import Iterable

    from scorekeeper.logic.types import GameOutcome

logger = structlog.get_logger()


class PlayerRegistry:
    """Known players with their lifetime wins, losses and games played.

    Entries keep registration order. Counters only grow, through
    apply_game_outcome; deleting a player drops the whole entry.
    """

    def __init__(self, players: Iterable[PlayerStats] = ()) -> None:
        self._players: list[PlayerStats] = list(players)

    def players(self) -> list[PlayerStats]:
        return self._players.copy()

    def get(self, player_id: str) -> PlayerStats | None:
        return next((p for p in self._players if p.id == player_id), None)

    def find_by_name(self, name: str) -> PlayerStats | None:
        return next((p for p in self._players if p.name == name), None)

    def add_or_find(self, name: str) -> PlayerStats:
        """Return the player registered under name, registering them first if needed."""
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Player name must not be blank")
        existing = self.find_by_name(cleaned)
        if existing is not None:
            return existing
        player = PlayerStats(id=uuid4().hex, name=cleaned)
        self._players.append(player)
        logger.info("registered player", player_id=player.id, name=player.name)
        return player

    def rename(self, player_id: str, name: str) -> PlayerStats:
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Player name must not be blank")
        for index, player in enumerate(self._players):
            if player.id == player_id:
                renamed = player.model_copy(update={"name": cleaned})
                self._players[index] = renamed
                return renamed
        raise PlayerNotFoundError(player_id)

    def remove(self, player_id: str) -> bool:
        """Delete a player. Returns False if no such player was registered."""
        remaining = [p for p in self._players if p.id != player_id]
        removed = len(remaining) != len(self._players)
        self._players = remaining
        return removed

    def apply_game_outcome(self, outcome: GameOutcome) -> None:
        """Record a finalized game: every participant played, winners won, the rest lost.

        Participants missing from the registry (e.g. deleted meanwhile) are
        registered again under their seated name.
        """
        by_id = {p.id: p for p in self._players}
        for participant in outcome.participants:
            stats = by_id.get(participant.id)
            if stats is None:
                stats = PlayerStats(id=participant.id, name=participant.name)
                self._players.append(stats)
            won = participant.id in outcome.winner_ids
            by_id[participant.id] = stats.model_copy(
                update={
                    "games_played": stats.games_played + 1,
                    "wins": stats.wins + int(won),
                    "losses": stats.losses + int(not won),
                },
            )
        self._players = [by_id[p.id] for p in self._players]
        logger.info(
            "recorded game outcome",
            game_id=outcome.game_id,
            winners=outcome.winner_ids,
            participants=len(outcome.participants),
        )
