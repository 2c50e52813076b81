"""
Scorekeeper service: the games collection and the player registry, kept in
memory and written back to storage after every committed change.

Writes are fire-and-forget. A failed save is logged and the in-memory state
stays authoritative; the next successful save catches storage up.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from scorekeeper.logic import dealer, game as lifecycle
from scorekeeper.logic.exceptions import GameNotFoundError, PlayerNotFoundError
from scorekeeper.logic.scoreboard import build_scoreboard
from scorekeeper.logic.settings import GameSettings, validate_settings
from scorekeeper.registry.manager import PlayerRegistry
from shared.dal.models import Player
from shared.kv import KeyValueGameRepository, KeyValuePlayerRepository
from shared.storage import LocalKeyValueStorage

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from scorekeeper.logic.types import GameFinalization, RoundSubmission, ScoreboardView
    from scorekeeper.settings import ScorekeeperSettings
    from shared.dal.game_repository import GameRepository
    from shared.dal.models import Game, PlayerStats
    from shared.dal.player_repository import PlayerRepository

logger = structlog.get_logger()


class ScorekeeperService:
    """Operations an operator performs on games and players."""

    def __init__(
        self,
        game_repository: GameRepository,
        player_repository: PlayerRepository,
        settings: GameSettings | None = None,
    ) -> None:
        self._settings = settings or GameSettings()
        validate_settings(self._settings)
        self._game_repository = game_repository
        self._player_repository = player_repository
        self._games: list[Game] = game_repository.load_games()
        self._registry = PlayerRegistry(player_repository.load_players())
        logger.info("loaded scorekeeper state", games=len(self._games), players=len(self._registry.players()))

    @classmethod
    def from_settings(cls, settings: ScorekeeperSettings, game_settings: GameSettings | None = None) -> ScorekeeperService:
        storage = LocalKeyValueStorage(settings.data_dir)
        return cls(
            KeyValueGameRepository(storage, settings.games_key),
            KeyValuePlayerRepository(storage, settings.players_key),
            game_settings,
        )

    # --- persistence ---

    def _persist_games(self) -> None:
        try:
            self._game_repository.save_games(self._games)
        except (OSError, ValueError):  # fmt: skip
            logger.exception("failed to save games")

    def _persist_players(self) -> None:
        try:
            self._player_repository.save_players(self._registry.players())
        except (OSError, ValueError):  # fmt: skip
            logger.exception("failed to save players")

    # --- games ---

    def games(self) -> list[Game]:
        """All games, newest first."""
        return self._games.copy()

    def get_game(self, game_id: str) -> Game:
        for game in self._games:
            if game.id == game_id:
                return game
        raise GameNotFoundError(game_id)

    def _replace_game(self, updated: Game) -> Game:
        self._games = [updated if g.id == updated.id else g for g in self._games]
        self._persist_games()
        return updated

    def _update_game(self, game_id: str, transition: Callable[[Game], Game]) -> Game:
        current = self.get_game(game_id)
        updated = transition(current)
        if updated is current:
            return current
        return self._replace_game(updated)

    def create_game(self, name: str | None = None) -> Game:
        game = lifecycle.create_game(name or f"Game {len(self._games) + 1}")
        self._games.insert(0, game)
        self._persist_games()
        logger.info("created game", game_id=game.id, name=game.name)
        return game

    def delete_game(self, game_id: str) -> None:
        self.get_game(game_id)
        self._games = [g for g in self._games if g.id != game_id]
        self._persist_games()
        logger.info("deleted game", game_id=game_id)

    # --- roster ---

    def add_player_to_game(self, game_id: str, name: str) -> Game:
        """Seat a player by name, registering them first if the name is new."""
        game = self.get_game(game_id)
        lifecycle.ensure_roster_editable(game)
        stats = self.register_player(name)
        updated = lifecycle.add_player(game, Player(id=stats.id, name=stats.name))
        if updated is game:
            return game
        return self._replace_game(updated)

    def add_registered_players_to_game(self, game_id: str, player_ids: Iterable[str]) -> Game:
        """Seat several registered players at once. Unknown ids are skipped."""
        found = [self._registry.get(pid) for pid in player_ids]
        players = [Player(id=s.id, name=s.name) for s in found if s is not None]
        return self._update_game(game_id, lambda g: lifecycle.add_players(g, players))

    def remove_player_from_game(self, game_id: str, player_id: str) -> Game:
        return self._update_game(game_id, lambda g: lifecycle.remove_player(g, player_id))

    def move_player(self, game_id: str, from_index: int, to_index: int) -> Game:
        return self._update_game(game_id, lambda g: lifecycle.move_player(g, from_index, to_index))

    # --- dealers ---

    def set_dealer(self, game_id: str, round_number: int, player_id: str) -> Game:
        return self._update_game(game_id, lambda g: dealer.set_dealer(g, round_number, player_id))

    def clear_dealer(self, game_id: str, round_number: int) -> Game:
        return self._update_game(game_id, lambda g: dealer.clear_dealer(g, round_number))

    def rotate_dealer(self, game_id: str, round_number: int) -> Game:
        return self._update_game(game_id, lambda g: dealer.rotate_dealer(g, round_number))

    def dealer_for_round(self, game_id: str, round_number: int) -> str | None:
        return dealer.dealer_for_round(self.get_game(game_id), round_number)

    # --- rounds ---

    def submit_round(self, game_id: str, bids: Mapping[str, int], tricks: Mapping[str, int]) -> RoundSubmission:
        """Commit the next round of a game, or return the validation error for the operator."""
        submission = lifecycle.submit_round(self.get_game(game_id), bids, tricks, self._settings)
        if submission.error is not None:
            logger.info("rejected round", game_id=game_id, code=submission.error.code)
            return submission
        self._replace_game(submission.game)
        logger.info("committed round", game_id=game_id, round=submission.game.rounds_count)
        return submission

    def finalize_game(self, game_id: str) -> GameFinalization:
        """Complete a game and record wins and losses. Repeated calls change nothing."""
        finalization = lifecycle.finalize_game(self.get_game(game_id))
        if finalization.outcome is None:
            logger.info("game already finalized", game_id=game_id)
            return finalization
        self._registry.apply_game_outcome(finalization.outcome)
        self._persist_players()
        self._replace_game(finalization.game)
        logger.info("finalized game", game_id=game_id, winners=finalization.outcome.winner_ids)
        return finalization

    def scoreboard(self, game_id: str) -> ScoreboardView:
        return build_scoreboard(self.get_game(game_id), self._settings)

    # --- registry ---

    def players(self) -> list[PlayerStats]:
        return self._registry.players()

    def register_player(self, name: str) -> PlayerStats:
        stats = self._registry.add_or_find(name)
        self._persist_players()
        return stats

    def rename_player(self, player_id: str, name: str) -> PlayerStats:
        """Rename a registered player and re-sync the name in every game they are seated in."""
        stats = self._registry.rename(player_id, name)
        self._persist_players()
        self._games = [lifecycle.rename_seated_player(g, player_id, stats.name) for g in self._games]
        self._persist_games()
        return stats

    def delete_player(self, player_id: str) -> None:
        """Delete a registered player and unseat them from every game."""
        if not self._registry.remove(player_id):
            raise PlayerNotFoundError(player_id)
        self._persist_players()
        self._games = [lifecycle.unseat_player(g, player_id) for g in self._games]
        self._persist_games()
        logger.info("deleted player", player_id=player_id)
