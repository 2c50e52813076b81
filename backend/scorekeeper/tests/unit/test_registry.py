"""Tests for the player registry and outcome bookkeeping."""

import pytest

from scorekeeper.logic.exceptions import PlayerNotFoundError
from scorekeeper.logic.types import GameOutcome
from scorekeeper.registry.manager import PlayerRegistry
from scorekeeper.tests.helpers import make_players
from shared.dal.models import PlayerStats


def _outcome(participants, winners):
    return GameOutcome(
        game_id="g1",
        participants=tuple(make_players(*participants)),
        winner_ids=frozenset(winners),
        totals={},
    )


class TestAddOrFind:
    def test_registers_new_player(self):
        registry = PlayerRegistry()
        player = registry.add_or_find("Alice")

        assert player.name == "Alice"
        assert (player.wins, player.losses, player.games_played) == (0, 0, 0)
        assert registry.players() == [player]

    def test_is_idempotent_by_name(self):
        registry = PlayerRegistry()
        first = registry.add_or_find("Alice")
        second = registry.add_or_find("  Alice ")

        assert first == second
        assert len(registry.players()) == 1

    def test_names_are_case_sensitive(self):
        registry = PlayerRegistry()
        assert registry.add_or_find("alice").id != registry.add_or_find("Alice").id

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError, match="blank"):
            PlayerRegistry().add_or_find("   ")


class TestRenameAndRemove:
    def test_rename(self):
        registry = PlayerRegistry([PlayerStats(id="a", name="A", wins=2)])
        renamed = registry.rename("a", " Ann ")

        assert renamed.name == "Ann"
        assert renamed.wins == 2
        assert registry.get("a") == renamed

    def test_rename_unknown(self):
        with pytest.raises(PlayerNotFoundError):
            PlayerRegistry().rename("zed", "Z")

    def test_remove(self):
        registry = PlayerRegistry([PlayerStats(id="a", name="A"), PlayerStats(id="b", name="B")])

        assert registry.remove("a") is True
        assert registry.remove("a") is False
        assert [p.id for p in registry.players()] == ["b"]

    def test_players_returns_copy(self):
        registry = PlayerRegistry([PlayerStats(id="a", name="A")])
        registry.players().clear()
        assert len(registry.players()) == 1


class TestApplyGameOutcome:
    def test_counts_wins_losses_and_games(self):
        registry = PlayerRegistry([PlayerStats(id="a", name="A"), PlayerStats(id="b", name="B")])
        registry.apply_game_outcome(_outcome(["A", "B"], ["a"]))

        a, b = registry.players()
        assert (a.wins, a.losses, a.games_played) == (1, 0, 1)
        assert (b.wins, b.losses, b.games_played) == (0, 1, 1)

    def test_ties_give_every_winner_a_win(self):
        registry = PlayerRegistry()
        registry.apply_game_outcome(_outcome(["A", "B", "C"], ["a", "b"]))

        stats = {p.id: (p.wins, p.losses) for p in registry.players()}
        assert stats == {"a": (1, 0), "b": (1, 0), "c": (0, 1)}

    def test_missing_participants_are_registered(self):
        registry = PlayerRegistry([PlayerStats(id="a", name="A")])
        registry.apply_game_outcome(_outcome(["A", "B"], ["b"]))

        assert [p.id for p in registry.players()] == ["a", "b"]
        assert registry.get("b") == PlayerStats(id="b", name="B", wins=1, games_played=1)

    def test_non_participants_untouched(self):
        bystander = PlayerStats(id="z", name="Z", wins=4, losses=1, games_played=5)
        registry = PlayerRegistry([bystander])
        registry.apply_game_outcome(_outcome(["A"], ["a"]))

        assert registry.get("z") == bystander
