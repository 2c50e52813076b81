"""Persistence models for the data access layer.

Field names are snake_case in Python and camelCase on disk (``roundsCount``,
``tricksWon``, ``gamesPlayed``), so stored collections stay readable by any
client that wrote them. Always dump with ``by_alias=True``.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_RECORD_CONFIG = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class Player(BaseModel):
    """Player seated in a game. ``name`` is a display copy of the registry name."""

    model_config = _RECORD_CONFIG

    id: str
    name: str


class RoundResult(BaseModel):
    """One player's bid, tricks and score for one completed round."""

    model_config = _RECORD_CONFIG

    round: int = Field(ge=1)
    player_id: str
    bid: int
    tricks_won: int = Field(ge=0)
    score: int


class Game(BaseModel):
    """Scorecard of a single game."""

    model_config = _RECORD_CONFIG

    id: str
    name: str
    date: str  # ISO-8601 creation timestamp, stored verbatim
    players: tuple[Player, ...] = ()
    history: tuple[RoundResult, ...] = ()  # flattened results for all rounds
    rounds_count: int = Field(default=0, ge=0)  # completed rounds
    completed: bool = False
    # round number -> player id; JSON object keys are stringified round numbers
    dealers: dict[int, str] = Field(default_factory=dict)

    def player_ids(self) -> list[str]:
        return [p.id for p in self.players]

    def has_player(self, player_id: str) -> bool:
        return any(p.id == player_id for p in self.players)


class PlayerStats(BaseModel):
    """Registry entry with lifetime results across finalized games."""

    model_config = _RECORD_CONFIG

    id: str
    name: str
    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    games_played: int = Field(default=0, ge=0)
