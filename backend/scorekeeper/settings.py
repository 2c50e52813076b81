"""Scorekeeper configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings

from shared.kv import GAMES_KEY, PLAYERS_KEY


class ScorekeeperSettings(BaseSettings):
    model_config = {"env_prefix": "SCOREKEEPER_"}

    data_dir: str = Field(default="backend/data", min_length=1)
    log_dir: str | None = "backend/logs"
    games_key: str = Field(default=GAMES_KEY, min_length=1)
    players_key: str = Field(default=PLAYERS_KEY, min_length=1)
