"""Settings read from the environment (and a .env file, via python-dotenv)."""

from __future__ import annotations

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from oxo.model import MAX_PLAYERS
from oxo.parser import MAX_COLUMNS, MAX_ROWS

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:5174"


class GameSettings(BaseModel):
    rows: int = Field(default=3, ge=1, le=MAX_ROWS)
    columns: int = Field(default=3, ge=1, le=MAX_COLUMNS)
    players: int = Field(default=2, ge=1, le=MAX_PLAYERS)
    win_threshold: int = Field(default=3, ge=1)


class Settings(BaseModel):
    game: GameSettings = Field(default_factory=GameSettings)
    cors_origins: list[str] = Field(default_factory=list)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


def load_settings() -> Settings:
    load_dotenv()

    game = GameSettings.model_validate(
        {
            "rows": os.getenv("OXO_ROWS", "3"),
            "columns": os.getenv("OXO_COLUMNS", "3"),
            "players": os.getenv("OXO_PLAYERS", "2"),
            "win_threshold": os.getenv("OXO_WIN_THRESHOLD", "3"),
        }
    )
    cors_origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return Settings(
        game=game,
        cors_origins=[o.strip() for o in cors_origins.split(",") if o.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
