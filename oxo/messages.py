"""Pydantic models for WebSocket message protocol."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from oxo.model import MAX_PLAYERS
from oxo.parser import MAX_COLUMNS, MAX_ROWS


# ---------------------------------------------------------------------------
# Client → Server
# ---------------------------------------------------------------------------

class CommandMsg(BaseModel):
    type: Literal["command"] = "command"
    command: str


class NewGameMsg(BaseModel):
    type: Literal["new_game"] = "new_game"
    rows: int | None = Field(default=None, ge=1, le=MAX_ROWS)
    columns: int | None = Field(default=None, ge=1, le=MAX_COLUMNS)
    players: int | None = Field(default=None, ge=1, le=MAX_PLAYERS)
    win_threshold: int | None = Field(default=None, ge=1)


class GetStateMsg(BaseModel):
    type: Literal["get_state"] = "get_state"


ClientMessage = CommandMsg | NewGameMsg | GetStateMsg


# ---------------------------------------------------------------------------
# Server → Client
# ---------------------------------------------------------------------------

class GameStateMsg(BaseModel):
    type: Literal["game_state"] = "game_state"
    board: list[list[str | None]]
    rows: int
    columns: int
    win_threshold: int
    current_player: str
    status: str  # "active" | "won" | "drawn"
    winner: str | None
    occupied_cells: int


class MoveAppliedMsg(BaseModel):
    type: Literal["move_applied"] = "move_applied"
    cell: str
    row: int
    col: int
    player: str
    status: str


class GameOverMsg(BaseModel):
    type: Literal["game_over"] = "game_over"
    winner: str | None
    reason: str  # "line" | "draw"


class ErrorMsg(BaseModel):
    type: Literal["error"] = "error"
    message: str
    reason: str = "invalid_message"
    row: int | None = None
    col: int | None = None
    identifier: str | None = None


def parse_client_message(data: dict) -> ClientMessage | None:
    """Parse a raw dict into a typed client message, or None if invalid."""
    if not isinstance(data, dict):
        return None
    msg_type = data.get("type")
    mapping: dict[str, type[BaseModel]] = {
        "command": CommandMsg,
        "new_game": NewGameMsg,
        "get_state": GetStateMsg,
    }
    model = mapping.get(msg_type)  # type: ignore[arg-type]
    if model is None:
        return None
    try:
        return model.model_validate(data)  # type: ignore[return-value]
    except ValidationError:
        return None
