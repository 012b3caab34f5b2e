"""Session management: one hot-seat game per WebSocket connection."""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass

from fastapi import WebSocket

from oxo.config import GameSettings
from oxo.errors import (
    CellAlreadyTakenError,
    CellDoesNotExistError,
    GameConfigError,
    MalformedIdentifierError,
    MoveError,
)
from oxo.game import GameEngine
from oxo.model import GameModel, GameStatus
from oxo.messages import ErrorMsg, GameOverMsg, GameStateMsg, MoveAppliedMsg, NewGameMsg
from oxo.parser import format_cell_identifier

logger = logging.getLogger(__name__)


def build_engine(settings: GameSettings) -> GameEngine:
    model = GameModel(
        rows=settings.rows,
        cols=settings.columns,
        players=settings.players,
        win_threshold=settings.win_threshold,
    )
    return GameEngine(model)


def error_msg(exc: MoveError) -> ErrorMsg:
    msg = ErrorMsg(message=str(exc), reason=exc.reason)
    if isinstance(exc, (CellDoesNotExistError, CellAlreadyTakenError)):
        msg.row = exc.row
        msg.col = exc.col
    elif isinstance(exc, MalformedIdentifierError):
        msg.identifier = exc.identifier
    return msg


@dataclass
class Session:
    session_id: str
    ws: WebSocket
    engine: GameEngine

    def state_msg(self) -> GameStateMsg:
        model = self.engine.model
        return GameStateMsg(
            board=model.to_grid(),
            rows=model.rows,
            columns=model.cols,
            win_threshold=model.win_threshold,
            current_player=model.current_player.letter,
            status=model.status.value,
            winner=model.winner.letter if model.winner else None,
            occupied_cells=self.engine.occupied_cells,
        )

    async def send_state(self):
        await self.ws.send_json(self.state_msg().model_dump())


class SessionManager:
    def __init__(self, settings: GameSettings | None = None):
        self.settings = settings or GameSettings()
        self.sessions: dict[WebSocket, Session] = {}

    async def open_session(self, ws: WebSocket) -> Session:
        session = Session(
            session_id=secrets.token_hex(3),
            ws=ws,
            engine=build_engine(self.settings),
        )
        self.sessions[ws] = session
        logger.info("Opened session %s", session.session_id)

        await session.send_state()
        return session

    async def new_game(self, ws: WebSocket, msg: NewGameMsg):
        session = self.get_session(ws)
        if session is None:
            await ws.send_json(ErrorMsg(message="No open session").model_dump())
            return

        settings = self.settings.model_copy(
            update={
                k: v
                for k, v in msg.model_dump(exclude={"type"}).items()
                if v is not None
            }
        )
        try:
            session.engine = build_engine(settings)
        except GameConfigError as exc:
            await ws.send_json(ErrorMsg(message=str(exc), reason="invalid_game_config").model_dump())
            return

        logger.info(
            "Session %s started a %dx%d game for %d players, %d in a row",
            session.session_id,
            settings.rows,
            settings.columns,
            settings.players,
            settings.win_threshold,
        )
        await session.send_state()

    async def handle_command(self, ws: WebSocket, command: str):
        session = self.get_session(ws)
        if session is None:
            await ws.send_json(ErrorMsg(message="No open session").model_dump())
            return

        try:
            result = session.engine.apply(command)
        except MoveError as exc:
            await ws.send_json(error_msg(exc).model_dump())
            return

        # Game already finished; the command is ignored
        if result is None:
            return

        row, col = result.coordinate
        await ws.send_json(
            MoveAppliedMsg(
                cell=format_cell_identifier(row, col),
                row=row,
                col=col,
                player=result.player.letter,
                status=result.status.value,
            ).model_dump()
        )
        await session.send_state()

        if result.status is GameStatus.WON:
            await ws.send_json(GameOverMsg(winner=result.player.letter, reason="line").model_dump())
        elif result.status is GameStatus.DRAWN:
            await ws.send_json(GameOverMsg(winner=None, reason="draw").model_dump())

    async def send_state(self, ws: WebSocket):
        session = self.get_session(ws)
        if session is None:
            await ws.send_json(ErrorMsg(message="No open session").model_dump())
            return
        await session.send_state()

    def close_session(self, ws: WebSocket):
        session = self.sessions.pop(ws, None)
        if session is not None:
            logger.info("Closed session %s", session.session_id)

    def get_session(self, ws: WebSocket) -> Session | None:
        return self.sessions.get(ws)


session_manager = SessionManager()
