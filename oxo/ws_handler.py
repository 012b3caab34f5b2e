"""WebSocket endpoint and message routing."""

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from oxo.messages import (
    CommandMsg,
    ErrorMsg,
    GetStateMsg,
    NewGameMsg,
    parse_client_message,
)
from oxo.session import session_manager

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    await ws.accept()
    await session_manager.open_session(ws)
    try:
        while True:
            try:
                data = await ws.receive_json()
            except json.JSONDecodeError:
                await ws.send_json(ErrorMsg(message="Message is not valid JSON").model_dump())
                continue

            msg = parse_client_message(data)
            if msg is None:
                await ws.send_json(ErrorMsg(message="Unknown or invalid message").model_dump())
                continue

            if isinstance(msg, CommandMsg):
                await session_manager.handle_command(ws, msg.command)

            elif isinstance(msg, NewGameMsg):
                await session_manager.new_game(ws, msg)

            elif isinstance(msg, GetStateMsg):
                await session_manager.send_state(ws)
    except WebSocketDisconnect:
        logger.debug("Client disconnected")
    finally:
        session_manager.close_session(ws)
