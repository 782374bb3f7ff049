"""WebSocket handler for real-time play."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from torus_snake.server.hub import SessionHub, encode

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_hub(ws: WebSocket) -> SessionHub:
    return ws.app.state.hub


@ws_router.websocket("/session/play")
async def play(websocket: WebSocket) -> None:
    """Send commands, receive a snapshot after every tick and command."""
    hub = _get_hub(websocket)
    await websocket.accept()
    hub.connect(websocket)
    logger.info("Client connected (%d total).", len(hub.clients))

    # Send an initial snapshot so the client can draw immediately.
    await websocket.send_text(encode(hub.snapshot()))

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            command = msg.get("command")
            if not isinstance(command, str):
                continue

            await hub.apply(command.lower())
    except WebSocketDisconnect:
        logger.info("Client disconnected.")
    finally:
        hub.disconnect(websocket)
