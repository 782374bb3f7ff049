"""Shared session, its tick loop, and connected WebSocket clients."""

from __future__ import annotations

import asyncio
import json
import logging

from starlette.websockets import WebSocket, WebSocketState

from torus_snake.config import GameConfig
from torus_snake.controls import Command
from torus_snake.scheduler import TickScheduler
from torus_snake.session import SessionController, Snapshot

logger = logging.getLogger(__name__)


def encode(snapshot: Snapshot) -> str:
    return json.dumps(snapshot.to_dict(), separators=(",", ":"), ensure_ascii=False)


class SessionHub:
    """Serializes all access to one :class:`SessionController`.

    Commands and ticks share a single lock so that no tick ever observes a
    half-applied input. Snapshots are broadcast while the lock is held, so
    clients receive them in the order the session produced them.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        controller: SessionController | None = None,
    ) -> None:
        self.controller = (
            controller if controller is not None else SessionController(config)
        )
        self.lock = asyncio.Lock()
        self.clients: list[WebSocket] = []
        self.scheduler = TickScheduler(
            self.controller, on_tick=self.broadcast, lock=self.lock,
        )

    def snapshot(self) -> Snapshot:
        return self.controller.snapshot()

    async def apply(self, command: Command | str) -> Snapshot:
        """Apply an input command and push the result to every client."""
        async with self.lock:
            snap = self.controller.handle(command)
            await self.broadcast(snap)
        return snap

    async def set_speed(self, tick_interval_ms: int) -> Snapshot:
        async with self.lock:
            self.controller.set_tick_interval(tick_interval_ms)
            snap = self.controller.snapshot()
            await self.broadcast(snap)
        return snap

    async def step(self) -> Snapshot:
        """Run a single tick outside the scheduler."""
        async with self.lock:
            snap = self.controller.tick()
            await self.broadcast(snap)
        return snap

    def connect(self, websocket: WebSocket) -> None:
        self.clients.append(websocket)

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.clients:
            self.clients.remove(websocket)

    async def broadcast(self, snapshot: Snapshot) -> None:
        """Send a snapshot to all connected clients, dropping dead sockets."""
        payload = encode(snapshot)
        dead: list[WebSocket] = []

        # Iterate over a copy; disconnect handlers may mutate the live list.
        for ws in list(self.clients):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)

        for ws in dead:
            self.disconnect(ws)

    def start(self) -> None:
        self.scheduler.start()

    async def cleanup(self) -> None:
        """Stop the tick loop and forget connected clients."""
        await self.scheduler.stop()
        self.clients.clear()
        logger.info("SessionHub cleanup complete.")
