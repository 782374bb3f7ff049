"""Tests for the SessionHub broadcast and locking logic."""

from __future__ import annotations

import json

import pytest
from starlette.websockets import WebSocketState

from torus_snake.config import GameConfig
from torus_snake.food import Food
from torus_snake.persistence import InMemoryHighScoreStore
from torus_snake.server.hub import SessionHub, encode
from torus_snake.session import SessionController


class _FakeSocket:
    def __init__(self, fail: bool = False) -> None:
        self.client_state = WebSocketState.CONNECTED
        self.sent: list[str] = []
        self.fail = fail

    async def send_text(self, text: str) -> None:
        if self.fail:
            raise RuntimeError("socket closed")
        self.sent.append(text)


@pytest.fixture()
def hub():
    controller = SessionController(
        GameConfig(seed=0), gateway=InMemoryHighScoreStore(),
    )
    controller.food = Food((0, 0))
    return SessionHub(controller=controller)


class TestSessionHub:
    @pytest.mark.asyncio
    async def test_step_broadcasts(self, hub):
        ws = _FakeSocket()
        hub.connect(ws)
        await hub.step()
        assert len(ws.sent) == 1
        assert json.loads(ws.sent[0])["snake"][0] == [11, 10]

    @pytest.mark.asyncio
    async def test_dead_socket_dropped(self, hub):
        good, bad = _FakeSocket(), _FakeSocket(fail=True)
        hub.connect(good)
        hub.connect(bad)
        await hub.apply("pause")
        assert hub.clients == [good]
        assert json.loads(good.sent[0])["state"] == "paused"

    @pytest.mark.asyncio
    async def test_disconnected_socket_skipped(self, hub):
        ws = _FakeSocket()
        ws.client_state = WebSocketState.DISCONNECTED
        hub.connect(ws)
        await hub.step()
        assert ws.sent == []

    @pytest.mark.asyncio
    async def test_set_speed(self, hub):
        snap = await hub.set_speed(90)
        assert snap.tick_interval_ms == 90
        assert hub.controller.tick_interval_ms == 90

    @pytest.mark.asyncio
    async def test_start_and_cleanup(self, hub):
        ws = _FakeSocket()
        hub.connect(ws)
        hub.start()
        assert hub.scheduler.running
        await hub.cleanup()
        assert not hub.scheduler.running
        assert hub.clients == []

    def test_food_label_not_escaped(self, hub):
        hub.controller.food = Food((0, 0), "🍎")
        assert "🍎" in encode(hub.snapshot())

    @pytest.mark.asyncio
    async def test_broadcast_happens_under_lock(self, hub):
        held = []

        class _LockCheckingSocket(_FakeSocket):
            async def send_text(self, text: str) -> None:
                held.append(hub.lock.locked())
                await super().send_text(text)

        hub.connect(_LockCheckingSocket())
        await hub.apply("up")
        await hub.step()
        await hub.set_speed(100)
        assert held == [True, True, True]
