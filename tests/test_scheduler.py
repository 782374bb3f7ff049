"""Tests for the asyncio tick scheduler."""

from __future__ import annotations

import asyncio

import pytest

from torus_snake.config import GameConfig
from torus_snake.food import Food
from torus_snake.persistence import InMemoryHighScoreStore
from torus_snake.scheduler import TickScheduler
from torus_snake.session import SessionController, SessionState


def _controller() -> SessionController:
    ctl = SessionController(
        GameConfig(seed=0, min_tick_interval_ms=1, tick_interval_ms=5),
        gateway=InMemoryHighScoreStore(),
    )
    ctl.food = Food((0, 0))
    return ctl


class TestTickScheduler:
    @pytest.mark.asyncio
    async def test_ticks_until_stopped(self):
        ctl = _controller()
        scheduler = TickScheduler(ctl)
        scheduler.start()
        assert scheduler.running
        await asyncio.sleep(0.05)
        await scheduler.stop()
        assert not scheduler.running
        ticks = ctl.ticks
        assert ticks > 0
        await asyncio.sleep(0.03)
        assert ctl.ticks == ticks

    @pytest.mark.asyncio
    async def test_on_tick_receives_snapshots(self):
        ctl = _controller()
        seen = []

        async def on_tick(snap):
            seen.append(snap)

        scheduler = TickScheduler(ctl, on_tick=on_tick)
        scheduler.start()
        await asyncio.sleep(0.05)
        await scheduler.stop()
        assert seen
        assert seen[0].ticks == 1

    @pytest.mark.asyncio
    async def test_paused_session_does_not_advance(self):
        ctl = _controller()
        ctl.toggle_pause()
        scheduler = TickScheduler(ctl)
        scheduler.start()
        await asyncio.sleep(0.03)
        await scheduler.stop()
        assert ctl.ticks == 0
        assert ctl.state == SessionState.PAUSED

    @pytest.mark.asyncio
    async def test_start_is_idempotent(self):
        scheduler = TickScheduler(_controller())
        scheduler.start()
        task = scheduler._task
        scheduler.start()
        assert scheduler._task is task
        await scheduler.stop()

    @pytest.mark.asyncio
    async def test_stop_without_start(self):
        scheduler = TickScheduler(_controller())
        await scheduler.stop()
        assert not scheduler.running

    @pytest.mark.asyncio
    async def test_tick_waits_for_lock(self):
        ctl = _controller()
        scheduler = TickScheduler(ctl)
        async with scheduler.lock:
            scheduler.start()
            await asyncio.sleep(0.03)
            assert ctl.ticks == 0
        await asyncio.sleep(0.03)
        await scheduler.stop()
        assert ctl.ticks > 0

    @pytest.mark.asyncio
    async def test_on_tick_runs_under_lock(self):
        ctl = _controller()
        held = []
        scheduler = TickScheduler(ctl)

        async def on_tick(snap):
            held.append(scheduler.lock.locked())

        scheduler.on_tick = on_tick
        scheduler.start()
        await asyncio.sleep(0.03)
        await scheduler.stop()
        assert held
        assert all(held)
