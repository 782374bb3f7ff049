"""Asyncio timer that drives a session at its configured cadence."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from torus_snake.session import SessionController, Snapshot

logger = logging.getLogger(__name__)

TickCallback = Callable[[Snapshot], Awaitable[None]]


class TickScheduler:
    """Calls :meth:`SessionController.tick` once per tick interval.

    The interval is re-read before every sleep, so speed changes apply from
    the next tick on. Every tick and its ``on_tick`` callback run under
    :attr:`lock`; anything else that mutates the session (command handlers)
    must take the same lock.
    """

    def __init__(
        self,
        controller: SessionController,
        on_tick: TickCallback | None = None,
        lock: asyncio.Lock | None = None,
    ) -> None:
        self.controller = controller
        self.on_tick = on_tick
        self.lock = lock if lock is not None else asyncio.Lock()
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the tick loop on the running event loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._tick_loop())
        logger.info(
            "Tick scheduler started (%d ms).", self.controller.tick_interval_ms,
        )

    async def stop(self) -> None:
        """Cancel the tick loop and wait for it to exit."""
        task = self._task
        self._task = None
        if task is None or task.done():
            return
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        logger.info("Tick scheduler stopped.")

    async def _tick_loop(self) -> None:
        try:
            while True:
                await asyncio.sleep(self.controller.tick_interval_ms / 1000.0)
                async with self.lock:
                    state = self.controller.tick()
                    if self.on_tick is not None:
                        await self.on_tick(state)
        except asyncio.CancelledError:
            logger.debug("Tick loop cancelled.")
            raise
        except Exception:
            logger.exception("Tick loop error.")
            raise
