"""REST API route handlers for the game session."""

from __future__ import annotations

from fastapi import APIRouter, Request

from torus_snake.server.hub import SessionHub
from torus_snake.server.models import CommandRequest, SpeedRequest, SpeedResponse

router = APIRouter(prefix="/session", tags=["session"])


def _get_hub(request: Request) -> SessionHub:
    return request.app.state.hub


@router.get("")
async def get_session(request: Request) -> dict:
    """Return the current snapshot."""
    return _get_hub(request).snapshot().to_dict()


@router.post("/commands")
async def send_command(body: CommandRequest, request: Request) -> dict:
    """Apply a command; unknown commands leave the session unchanged."""
    snap = await _get_hub(request).apply(body.command.lower())
    return snap.to_dict()


@router.put("/speed")
async def set_speed(body: SpeedRequest, request: Request) -> SpeedResponse:
    """Change the tick cadence."""
    snap = await _get_hub(request).set_speed(body.tick_interval_ms)
    return SpeedResponse(
        tick_interval_ms=snap.tick_interval_ms, speed_label=snap.speed_label,
    )


@router.post("/tick")
async def step(request: Request) -> dict:
    """Advance the session by exactly one tick."""
    snap = await _get_hub(request).step()
    return snap.to_dict()
