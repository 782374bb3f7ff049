"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CommandRequest(BaseModel):
    """Request body for POST /session/commands."""

    command: str = Field(min_length=1, max_length=16)


class SpeedRequest(BaseModel):
    """Request body for PUT /session/speed.

    Values outside the configured range are clamped, not rejected.
    """

    tick_interval_ms: int = Field(ge=1, le=60_000)


class SpeedResponse(BaseModel):
    """Applied cadence after a speed change."""

    tick_interval_ms: int
    speed_label: str
