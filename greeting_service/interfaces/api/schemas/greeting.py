"""Pydantic models describing greeting payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class GreetingPayload(BaseModel):
    """JSON body exchanged by the greeting endpoints."""

    model_config = ConfigDict(extra="ignore")

    msg: StrictStr = Field(..., description="Greeting text")


__all__ = ["GreetingPayload"]
