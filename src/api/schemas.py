"""API-facing Pydantic models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SignalResponse(BaseModel):
    session_id: str
    event: str
    status: str = Field(description="Status reported by Tropo, or 'Error' when the response was empty.")


class SignalUrlResponse(BaseModel):
    session_id: str
    event: str
    url: str = Field(description="Tropo URL that raises the signal when fetched.")
    proxy_url: str = Field(description="This service's endpoint that raises the same signal.")


class CreateSessionRequest(BaseModel):
    parameters: dict[str, str] = Field(default_factory=dict)


class CreateSessionResponse(BaseModel):
    session: Any
