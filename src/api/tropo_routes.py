"""Tropo session control.

This module provides:
- Signal endpoint to move a running session along an event path.
- Signal URL lookup for handing the signal to another session.
- Session endpoint to start an outbound session.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_tropo_signals
from api.links import action_url
from api.schemas import CreateSessionRequest, CreateSessionResponse, SignalResponse, SignalUrlResponse
from tropo import DEFAULT_EVENT, TropoSignals, controller_name_for

LOGGER = logging.getLogger(__name__)


class SessionsController:
    """Request-scoped handler holding a Tropo client."""

    def __init__(self, request: Request, signals: TropoSignals) -> None:
        self.request = request
        self.signals = signals

    def to(
        self,
        action: str,
        controller: str | None = None,
        values: dict[str, str] | None = None,
        protocol: str | None = None,
    ) -> str:
        return action_url(
            self.request,
            action,
            controller=controller or controller_name_for(type(self)),
            values=values,
            protocol=protocol,
        )


def get_sessions_controller(
    request: Request,
    signals: TropoSignals = Depends(get_tropo_signals),
) -> SessionsController:
    return SessionsController(request, signals)


router = APIRouter(prefix=f"/{controller_name_for(SessionsController)}", tags=["tropo"])


@router.post("/{session_id}/signal", response_model=SignalResponse)
async def signal_session(
    session_id: str,
    event: str = DEFAULT_EVENT,
    controller: SessionsController = Depends(get_sessions_controller),
) -> SignalResponse:
    status = await controller.signals.signal_async(session_id, event)
    LOGGER.info("Signalled session=%s event=%s status=%s", session_id, event, status)
    return SignalResponse(session_id=session_id, event=event, status=status)


@router.get("/{session_id}/signal_url", response_model=SignalUrlResponse)
async def get_signal_url(
    session_id: str,
    event: str = DEFAULT_EVENT,
    controller: SessionsController = Depends(get_sessions_controller),
) -> SignalUrlResponse:
    return SignalUrlResponse(
        session_id=session_id,
        event=event,
        url=controller.signals.signal_url(session_id, event),
        proxy_url=controller.to(f"{session_id}/signal", values={"event": event}),
    )


@router.post("", response_model=CreateSessionResponse)
def create_session(
    payload: CreateSessionRequest,
    controller: SessionsController = Depends(get_sessions_controller),
) -> CreateSessionResponse:
    # Sync endpoint: the session API call blocks and FastAPI runs it in a worker thread.
    new_session = controller.signals.create_session(payload.parameters)
    return CreateSessionResponse(session=new_session.session)
