"""Tropo signal client held by request handlers."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

from tropo.credentials import validate_api_token
from tropo.errors import TransportFailureError
from tropo.events import DEFAULT_EVENT
from tropo.sessions import NewSession, RestSessionCreator, SessionCreator, create_new_session
from tropo.signals import build_signal_url, parse_signal_status

LOGGER = logging.getLogger(__name__)


class TropoSignals:
    """Signals running Tropo sessions and creates new ones.

    Injected httpx clients are used as-is and left open; otherwise a client is
    opened and closed around every request.
    """

    def __init__(
        self,
        api_token: str,
        *,
        session_creator: SessionCreator | None = None,
        http_client: httpx.Client | None = None,
        async_http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_token = api_token
        self._session_creator = session_creator or RestSessionCreator()
        self._http_client = http_client
        self._async_http_client = async_http_client

    def signal_url(self, session_id: str, event_name: str = DEFAULT_EVENT) -> str:
        """URL that signals ``session_id`` when fetched, e.g. by another session on hangup."""

        return build_signal_url(session_id, event_name)

    def signal(self, session_id: str, event_name: str = DEFAULT_EVENT) -> str:
        validate_api_token(self._api_token)

        url = build_signal_url(session_id, event_name)
        LOGGER.debug("Signalling session=%s event=%s", session_id, event_name)

        try:
            if self._http_client is not None:
                body = self._fetch(self._http_client, url)
            else:
                with httpx.Client() as client:
                    body = self._fetch(client, url)
        except httpx.HTTPError as exc:
            raise self._transport_failure(session_id, exc) from exc

        return parse_signal_status(body)

    async def signal_async(self, session_id: str, event_name: str = DEFAULT_EVENT) -> str:
        validate_api_token(self._api_token)

        url = build_signal_url(session_id, event_name)
        LOGGER.debug("Signalling session=%s event=%s (async)", session_id, event_name)

        try:
            if self._async_http_client is not None:
                body = await self._afetch(self._async_http_client, url)
            else:
                async with httpx.AsyncClient() as client:
                    body = await self._afetch(client, url)
        except httpx.HTTPError as exc:
            raise self._transport_failure(session_id, exc) from exc

        return parse_signal_status(body)

    def create_session(self, parameters: Mapping[str, str] | None = None) -> NewSession:
        return create_new_session(self._session_creator, self._api_token, parameters)

    @staticmethod
    def _fetch(client: httpx.Client, url: str) -> bytes:
        with client.stream("GET", url) as response:
            response.raise_for_status()
            return response.read()

    @staticmethod
    async def _afetch(client: httpx.AsyncClient, url: str) -> bytes:
        async with client.stream("GET", url) as response:
            response.raise_for_status()
            return await response.aread()

    @staticmethod
    def _transport_failure(session_id: str, exc: httpx.HTTPError) -> TransportFailureError:
        LOGGER.error("Tropo signal for session=%s failed: %s", session_id, exc)
        return TransportFailureError(f"Tropo signal request failed: {exc}")
