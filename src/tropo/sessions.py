"""Outbound session creation.

The heavy lifting is delegated to a ``SessionCreator`` collaborator; this module
only checks the credential, defaults the parameter map and wraps the result.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, Protocol
from xml.etree import ElementTree

import httpx

from tropo.credentials import validate_api_token
from tropo.errors import MalformedResponseError, TransportFailureError

LOGGER = logging.getLogger(__name__)

SESSION_API_URL: Final = "https://api.tropo.com/1.0/sessions"


class SessionCreator(Protocol):
    """Anything able to open a new Tropo session."""

    def create_session(self, api_token: str, parameters: Mapping[str, str]) -> Any:  # pragma: no cover - protocol stub
        ...


@dataclass(frozen=True)
class NewSession:
    session: Any


def create_new_session(
    creator: SessionCreator,
    api_token: str | None,
    parameters: Mapping[str, str] | None = None,
) -> NewSession:
    validate_api_token(api_token)

    params = parameters if parameters is not None else {}
    LOGGER.info("Creating Tropo session with %d parameter(s)", len(params))
    return NewSession(creator.create_session(api_token, params))


class RestSessionCreator:
    """Opens sessions through the Tropo session API."""

    def __init__(self, base_url: str = SESSION_API_URL, *, http_client: httpx.Client | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client

    def create_session(self, api_token: str, parameters: Mapping[str, str]) -> dict[str, str]:
        query = [("action", "create"), ("token", api_token)]
        query.extend(parameters.items())

        try:
            if self._http_client is not None:
                response = self._http_client.get(self._base_url, params=query)
            else:
                with httpx.Client() as client:
                    response = client.get(self._base_url, params=query)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            reason = _failure_reason(exc)
            LOGGER.error("Tropo session creation failed: %s", reason)
            raise TransportFailureError(f"Tropo session creation failed: {reason}") from exc

        return _session_fields(response.content)


def _failure_reason(exc: httpx.HTTPError) -> str:
    # The request URL carries the token; never echo it.
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}"
    return type(exc).__name__


def _session_fields(body: bytes) -> dict[str, str]:
    try:
        root = ElementTree.fromstring(body)
    except ElementTree.ParseError as exc:
        raise MalformedResponseError(f"Session response is not valid XML: {exc}") from exc

    # Tropo echoes the token back; it stays out of the returned fields.
    return {
        child.tag: "".join(child.itertext()).strip()
        for child in root
        if child.tag != "token"
    }
