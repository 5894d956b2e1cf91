"""Adapter for signalling and creating Tropo voice/IM sessions."""

from tropo.client import TropoSignals
from tropo.credentials import validate_api_token
from tropo.errors import (
    ConfigurationError,
    MalformedResponseError,
    MissingCredentialError,
    TransportFailureError,
    TropoError,
)
from tropo.events import DEFAULT_EVENT, Event
from tropo.naming import controller_name_for
from tropo.sessions import NewSession, RestSessionCreator, SessionCreator, create_new_session
from tropo.signals import SIGNAL_ERROR, build_signal_url, parse_signal_status

__all__ = [
    "ConfigurationError",
    "DEFAULT_EVENT",
    "Event",
    "MalformedResponseError",
    "MissingCredentialError",
    "NewSession",
    "RestSessionCreator",
    "SIGNAL_ERROR",
    "SessionCreator",
    "TransportFailureError",
    "TropoError",
    "TropoSignals",
    "build_signal_url",
    "controller_name_for",
    "create_new_session",
    "parse_signal_status",
    "validate_api_token",
]
