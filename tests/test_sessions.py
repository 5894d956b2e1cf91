from __future__ import annotations

import logging

import httpx
import pytest

from tropo import (
    MalformedResponseError,
    MissingCredentialError,
    NewSession,
    RestSessionCreator,
    TransportFailureError,
    TropoSignals,
    create_new_session,
)

SESSION_XML = (
    b"<?xml version=\"1.0\" encoding=\"UTF-8\"?>"
    b"<session><success>true</success><token>secret</token><id>0b4c1d2e3f</id></session>"
)


def test_missing_parameters_become_empty_mapping(session_creator) -> None:
    new_session = create_new_session(session_creator, "secret")

    assert session_creator.calls == [("secret", {})]
    assert isinstance(new_session, NewSession)
    assert new_session.session == {"success": "true", "id": "sess-1"}


def test_parameters_are_passed_through(session_creator) -> None:
    signals = TropoSignals("secret", session_creator=session_creator)

    signals.create_session({"customerName": "Muster", "numberToDial": "+41791234567"})

    assert session_creator.calls == [
        ("secret", {"customerName": "Muster", "numberToDial": "+41791234567"})
    ]


@pytest.mark.parametrize("token", ["", "  \t", None])
def test_blank_token_never_reaches_creator(session_creator, token) -> None:
    with pytest.raises(MissingCredentialError):
        create_new_session(session_creator, token, {"a": "b"})
    assert session_creator.calls == []


@pytest.fixture()
def mock_client():
    clients: list[httpx.Client] = []

    def make(handler) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield make

    for client in clients:
        client.close()


def test_rest_creator_calls_session_api(mock_client) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=SESSION_XML)

    creator = RestSessionCreator("https://api.example.test/1.0/sessions/", http_client=mock_client(handler))
    result = creator.create_session("secret", {"numberToDial": "+41791234567"})

    assert result == {"success": "true", "id": "0b4c1d2e3f"}
    request = seen[0]
    assert request.method == "GET"
    assert request.url.host == "api.example.test"
    assert request.url.path == "/1.0/sessions"
    assert request.url.params["action"] == "create"
    assert request.url.params["token"] == "secret"
    assert request.url.params["numberToDial"] == "+41791234567"


def test_rest_creator_maps_http_errors_without_leaking_token(mock_client, caplog) -> None:
    creator = RestSessionCreator(http_client=mock_client(lambda request: httpx.Response(401)))

    with caplog.at_level(logging.DEBUG, logger="tropo"), pytest.raises(TransportFailureError) as exc:
        creator.create_session("TOKEN-4f9a7c", {})

    assert "HTTP 401" in exc.value.detail
    assert "TOKEN-4f9a7c" not in exc.value.detail
    assert "TOKEN-4f9a7c" not in str(exc.value)
    assert "TOKEN-4f9a7c" not in caplog.text
    assert "HTTP 401" in caplog.text


def test_rest_creator_connection_error_does_not_leak_token(mock_client, caplog) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError(f"cannot reach {request.url}", request=request)

    creator = RestSessionCreator(http_client=mock_client(handler))

    with caplog.at_level(logging.DEBUG, logger="tropo"), pytest.raises(TransportFailureError) as exc:
        creator.create_session("TOKEN-4f9a7c", {})

    assert exc.value.detail == "Tropo session creation failed: ConnectError"
    assert "TOKEN-4f9a7c" not in caplog.text


def test_rest_creator_rejects_non_xml(mock_client) -> None:
    creator = RestSessionCreator(http_client=mock_client(lambda request: httpx.Response(200, content=b"oops")))

    with pytest.raises(MalformedResponseError):
        creator.create_session("secret", {})
