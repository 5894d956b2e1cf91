"""Signal endpoint URL construction and response parsing."""

from __future__ import annotations

from typing import Final
from xml.etree import ElementTree

from tropo.errors import MalformedResponseError
from tropo.events import DEFAULT_EVENT

SIGNAL_URL_TEMPLATE: Final = "https://api.tropo.com/1.0/sessions/{session_id}/signals?action=signal&value={event_name}"
SIGNAL_ERROR: Final = "Error"


def build_signal_url(session_id: str, event_name: str = DEFAULT_EVENT) -> str:
    # Values are inserted verbatim; Tropo accepts them unescaped.
    return SIGNAL_URL_TEMPLATE.format(session_id=session_id, event_name=event_name)


def parse_signal_status(body: bytes | None) -> str:
    """Return the text of the first ``<status>`` element of a signal response.

    An absent or empty body yields the ``"Error"`` sentinel. A body that is not
    XML, or that has no ``status`` element, raises ``MalformedResponseError``.
    """

    if not body:
        return SIGNAL_ERROR

    try:
        root = ElementTree.fromstring(body)
    except ElementTree.ParseError as exc:
        raise MalformedResponseError(f"Signal response is not valid XML: {exc}") from exc

    status = next(root.iter("status"), None)
    if status is None:
        raise MalformedResponseError("Signal response contains no <status> element.")
    return "".join(status.itertext())
