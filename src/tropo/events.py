"""Well-known Tropo event names."""

from __future__ import annotations

from typing import Final


class Event:
    CONTINUE: Final = "continue"
    INCOMPLETE: Final = "incomplete"
    ERROR: Final = "error"
    HANGUP: Final = "hangup"
    JOIN: Final = "join"
    LEAVE: Final = "leave"
    RING: Final = "ring"


DEFAULT_EVENT: Final = Event.CONTINUE
