"""Shared FastAPI dependencies.

Separated to avoid circular imports between route modules.
"""

from __future__ import annotations

from integrations.tropo_client import build_tropo_signals
from tropo import TropoSignals


def get_tropo_signals() -> TropoSignals:
    # One adapter per request; the token is read-only for its lifetime.
    return build_tropo_signals()
