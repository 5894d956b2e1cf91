from __future__ import annotations

from dataclasses import dataclass

from config.settings import get_settings
from tropo import MissingCredentialError, RestSessionCreator, TropoSignals


@dataclass(frozen=True)
class TropoConfig:
    api_token: str
    session_api_url: str


def get_tropo_config() -> TropoConfig:
    settings = get_settings()
    if not settings.tropo_api_token or not settings.tropo_api_token.strip():
        raise MissingCredentialError("TROPO_API_TOKEN is not configured")

    return TropoConfig(
        api_token=settings.tropo_api_token,
        session_api_url=settings.tropo_session_api_url.rstrip("/"),
    )


def build_tropo_signals() -> TropoSignals:
    cfg = get_tropo_config()
    return TropoSignals(cfg.api_token, session_creator=RestSessionCreator(cfg.session_api_url))
