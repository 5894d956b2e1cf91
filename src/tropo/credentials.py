from __future__ import annotations

from tropo.errors import MissingCredentialError


def validate_api_token(token: str | None) -> None:
    """Fail fast when the API token is absent or blank."""

    if token is None or not token.strip():
        raise MissingCredentialError("Please remember to set your Tropo API token.")
