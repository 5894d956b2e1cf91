"""Absolute links back into this application."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final
from urllib.parse import urlencode, urlsplit, urlunsplit

from fastapi import Request

from config.settings import get_settings

API_PREFIX: Final = "/api"


def action_url(
    request: Request,
    action: str,
    *,
    controller: str,
    values: Mapping[str, str] | None = None,
    protocol: str | None = None,
) -> str:
    """Build ``<base>/api/<controller>/<action>?<values>`` as an absolute URL.

    PUBLIC_BASE_URL is preferred over the request host, which may be wrong
    behind proxies. ``protocol`` overrides the scheme of the chosen base.
    """

    settings = get_settings()
    base = settings.public_base_url or str(request.base_url)
    parts = urlsplit(base.rstrip("/"))

    path = f"{parts.path}{API_PREFIX}/{controller.strip('/')}/{action.lstrip('/')}"
    query = urlencode(dict(values)) if values else ""
    return urlunsplit((protocol or parts.scheme, parts.netloc, path, query, ""))
