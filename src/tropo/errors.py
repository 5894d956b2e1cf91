"""Failure taxonomy for Tropo session operations.

A missing or blank API token is a configuration error and is raised before
any request. Network errors and non-2xx answers from Tropo are transport
failures. A response that arrived but cannot be read (not XML, or no
``status`` element) is malformed. The "Error" status string returned for an
empty signal response is not an exception. Each class carries the HTTP
status the API layer answers with.
"""

from __future__ import annotations


class TropoError(Exception):
    status_code: int = 500
    default_detail: str = "Tropo error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.default_detail)
        self.detail = detail or self.default_detail


class MissingCredentialError(TropoError):
    status_code = 500
    default_detail = "Tropo API token is not configured."


class TransportFailureError(TropoError):
    status_code = 502
    default_detail = "Tropo request failed."


class MalformedResponseError(TropoError):
    status_code = 502
    default_detail = "Tropo response could not be interpreted."


class ConfigurationError(TropoError):
    status_code = 500
    default_detail = "Tropo adapter is misconfigured."
