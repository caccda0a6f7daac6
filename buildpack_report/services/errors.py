"""Errors raised while talking to the Cloud Foundry API."""

from __future__ import annotations


class CloudFoundryAPIError(RuntimeError):
    pass


class TransportError(CloudFoundryAPIError):
    """Connection, TLS or read failure before a response arrived."""


class StatusError(CloudFoundryAPIError):
    def __init__(self, url: str, status_code: int, body: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(f"bad status code {status_code} for {url}: {body[:200]}")


class DecodeError(CloudFoundryAPIError):
    pass


class PaginationLoopError(CloudFoundryAPIError):
    pass


class SessionError(RuntimeError):
    """No usable cf login session (endpoint or token missing)."""
