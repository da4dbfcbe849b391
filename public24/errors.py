"""Exception hierarchy shared by the client, the cache and the dispatcher."""

from __future__ import annotations

__all__ = [
    "Public24Error",
    "BadRequestError",
    "UnsupportedIntentError",
    "UpstreamError",
]


class Public24Error(Exception):
    """Base class for every error raised by :mod:`public24`."""


class BadRequestError(Public24Error):
    """The webhook request is missing a required value or carries an unusable one."""


class UnsupportedIntentError(Public24Error):
    """The intent name does not map to any supported workflow."""

    def __init__(self, intent_name: str | None) -> None:
        super().__init__(f"Intent Not Supported: {intent_name}")
        self.intent_name = intent_name


class UpstreamError(Public24Error):
    """The Privat24 API could not be reached or returned an unusable response."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
