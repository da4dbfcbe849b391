"""Public interface for the public24 package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from typing import Any, Mapping

import requests

from public24.agent import AgentWebhookService, RequestParameters, WebhookRequest, to_fulfillment
from public24.agent.messages import MessageListWithLinks, SimpleMessageList
from public24.config import Privat24Settings
from public24.errors import (
    BadRequestError,
    Public24Error,
    UnsupportedIntentError,
    UpstreamError,
)
from public24.geo import GoogleMaps
from public24.p24 import (
    ExchangeRateCache,
    ExchangeRateClient,
    InfrastructureLocator,
    Privat24Session,
)

__all__ = [
    "__version__",
    "BadRequestError",
    "Privat24Settings",
    "Public24",
    "Public24Error",
    "UnsupportedIntentError",
    "UpstreamError",
]

try:
    __version__ = importlib_metadata.version("public24")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


class Public24:
    """Package facade wiring the Privat24 client, the history cache and the dispatcher."""

    __slots__ = ("settings", "http", "rates", "history", "locator", "maps", "webhook")

    __version__ = __version__

    def __init__(
        self,
        settings: Privat24Settings | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        """Build every collaborator from ``settings``.

        When ``settings`` is omitted they are read from the ``PUBLIC24_*``
        environment variables. ``session`` lets callers share or stub the
        underlying ``requests`` session.
        """

        self.settings = settings or Privat24Settings.from_env()
        self.http = Privat24Session(self.settings, session=session)
        self.rates = ExchangeRateClient(self.http)
        self.history = ExchangeRateCache(self.rates.fetch_history)
        self.locator = InfrastructureLocator(self.http)
        self.maps = GoogleMaps(self.settings.maps_url)
        self.webhook = AgentWebhookService(self.rates, self.history, self.locator, self.maps)

    def dispatch(
        self,
        intent_name: str,
        parameters: RequestParameters | Mapping[str, Any] | None = None,
    ) -> SimpleMessageList | MessageListWithLinks:
        """Run one intent and return its message list."""

        return self.webhook.fulfill(intent_name, parameters)

    def fulfill(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Handle a raw webhook body and return the fulfillment payload."""

        request = WebhookRequest.from_payload(payload)
        return to_fulfillment(self.dispatch(request.intent_name, request.parameters))

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "Public24":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
