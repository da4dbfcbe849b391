"""Shared stand-ins for the ``requests`` session used by Privat24Session."""

from __future__ import annotations

import json
from typing import Any, Dict, List
from urllib.parse import urlparse

import pytest
import requests

from public24.config import Privat24Settings


class DummyResponse:
    def __init__(self, url: str, body: Any, status_code: int = 200) -> None:
        self.url = url
        self.status_code = status_code
        self.text = body if isinstance(body, str) else json.dumps(body)

    def json(self, **kwargs: Any) -> Any:
        return json.loads(self.text, **kwargs)

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)  # type: ignore[arg-type]


class DummySession:
    """Serve canned bodies by URL path and remember every requested URL."""

    def __init__(self, routes: Dict[str, Any] | None = None, status_code: int = 200) -> None:
        self.routes: Dict[str, Any] = dict(routes or {})
        self.status_code = status_code
        self.headers: Dict[str, str] = {}
        self.calls: List[str] = []
        self.timeouts: List[float] = []
        self.closed = False

    def get(self, url: str, timeout: float | None = None) -> DummyResponse:
        self.calls.append(url)
        self.timeouts.append(timeout)  # type: ignore[arg-type]
        path = urlparse(url).path.rsplit("/", 1)[-1]
        if path not in self.routes:
            raise requests.ConnectionError(f"no route for {url}")
        return DummyResponse(url, self.routes[path], self.status_code)

    def close(self) -> None:
        self.closed = True


HISTORY_PAYLOAD = {
    "date": "05.01.2024",
    "bank": "PB",
    "baseCurrency": 980,
    "baseCurrencyLit": "UAH",
    "exchangeRate": [
        {"baseCurrency": "UAH", "saleRateNB": 1.0, "purchaseRateNB": 1.0},
        {
            "baseCurrency": "UAH",
            "currency": "USD",
            "saleRateNB": 37.9824,
            "purchaseRateNB": 37.9824,
            "saleRate": 38.45,
            "purchaseRate": 37.85,
        },
        {
            "baseCurrency": "UAH",
            "currency": "EUR",
            "saleRateNB": 41.5628,
            "purchaseRateNB": 41.5628,
            "saleRate": 42.1,
            "purchaseRate": 41.2,
        },
        {
            "baseCurrency": "UAH",
            "currency": "PLN",
            "saleRateNB": 9.5,
            "purchaseRateNB": 7.5,
        },
    ],
}

PUBINFO_PAYLOAD = [
    {"ccy": "EUR", "base_ccy": "UAH", "buy": "41.20000", "sale": "42.10000"},
    {"ccy": "USD", "base_ccy": "UAH", "buy": "37.85000", "sale": "38.45000"},
]


def make_infrastructure_payload(count: int) -> Dict[str, Any]:
    return {
        "city": "Kyiv",
        "address": "",
        "devices": [
            {
                "type": "ATM",
                "cityEN": "Kyiv",
                "fullAddressEn": f"Ukraine,area Kyiv,city Kyiv,street Khreshchatyk,{index}",
                "placeUa": "Branch",
                "latitude": f"50.45{index}",
                "longitude": f"30.52{index}",
            }
            for index in range(1, count + 1)
        ],
    }


@pytest.fixture()
def settings() -> Privat24Settings:
    return Privat24Settings(url="https://api.example.test/p24api")


@pytest.fixture()
def dummy_session() -> DummySession:
    return DummySession(
        {
            "exchange_rates": HISTORY_PAYLOAD,
            "pubinfo": PUBINFO_PAYLOAD,
            "infrastructure": make_infrastructure_payload(5),
        }
    )
