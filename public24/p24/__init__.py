"""Privat24 API client, exchange rate cache and infrastructure locator."""

from __future__ import annotations

from public24.p24.cache import ExchangeRateCache
from public24.p24.client import ExchangeRateClient
from public24.p24.http import Privat24Session
from public24.p24.locator import InfrastructureLocator
from public24.p24.models import (
    Currency,
    CurrentExchangeRate,
    Device,
    DeviceType,
    ExchangeRateHistory,
    ExchangeRateHistoryCurrency,
    ExchangeRateType,
    Infrastructure,
    TieredRate,
)

__all__ = [
    "Currency",
    "CurrentExchangeRate",
    "Device",
    "DeviceType",
    "ExchangeRateCache",
    "ExchangeRateClient",
    "ExchangeRateHistory",
    "ExchangeRateHistoryCurrency",
    "ExchangeRateType",
    "Infrastructure",
    "InfrastructureLocator",
    "Privat24Session",
    "TieredRate",
]
