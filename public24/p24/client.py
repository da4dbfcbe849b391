"""Exchange rate endpoints of the Privat24 API."""

from __future__ import annotations

from datetime import date
from typing import overload

from public24.errors import UpstreamError
from public24.p24.http import Privat24Session
from public24.p24.models import (
    Currency,
    CurrentExchangeRate,
    ExchangeRateHistory,
    ExchangeRateType,
)

__all__ = ["ExchangeRateClient"]


class ExchangeRateClient:
    """Fetch live quotes and archived rates. Nothing here is cached."""

    def __init__(self, http: Privat24Session) -> None:
        self.http = http

    def fetch_history(self, rate_date: date) -> ExchangeRateHistory:
        """Request the archived rates for ``rate_date``."""

        date_format = self.http.settings.date_format
        payload = self.http.get_json(
            "/exchange_rates",
            params=[("date", rate_date.strftime(date_format))],
        )
        if not isinstance(payload, dict):
            raise UpstreamError(f"Unexpected exchange rate history payload for {rate_date}")
        try:
            return ExchangeRateHistory.from_json(
                payload, date_format=date_format, requested_date=rate_date
            )
        except ValueError as exc:
            raise UpstreamError(f"Malformed exchange rate history for {rate_date}: {exc}") from exc

    @overload
    def get_current_rates(self, rate_type: ExchangeRateType) -> list[CurrentExchangeRate]: ...

    @overload
    def get_current_rates(
        self, rate_type: ExchangeRateType, currency: Currency
    ) -> CurrentExchangeRate | None: ...

    def get_current_rates(
        self,
        rate_type: ExchangeRateType,
        currency: Currency | None = None,
    ) -> list[CurrentExchangeRate] | CurrentExchangeRate | None:
        """Return every live quote of ``rate_type``, or the first one for ``currency``."""

        payload = self.http.get_json(
            "/pubinfo",
            flags=("exchange",),
            params=[("coursid", rate_type.course_id)],
        )
        if not isinstance(payload, list):
            raise UpstreamError(f"Unexpected live rate payload for {rate_type.value}")
        rates = [CurrentExchangeRate.from_json(row) for row in payload]
        if currency is None:
            return rates
        return next((rate for rate in rates if rate.currency == currency.value), None)
