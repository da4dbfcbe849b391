"""Intent dispatcher: turn an agent intent plus parameters into a message list."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Mapping

from public24.agent.intents import Intent
from public24.agent.messages import MessageListWithLinks, SimpleMessageList
from public24.agent.params import RequestParam, RequestParameters
from public24.errors import BadRequestError, UnsupportedIntentError
from public24.geo import GoogleMaps
from public24.p24.cache import ExchangeRateCache
from public24.p24.client import ExchangeRateClient
from public24.p24.locator import InfrastructureLocator
from public24.p24.models import Currency, DeviceType, ExchangeRateType
from public24.utils.formatting import format_currency, normalise_address
from public24.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["DEFAULT_MESSAGE_LIMIT", "AgentWebhookService"]

DEFAULT_MESSAGE_LIMIT = 20

MessageList = SimpleMessageList | MessageListWithLinks


def to_local_date(value: datetime | date) -> date:
    """Convert a moment to the calendar date of the system time zone."""

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().date()
        return value.date()
    return value


class AgentWebhookService:
    """Fulfil agent intents with Privat24 exchange rate and infrastructure data."""

    def __init__(
        self,
        rates: ExchangeRateClient,
        history: ExchangeRateCache,
        locator: InfrastructureLocator,
        maps: GoogleMaps,
        *,
        currency_format: Callable[[Decimal | None], str] = format_currency,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.rates = rates
        self.history = history
        self.locator = locator
        self.maps = maps
        self.currency_format = currency_format
        self.clock = clock

    def fulfill(
        self,
        intent_name: str | None,
        parameters: RequestParameters | Mapping[str, Any] | None = None,
    ) -> MessageList:
        """Dispatch ``intent_name`` and build its message list.

        Raises :class:`BadRequestError` for missing or unusable parameters
        and :class:`UnsupportedIntentError` for intents with no workflow.
        Upstream failures propagate unchanged.
        """

        intent = Intent.from_name(intent_name)
        if not isinstance(parameters, RequestParameters):
            parameters = RequestParameters(dict(parameters or {}))
        LOGGER.info("Fulfilling intent %s", intent)

        if intent is Intent.CURRENT_EXCHANGE_RATE:
            return self._current_exchange_rate(parameters)
        if intent is Intent.EXCHANGE_RATE_HISTORY:
            return self._exchange_rate_history(parameters)
        if intent is Intent.INFRASTRUCTURE_LOCATION:
            return self._infrastructure_location(parameters)
        raise UnsupportedIntentError(intent_name)

    def _current_exchange_rate(self, parameters: RequestParameters) -> SimpleMessageList:
        rate_type_name = parameters.get_string(
            RequestParam.EXCHANGE_RATE_TYPE, ExchangeRateType.NON_CASH.value
        )
        rate_type = ExchangeRateType.from_name(rate_type_name)
        if rate_type is None:
            raise BadRequestError(f"Unsupported exchange rate type: {rate_type_name}")
        currency = Currency.from_name(parameters.get_string_if_present(RequestParam.CURRENCY))

        if currency is not None:
            single = self.rates.get_current_rates(rate_type, currency)
            rates = [single] if single is not None else []
        else:
            rates = self.rates.get_current_rates(rate_type)

        lines = [
            self._describe_rate(rate.currency, rate.buy_rate, rate.sale_rate) for rate in rates
        ]
        return SimpleMessageList(
            header=f"Current exchange rate for {Currency.UAH}",
            messages=lines,
            fallback="No exchange rate found for current date" + _currency_suffix(currency),
        )

    def _exchange_rate_history(self, parameters: RequestParameters) -> SimpleMessageList:
        moment = parameters.get_date(RequestParam.DATE) or self.clock()
        local_date = to_local_date(moment)
        iso_date = local_date.isoformat()
        currency = Currency.from_name(parameters.get_string_if_present(RequestParam.CURRENCY))
        LOGGER.debug(
            "Retrieving currency exchange history for date %s and %s ccy",
            iso_date,
            currency.name if currency else "unspecified",
        )

        history = self.history.get_history_for_date(local_date, currency)
        lines = [
            self._describe_rate(rate.currency, rate.purchase.value, rate.sale.value)
            for rate in history.exchange_rates
        ]
        return SimpleMessageList(
            header=f"Exchange rate for {Currency.UAH} on {iso_date}",
            messages=lines,
            fallback=f"No exchange rate history found for date {iso_date}"
            + _currency_suffix(currency),
        )

    def _infrastructure_location(self, parameters: RequestParameters) -> MessageListWithLinks:
        device_type = DeviceType.from_name(
            parameters.get_string_if_present(RequestParam.INFRASTRUCTURE_TYPE)
        )
        if device_type is None:
            raise BadRequestError("No supported device type found in request")
        city = parameters.get_string(RequestParam.CITY, "") or ""
        address = parameters.get_string(RequestParam.ADDRESS, "") or ""
        limit = parameters.get_int(RequestParam.LIMIT, DEFAULT_MESSAGE_LIMIT)
        if limit is None or limit < 0:
            raise BadRequestError(f"Parameter 'limit' must not be negative, got {limit}")
        LOGGER.debug(
            "Retrieving infrastructure location data for device type '%s', city '%s', address '%s'",
            device_type,
            city,
            address,
        )

        infrastructure = self.locator.get_locations(device_type, city, address)
        messages: dict[str, str] = {}
        for index, device in enumerate(infrastructure.devices[:limit], start=1):
            label = f"{index}: {normalise_address(device.full_address_en)}"
            messages[label] = self.maps.coordinates_query(device.latitude, device.longitude)

        location = city + (f", {address}" if address else "")
        return MessageListWithLinks(
            header=f"{device_type} locations in {location}",
            messages_with_links=messages,
            fallback=f"No infrastructure found for location: {location}",
        )

    def _describe_rate(
        self, currency_code: str, purchase: Decimal | None, sale: Decimal | None
    ) -> str:
        return (
            f"{currency_code}: purchase = {self.currency_format(purchase)}"
            f" sale = {self.currency_format(sale)}"
        )


def _currency_suffix(currency: Currency | None) -> str:
    return f" and currency {currency}." if currency is not None else "."
