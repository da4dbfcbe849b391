"""Typed records and lookup enums for the Privat24 API."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping, Sequence

from public24.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = [
    "Currency",
    "ExchangeRateType",
    "DeviceType",
    "TieredRate",
    "ExchangeRateHistoryCurrency",
    "ExchangeRateHistory",
    "CurrentExchangeRate",
    "Device",
    "Infrastructure",
]


class _LookupEnum(str, Enum):
    """String enum with a forgiving, case-insensitive lookup by name or value."""

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_name(cls, name: str | None):
        """Return the member matching ``name`` or ``None`` when nothing matches."""

        if name is None:
            return None
        key = name.strip().lower().replace("_", "-").replace(" ", "-")
        if not key:
            return None
        for member in cls:
            if key in (member.value.lower(), member.name.lower().replace("_", "-")):
                return member
        return None


class Currency(_LookupEnum):
    """Currency codes quoted by PrivatBank."""

    UAH = "UAH"
    USD = "USD"
    EUR = "EUR"
    RUR = "RUR"
    RUB = "RUB"
    GBP = "GBP"
    CHF = "CHF"
    PLN = "PLN"
    CZK = "CZK"
    CAD = "CAD"
    JPY = "JPY"
    SEK = "SEK"
    NOK = "NOK"
    DKK = "DKK"
    BYN = "BYN"
    KZT = "KZT"
    GEL = "GEL"
    ILS = "ILS"
    CNY = "CNY"
    TRY = "TRY"
    AZN = "AZN"
    UZS = "UZS"
    TMT = "TMT"
    BTC = "BTC"


class ExchangeRateType(_LookupEnum):
    """Live quote feeds: cash desks and card/non-cash operations."""

    CASH = "cash"
    NON_CASH = "non-cash"

    @property
    def course_id(self) -> int:
        return _COURSE_IDS[self]


_COURSE_IDS = {ExchangeRateType.CASH: 5, ExchangeRateType.NON_CASH: 11}


class DeviceType(_LookupEnum):
    """Kinds of bank infrastructure the locator can search for."""

    ATM = "atm"
    TSO = "tso"

    @property
    def query_flag(self) -> str:
        return self.name.lower()


def _to_decimal(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        LOGGER.debug("Ignoring non-numeric rate value %r", value)
        return None


@dataclass(frozen=True, slots=True)
class TieredRate:
    """A commercial rate with the national-bank rate as fallback."""

    primary: Decimal | None = None
    fallback: Decimal | None = None

    @property
    def value(self) -> Decimal | None:
        return self.primary if self.primary is not None else self.fallback


@dataclass(frozen=True, slots=True)
class ExchangeRateHistoryCurrency:
    """One currency row of an archived exchange rate snapshot."""

    currency: str
    purchase: TieredRate
    sale: TieredRate
    base_currency: str = "UAH"

    @property
    def purchase_rate(self) -> Decimal | None:
        return self.purchase.primary

    @property
    def purchase_rate_nb(self) -> Decimal | None:
        return self.purchase.fallback

    @property
    def sale_rate(self) -> Decimal | None:
        return self.sale.primary

    @property
    def sale_rate_nb(self) -> Decimal | None:
        return self.sale.fallback

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "ExchangeRateHistoryCurrency":
        return cls(
            currency=str(payload.get("currency") or ""),
            purchase=TieredRate(
                _to_decimal(payload.get("purchaseRate")),
                _to_decimal(payload.get("purchaseRateNB")),
            ),
            sale=TieredRate(
                _to_decimal(payload.get("saleRate")),
                _to_decimal(payload.get("saleRateNB")),
            ),
            base_currency=str(payload.get("baseCurrency") or "UAH"),
        )


@dataclass(frozen=True, slots=True)
class ExchangeRateHistory:
    """Archived exchange rates published by the bank for one calendar day."""

    date: date
    bank: str
    base_currency: int | None
    base_currency_literal: str
    exchange_rates: tuple[ExchangeRateHistoryCurrency, ...] = field(default_factory=tuple)

    def for_currency(self, currency: Currency | str) -> "ExchangeRateHistory":
        """Return a copy holding only the rows for ``currency``."""

        code = currency.value if isinstance(currency, Currency) else str(currency)
        return replace(
            self,
            exchange_rates=tuple(rate for rate in self.exchange_rates if rate.currency == code),
        )

    @classmethod
    def from_json(
        cls,
        payload: Mapping[str, Any],
        *,
        date_format: str = "%d.%m.%Y",
        requested_date: date | None = None,
    ) -> "ExchangeRateHistory":
        raw_date = payload.get("date")
        if raw_date:
            parsed_date = datetime.strptime(str(raw_date), date_format).date()
        elif requested_date is not None:
            parsed_date = requested_date
        else:
            raise ValueError("Exchange rate history payload carries no date")
        rates: list[ExchangeRateHistoryCurrency] = []
        for row in payload.get("exchangeRate") or ():
            record = ExchangeRateHistoryCurrency.from_json(row)
            # The archive lists the base currency itself without a code.
            if not record.currency:
                continue
            rates.append(record)
        base_currency = payload.get("baseCurrency")
        return cls(
            date=parsed_date,
            bank=str(payload.get("bank") or ""),
            base_currency=int(base_currency) if base_currency is not None else None,
            base_currency_literal=str(payload.get("baseCurrencyLit") or "UAH"),
            exchange_rates=tuple(rates),
        )


@dataclass(frozen=True, slots=True)
class CurrentExchangeRate:
    """Live buy/sale quote for one currency."""

    currency: str
    base_currency: str
    buy_rate: Decimal | None
    sale_rate: Decimal | None

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "CurrentExchangeRate":
        return cls(
            currency=str(payload.get("ccy") or ""),
            base_currency=str(payload.get("base_ccy") or "UAH"),
            buy_rate=_to_decimal(payload.get("buy")),
            sale_rate=_to_decimal(payload.get("sale")),
        )


@dataclass(frozen=True, slots=True)
class Device:
    """ATM or self-service terminal location."""

    full_address_en: str
    latitude: Decimal | None
    longitude: Decimal | None
    type: str | None = None
    city_en: str | None = None
    place_ua: str | None = None

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "Device":
        return cls(
            full_address_en=str(payload.get("fullAddressEn") or ""),
            latitude=_to_decimal(payload.get("latitude")),
            longitude=_to_decimal(payload.get("longitude")),
            type=payload.get("type"),
            city_en=payload.get("cityEN"),
            place_ua=payload.get("placeUa"),
        )


@dataclass(frozen=True, slots=True)
class Infrastructure:
    """Devices returned for one location query, in API order."""

    devices: tuple[Device, ...] = field(default_factory=tuple)
    city: str | None = None
    address: str | None = None

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "Infrastructure":
        devices: Sequence[Mapping[str, Any]] = payload.get("devices") or ()
        return cls(
            devices=tuple(Device.from_json(device) for device in devices),
            city=payload.get("city"),
            address=payload.get("address"),
        )
