"""Process-lifetime memo of archived exchange rates keyed by calendar date."""

from __future__ import annotations

import threading
from datetime import date
from typing import Callable

from public24.p24.models import Currency, ExchangeRateHistory
from public24.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["ExchangeRateCache"]

HistoryLoader = Callable[[date], ExchangeRateHistory]


class ExchangeRateCache:
    """Unbounded cache in front of an exchange rate history loader.

    Loads are single-flight per date: the first caller for a date fetches
    while later callers for that date wait on a per-date lock and then read
    the stored value. Different dates load concurrently. Entries are never
    evicted.
    """

    def __init__(self, loader: HistoryLoader) -> None:
        self._loader = loader
        self._entries: dict[date, ExchangeRateHistory] = {}
        self._key_locks: dict[date, threading.Lock] = {}
        self._lock = threading.Lock()

    def get_history_for_date(
        self,
        rate_date: date,
        currency: Currency | None = None,
    ) -> ExchangeRateHistory:
        """Return the history for ``rate_date``, optionally filtered to ``currency``.

        The filtered copy is built on every call and never stored.
        """

        history = self._get_or_load(rate_date)
        if currency is None:
            return history
        return history.for_currency(currency)

    def _get_or_load(self, rate_date: date) -> ExchangeRateHistory:
        with self._lock:
            cached = self._entries.get(rate_date)
            if cached is not None:
                return cached
            key_lock = self._key_locks.setdefault(rate_date, threading.Lock())
        with key_lock:
            with self._lock:
                cached = self._entries.get(rate_date)
            if cached is not None:
                return cached
            LOGGER.debug("Exchange rate history cache miss for %s", rate_date.isoformat())
            history = self._loader(rate_date)
            with self._lock:
                self._entries[rate_date] = history
                self._key_locks.pop(rate_date, None)
            return history

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, rate_date: object) -> bool:
        with self._lock:
            return rate_date in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
